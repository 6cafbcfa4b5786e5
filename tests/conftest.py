"""Shared fixtures for gim_config tests.

Every fixture points the store at a temporary directory so the real
``~/.config/gim/config.toml`` is never touched.
"""

import logging
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from gim_config.config import ConfigStore

# Configure test logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


@pytest.fixture
def temp_dir():
    """Creates a temporary directory for test operations."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def fake_home(temp_dir, monkeypatch):
    """Points ``Path.home()`` at an empty temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    return home


@pytest.fixture
def config_path(temp_dir):
    """Path of a config file that does not exist yet."""
    return temp_dir / "nested" / "gim" / "config.toml"


@pytest.fixture
def store(config_path):
    """ConfigStore pinned to ``config_path``."""
    return ConfigStore(config_path)


@pytest.fixture
def no_home(monkeypatch):
    """Makes home directory resolution fail."""
    def _raise(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_raise))


@pytest.fixture
def sample_document():
    """A document that differs from the defaults in shape and values."""
    return {
        "title": "custom",
        "ai": {
            "model": "gpt-4o-mini",
            "apikey": "sk-test",
            "url": "https://api.example.com/v1",
            "language": "French",
            "temperature": 0.25,
        },
        "update": {
            "tried": 3,
            "max_try": 10,
            "enabled": True,
            "channels": ["stable", "beta"],
        },
        "extra": {
            "nested": {
                "depth": 2,
                "flags": [1, 2, 3],
            },
        },
    }
