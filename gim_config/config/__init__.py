"""TOML configuration store for gim.

The module-level helpers build a throwaway :class:`ConfigStore` on each call;
nothing is cached between calls. Applications that want a fixed location (or
tests using a temporary directory) should hold their own ``ConfigStore``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .defaults import DEFAULT_DOCUMENT, default_document
from .exceptions import (
    ConfigError,
    ConfigIOError,
    ConfigKeyError,
    ConfigTypeError,
    ParseError,
    PathResolutionError,
    SerializationError,
)
from .paths import resolve_config_dir, resolve_path
from .store import ConfigStore

__all__ = [
    "ConfigStore",
    "DEFAULT_DOCUMENT",
    "default_document",
    "resolve_config_dir",
    "resolve_path",
    "load",
    "save",
    "get_value",
    "update_value",
    "ConfigError",
    "ConfigIOError",
    "ConfigKeyError",
    "ConfigTypeError",
    "ParseError",
    "PathResolutionError",
    "SerializationError",
]


def load(path: Optional[Path] = None) -> Dict[str, Any]:
    return ConfigStore(path).load()


def save(doc: Mapping[str, Any], path: Optional[Path] = None) -> Path:
    return ConfigStore(path).save(doc)


def get_value(section: str, key: str, path: Optional[Path] = None) -> Any:
    return ConfigStore(path).get_value(section, key)


def update_value(section: str, key: str, value: Any, path: Optional[Path] = None) -> bool:
    return ConfigStore(path).update_value(section, key, value)
