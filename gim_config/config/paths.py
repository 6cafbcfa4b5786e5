"""Config file location helpers.

The config file always lives at ``~/.config/gim/config.toml`` regardless of
platform. Nothing here touches the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .exceptions import PathResolutionError

logger = logging.getLogger(__name__)

__all__ = ["APP_DIR_NAME", "CONFIG_FILE_NAME", "resolve_config_dir", "resolve_path"]

APP_DIR_NAME = "gim"
CONFIG_FILE_NAME = "config.toml"


def _home_dir() -> Path:
    """Return the current user's home directory or raise PathResolutionError."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError, OSError) as exc:
        raise PathResolutionError("Home directory not found", cause=exc) from exc

    # expanduser() hands back "~" untouched when it cannot resolve it
    if not str(home) or not home.is_absolute():
        raise PathResolutionError(f"Home directory not found (got {str(home)!r})")
    return home


def resolve_config_dir(home: Optional[Path] = None) -> Path:
    """Return the application's config directory (``<home>/.config/gim``)."""
    if home is None:
        home = _home_dir()
    elif not Path(home).is_absolute():
        raise PathResolutionError(f"Home directory must be absolute (got {str(home)!r})")
    return Path(home) / ".config" / APP_DIR_NAME


def resolve_path(home: Optional[Path] = None) -> Path:
    """Return the absolute path of the config file."""
    path = resolve_config_dir(home) / CONFIG_FILE_NAME
    logger.debug("Config file is %s", path)
    return path
