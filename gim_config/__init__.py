"""Top-level package for gim's configuration handling.

Front-ends should import from here (or :mod:`gim_config.config`) rather than
from the internal modules.
"""

from .config import ConfigError, ConfigStore, load, save  # re-export for convenience

__all__: list[str] = [
    "ConfigError",
    "ConfigStore",
    "load",
    "save",
]
