from __future__ import annotations

"""Logging setup for applications embedding gim_config.

The library itself only emits records through module loggers. Host
applications call :func:`setup_logging` once at start-up if they want them
printed.
"""

import logging
import logging.config
import os
from typing import Optional, Union

__all__ = ["setup_logging"]

_LEVEL_NAMES = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure console logging.

    *level* wins over the ``GIM_LOG_LEVEL`` environment variable; ``INFO``
    is used when neither is set or the value is not a known level name.
    """
    if level is None:
        level = os.environ.get("GIM_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        level = level.strip().upper()
        if level not in _LEVEL_NAMES:
            level = "INFO"

    config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'DEBUG',
            },
        },
        'root': {
            'level': level,
            'handlers': ['console'],
        },
    }
    logging.config.dictConfig(config)

    _apply_debug_overrides()


def _apply_debug_overrides() -> None:
    """Set loggers named in ``GIM_DEBUG_MODULES`` (comma separated) to DEBUG."""
    extra_modules = os.environ.get('GIM_DEBUG_MODULES', '').strip()
    targets = [m.strip() for m in extra_modules.split(',') if m.strip()]
    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        logger.info("Debug override active for logger '%s'", name)
