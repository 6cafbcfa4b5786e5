"""Built-in default configuration written on first run."""

from __future__ import annotations

import copy
from typing import Any, Dict

__all__ = ["DEFAULT_DOCUMENT", "default_document"]

DEFAULT_DOCUMENT: Dict[str, Dict[str, Any]] = {
    "update": {
        "tried": 0,
        "max_try": 5,
        "last_try_day": "2000-01-01",
        "try_interval_days": 30,
    },
    "ai": {
        "model": "",
        "apikey": "",
        "url": "",
        "language": "English",
    },
}


def default_document() -> Dict[str, Any]:
    """Return a fresh deep copy of :data:`DEFAULT_DOCUMENT`."""
    return copy.deepcopy(DEFAULT_DOCUMENT)
