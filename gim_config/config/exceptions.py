from __future__ import annotations

"""Configuration exception classes.

Every failure of the config store is raised as a subclass of
:class:`ConfigError` so host applications can choose their own failure
policy with a single ``except`` clause. The underlying OS or parser error is
kept on ``cause`` and chained via ``raise ... from``.
"""

from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class ConfigError(Exception):
    """Base exception for all configuration errors."""

    def __init__(self, message: str, path: Optional[PathLike] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
        self.cause = cause

    def __str__(self) -> str:
        if self.path is not None:
            return f"[Config: {self.path}] {super().__str__()}"
        return super().__str__()


class PathResolutionError(ConfigError):
    """Raised when the home or config directory cannot be determined."""
    pass


class ConfigIOError(ConfigError):
    """Raised when reading, writing or creating directories fails.

    The OS error number is exposed as ``errno`` when available.
    """

    def __init__(self, message: str, path: Optional[PathLike] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, path, cause)
        self.errno = getattr(cause, "errno", None)


class ParseError(ConfigError):
    """Raised when the config file is not well-formed TOML.

    ``lineno`` and ``colno`` point at the offending position when the
    parser reports one.
    """

    def __init__(self, message: str, path: Optional[PathLike] = None,
                 lineno: Optional[int] = None, colno: Optional[int] = None,
                 cause: Optional[Exception] = None) -> None:
        super().__init__(message, path, cause)
        self.lineno = lineno
        self.colno = colno


class SerializationError(ConfigError):
    """Raised when a document cannot be encoded as TOML."""
    pass


class ConfigKeyError(ConfigError):
    """Raised when a section or key is missing from the document."""

    def __init__(self, message: str, section: str, key: Optional[str] = None,
                 path: Optional[PathLike] = None) -> None:
        super().__init__(message, path)
        self.section = section
        self.key = key


class ConfigTypeError(ConfigError):
    """Raised when a section exists but is not a table."""

    def __init__(self, message: str, section: str,
                 path: Optional[PathLike] = None) -> None:
        super().__init__(message, path)
        self.section = section
