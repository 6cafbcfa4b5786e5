from __future__ import annotations

"""Load-or-initialise store for the gim TOML configuration file.

A :class:`ConfigStore` is a plain handle owned by the caller. It keeps no
document in memory: every :meth:`ConfigStore.load` re-reads the file and
every :meth:`ConfigStore.save` rewrites it in full.

On first use the default document is written to
``~/.config/gim/config.toml``; an existing file is never replaced by the
defaults, even when it cannot be parsed.
"""

import copy
import logging
import os
import stat
import tempfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

import toml

from . import paths
from .defaults import default_document
from .exceptions import (
    ConfigIOError,
    ConfigKeyError,
    ConfigTypeError,
    ParseError,
    SerializationError,
)

logger = logging.getLogger(__name__)

__all__ = ["ConfigStore"]


def _dump(doc: Any, path: Path) -> str:
    """Serialise *doc* to TOML text that parses back to an equal document.

    The ``toml`` encoder writes some values its decoder rejects (mixed-type
    arrays) and silently drops others (``None``), so the text is re-parsed
    and compared before anything touches the disk.
    """
    if not isinstance(doc, Mapping):
        raise SerializationError(
            f"Config document must be a mapping, not {type(doc).__name__}", path
        )
    doc = dict(doc)
    try:
        text = toml.dumps(doc)
        reparsed = toml.loads(text)
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Failed to serialize config: {exc}", path, cause=exc) from exc

    if reparsed != doc:
        raise SerializationError(
            "Config document holds values TOML cannot store faithfully "
            "(None, mixed-type arrays or non-TOML objects)",
            path,
        )
    return text


def _new_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_atomic(path: Path, text: str, exclusive: bool = False) -> bool:
    """Write *text* to *path* via a temp file beside the real target.

    Symlinks are followed so the link itself survives, and the mode of an
    existing target is kept. With *exclusive* the target is only created,
    never replaced; ``False`` is returned when it already exists.
    """
    target = Path(os.path.realpath(path))
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigIOError(
            f"Could not create config directory {target.parent}: {exc}", path, cause=exc
        ) from exc

    tmp_name: Optional[str] = None
    try:
        try:
            mode = stat.S_IMODE(os.stat(target).st_mode)
        except FileNotFoundError:
            mode = _new_file_mode()

        fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
            fh.write(text)
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_name, mode)

        if exclusive:
            try:
                os.link(tmp_name, target)
            except FileExistsError:
                return False
        else:
            os.replace(tmp_name, target)
            tmp_name = None
        return True
    except OSError as exc:
        raise ConfigIOError(f"Failed to write config file: {exc}", path, cause=exc) from exc
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp_name)


class ConfigStore:
    """Resolve, initialise, read and write the config file.

    Args:
        path: Pin the config file location. When omitted the path is
            resolved afresh on every call from *home*.
        defaults: Document written when no file exists. Defaults to
            :data:`~gim_config.config.defaults.DEFAULT_DOCUMENT`.
        home: Home directory used for path resolution instead of the
            current user's.
    """

    def __init__(self, path: Optional[os.PathLike] = None,
                 defaults: Optional[Mapping] = None,
                 home: Optional[os.PathLike] = None) -> None:
        self._path = Path(path) if path is not None else None
        self._defaults = copy.deepcopy(dict(defaults)) if defaults is not None else None
        self._home = Path(home) if home is not None else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self._path!r}, home={self._home!r})"

    # ------------------------------------------------------------------
    # Core sequence
    # ------------------------------------------------------------------
    def resolve_path(self) -> Path:
        """Return the config file path, raising PathResolutionError if unknown."""
        if self._path is not None:
            return self._path
        return paths.resolve_path(self._home)

    def defaults(self) -> Dict[str, Any]:
        """Return a fresh copy of the document written on first run."""
        if self._defaults is not None:
            return copy.deepcopy(self._defaults)
        return default_document()

    def ensure_default(self, path: Path) -> bool:
        """Write the default document to *path* unless a file is already there.

        The file is created exclusively, so a config written by another
        process in the meantime is kept. Returns ``True`` when the file was
        created.
        """
        path = Path(path)
        if path.exists():
            return False

        if not _write_atomic(path, _dump(self.defaults(), path), exclusive=True):
            logger.debug("Config appeared while writing defaults: %s", path)
            return False
        logger.info("Created default config: %s", path)
        return True

    def load(self) -> Dict[str, Any]:
        """Read and parse the config file, creating it from defaults first if absent."""
        return self._load(self.resolve_path())

    def save(self, doc: Mapping) -> Path:
        """Replace the config file with the full contents of *doc*."""
        path = self.resolve_path()
        self._save(path, doc)
        return path

    def _load(self, path: Path) -> Dict[str, Any]:
        self.ensure_default(path)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigIOError(f"Failed to read config file: {exc}", path, cause=exc) from exc

        try:
            doc = toml.loads(text)
        except toml.TomlDecodeError as exc:
            raise ParseError(
                f"Invalid TOML: {exc}",
                path,
                lineno=getattr(exc, "lineno", None),
                colno=getattr(exc, "colno", None),
                cause=exc,
            ) from exc

        logger.debug("Loaded config from %s", path)
        return doc

    def _save(self, path: Path, doc: Mapping) -> None:
        _write_atomic(path, _dump(doc, path))
        logger.info("Saved config: %s", path)

    # ------------------------------------------------------------------
    # Section/key helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _section(doc: Dict[str, Any], section: str, path: Path) -> Dict[str, Any]:
        if section not in doc:
            raise ConfigKeyError(f"Section '{section}' not found", section, path=path)
        table = doc[section]
        if not isinstance(table, dict):
            raise ConfigTypeError(f"Section '{section}' is not a table", section, path=path)
        return table

    def get_value(self, section: str, key: str) -> Any:
        """Return a copy of ``[section] key`` from the current file."""
        path = self.resolve_path()
        table = self._section(self._load(path), section, path)
        if key not in table:
            raise ConfigKeyError(
                f"Key '{key}' not found in section '{section}'", section, key, path=path
            )
        return copy.deepcopy(table[key])

    def update_value(self, section: str, key: str, value: Any) -> bool:
        """Set ``[section] key`` to *value* and save.

        The file is left untouched when the stored value is already equal.
        Returns ``True`` when the file was rewritten.
        """
        path = self.resolve_path()
        doc = self._load(path)
        table = self._section(doc, section, path)

        if key in table:
            existing = table[key]
            if type(existing) is type(value) and existing == value:
                logger.debug("Config [%s] %s unchanged", section, key)
                return False

        table[key] = value
        self._save(path, doc)
        return True
