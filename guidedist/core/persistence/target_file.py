"""
Target file persistence — inspect, replace and append to the local file.

Writes are atomic (write to temp file, then rename) so the target is either
fully updated or left exactly as it was. Parent directories are never
created: a missing parent is a write error, not something to paper over.
A symlinked target stays a symlink; the file it points at is updated.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from guidedist.core.errors import TargetWriteError
from guidedist.core.models.guideline import TargetFile

logger = logging.getLogger(__name__)

# Separator placed between existing content and appended guidelines
APPEND_SEPARATOR = "\n"

_TMP_PREFIX = ".guidedist_"
_TMP_SUFFIX = ".tmp"

# Existing bytes survive a decode/encode round trip untouched
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def inspect_target(path: Path) -> TargetFile:
    """Snapshot the target file (existence and current contents).

    Raises:
        TargetWriteError: If the path is a directory or cannot be read.
    """
    if path.is_dir():
        raise TargetWriteError(path, f"{path} is a directory, not a file")
    if not path.exists():
        return TargetFile(path=path)

    try:
        contents = path.read_bytes().decode(_ENCODING, _ERRORS)
    except OSError as e:
        raise TargetWriteError(path, f"Cannot read {path}: {e}") from e
    return TargetFile(path=path, exists=True, contents=contents)


def compose_append(existing: str, text: str) -> str:
    """Return the contents after appending ``text`` to ``existing``.

    An empty target gets the text alone; otherwise a single blank-line
    separator goes between the old content and the new.
    """
    if not existing:
        return text
    return existing + APPEND_SEPARATOR + text


def write_target(path: Path, text: str) -> int:
    """Replace the target's contents with ``text`` (atomic write).

    Returns:
        Number of bytes written.

    Raises:
        TargetWriteError: If the file cannot be written.
    """
    data = text.encode(_ENCODING, _ERRORS)
    _atomic_write(path, data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
    return len(data)


def append_target(path: Path, text: str) -> int:
    """Append ``text`` after the target's existing content (atomic write).

    Returns:
        Number of bytes added to the file.

    Raises:
        TargetWriteError: If the file cannot be read or written.
    """
    target = inspect_target(path)
    existing = target.contents or ""
    data = compose_append(existing, text).encode(_ENCODING, _ERRORS)
    _atomic_write(path, data)
    added = len(data) - len(existing.encode(_ENCODING, _ERRORS))
    logger.debug("Appended %d bytes to %s", added, path)
    return added


def _atomic_write(path: Path, data: bytes) -> None:
    """Write ``data`` to a temp file beside ``path``, then rename over it."""
    try:
        dest = path.resolve(strict=False) if path.is_symlink() else path
    except (OSError, RuntimeError) as e:  # symlink loop
        raise TargetWriteError(path, f"Cannot resolve {path}: {e}") from e

    mode = _target_mode(dest)
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=dest.parent,
            prefix=_TMP_PREFIX,
            suffix=_TMP_SUFFIX,
        )
    except OSError as e:
        raise TargetWriteError(path, f"Cannot write {path}: {e}") from e

    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        os.chmod(tmp, mode)
        os.replace(tmp, dest)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        logger.error("Failed to write %s: %s", path, e)
        raise TargetWriteError(path, f"Cannot write {path}: {e}") from e


def _target_mode(path: Path) -> int:
    """Permission bits for the final file: existing file's, or umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except OSError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
