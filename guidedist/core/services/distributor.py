"""
Guideline distributor — fetch the canonical guidelines into a target file.

    install(target, source, InstallMode.CREATE)   # new project
    install(target, source, InstallMode.APPEND)   # existing project

Sequence: check the target (CREATE only), fetch, then write. The fetch
always completes before the filesystem is touched, so a failed fetch
leaves the target exactly as it was.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from guidedist.core.errors import TargetExistsError
from guidedist.core.models.guideline import InstallMode
from guidedist.core.models.settings import DEFAULT_TIMEOUT
from guidedist.core.persistence.target_file import (
    append_target,
    inspect_target,
    write_target,
)
from guidedist.core.services.fetch import fetch_guideline

logger = logging.getLogger(__name__)


@dataclass
class InstallOutcome:
    """What an install did to the target file."""

    mode: InstallMode
    path: Path
    source_uri: str
    bytes_written: int
    replaced: bool = False  # CREATE over an existing non-empty file


def install(
    target_path: Path,
    source_uri: str,
    mode: InstallMode = InstallMode.CREATE,
    *,
    overwrite: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str | None = None,
) -> InstallOutcome:
    """Deliver the guideline text at ``source_uri`` into ``target_path``.

    Args:
        target_path: Local file to create or append to.
        source_uri: Location of the canonical guideline text.
        mode: CREATE replaces the file, APPEND adds after existing content.
        overwrite: Allow CREATE to replace a non-empty file.
        timeout: Network timeout in seconds.
        user_agent: User-Agent header for http(s) sources.

    Returns:
        InstallOutcome describing the write.

    Raises:
        TargetExistsError: CREATE on a non-empty target without overwrite.
        FetchError: The source could not be read.
        TargetWriteError: The target could not be written (an OSError).
    """
    mode = InstallMode(mode)
    target_path = Path(target_path)

    target = inspect_target(target_path)
    if mode is InstallMode.CREATE and not target.is_empty and not overwrite:
        raise TargetExistsError(target_path)

    doc = fetch_guideline(source_uri, timeout=timeout, user_agent=user_agent)

    if mode is InstallMode.CREATE:
        written = write_target(target_path, doc.text)
        replaced = not target.is_empty
    else:
        written = append_target(target_path, doc.text)
        replaced = False

    logger.info(
        "Installed guidelines from %s into %s (%s, %d bytes)",
        source_uri, target_path, mode.value, written,
    )
    return InstallOutcome(
        mode=mode,
        path=target_path,
        source_uri=source_uri,
        bytes_written=written,
        replaced=replaced,
    )
