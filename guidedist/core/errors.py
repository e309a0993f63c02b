"""
Error taxonomy for guideline distribution.

Every failure the distributor can raise derives from ``GuidelineError`` so
callers can catch the whole family at once. ``TargetWriteError`` is also an
``OSError`` (``IOError``), so code that only cares about local filesystem
failures can keep catching those.
"""

from __future__ import annotations

from pathlib import Path


class GuidelineError(Exception):
    """Base class for guideline distribution failures."""


class FetchError(GuidelineError):
    """The remote source is unreachable or returned a non-success status."""

    def __init__(self, source_uri: str, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.source_uri = source_uri
        self.status = status


class TargetExistsError(GuidelineError):
    """CREATE would clobber a target that already has content."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            f"{path} already exists and is not empty. "
            "Use --force to overwrite it, or 'append' to add to it."
        )
        self.path = path


class TargetWriteError(GuidelineError, OSError):
    """The target file could not be written."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
