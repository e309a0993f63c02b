"""
Guideline models — the document being distributed and the file receiving it.

The guideline text is opaque: nothing here looks inside it.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel


class InstallMode(str, Enum):
    """How the guideline text lands in the target file."""

    CREATE = "create"  # full replacement, new project
    APPEND = "append"  # blank line + text after existing content


class GuidelineDocument(BaseModel):
    """Guideline text as fetched from its source."""

    source_uri: str
    text: str

    @property
    def size(self) -> int:
        """Size of the text in UTF-8 bytes."""
        return len(self.text.encode("utf-8"))


class TargetFile(BaseModel):
    """Snapshot of a local target file before it is written."""

    path: Path
    exists: bool = False
    contents: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.contents
