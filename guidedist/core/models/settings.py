"""
Settings model — loaded from guidedist.yml, or defaults when absent.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from guidedist import __version__

DEFAULT_SOURCE_URI = (
    "https://raw.githubusercontent.com/forrestchang/andrej-karpathy-skills/main/CLAUDE.md"
)
DEFAULT_TARGET = "CLAUDE.md"
DEFAULT_TIMEOUT = 10.0


class Settings(BaseModel):
    """Where to fetch guidelines from and where to put them."""

    source: str = DEFAULT_SOURCE_URI
    target: str = DEFAULT_TARGET
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    user_agent: str = f"guidedist/{__version__}"

    @field_validator("source", "target")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value.strip()
