"""
Install use case — run the distributor and report the result.

Resolves defaults from settings, calls ``install()`` and turns any
distribution error into a serialisable result the CLI can print.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from guidedist.core.config.loader import ConfigError, load_settings
from guidedist.core.errors import FetchError, TargetExistsError, TargetWriteError
from guidedist.core.models.guideline import InstallMode
from guidedist.core.services.distributor import InstallOutcome, install


@dataclass
class InstallResult:
    """Result of an install request."""

    mode: InstallMode
    target: Path | None = None
    source: str = ""
    outcome: InstallOutcome | None = None
    error: str | None = None
    error_kind: str | None = None  # config | fetch | exists | write

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "mode": self.mode.value,
            "target": str(self.target) if self.target else None,
            "source": self.source,
            "bytes_written": self.outcome.bytes_written if self.outcome else 0,
            "replaced": self.outcome.replaced if self.outcome else False,
            "error": self.error,
            "error_kind": self.error_kind,
        }


def run_install(
    mode: InstallMode,
    *,
    target: str | Path | None = None,
    source: str | None = None,
    overwrite: bool = False,
    config_path: Path | None = None,
) -> InstallResult:
    """Install guidelines, filling unspecified options from settings.

    Args:
        mode: CREATE or APPEND.
        target: Target file (default: settings.target, relative to cwd).
        source: Source URI (default: settings.source).
        overwrite: Allow CREATE to replace a non-empty target.
        config_path: Explicit guidedist.yml.

    Returns:
        InstallResult; ``error`` is set when the install failed.
    """
    result = InstallResult(mode=InstallMode(mode))

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        result.error = str(e)
        result.error_kind = "config"
        return result

    result.target = Path(target) if target else Path(settings.target)
    result.source = source or settings.source

    try:
        result.outcome = install(
            result.target,
            result.source,
            result.mode,
            overwrite=overwrite,
            timeout=settings.timeout,
            user_agent=settings.user_agent,
        )
    except TargetExistsError as e:
        result.error = str(e)
        result.error_kind = "exists"
    except FetchError as e:
        result.error = str(e)
        result.error_kind = "fetch"
    except TargetWriteError as e:
        result.error = str(e)
        result.error_kind = "write"

    return result
