"""
Config check use case — validate guidedist.yml and report issues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import urlparse

from guidedist.core.config.loader import ConfigError, find_config_file, load_settings
from guidedist.core.models.settings import Settings
from guidedist.core.services.fetch import SUPPORTED_SCHEMES


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    settings: Settings | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "source": self.settings.source if self.settings else None,
            "target": self.settings.target if self.settings else None,
            "timeout": self.settings.timeout if self.settings else None,
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate settings and report issues.

    A missing guidedist.yml is not an error: defaults apply, and a
    warning says so.
    """
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()
        if config_path is None:
            result.warnings.append("No guidedist.yml found. Using built-in defaults.")

    result.config_path = config_path

    try:
        settings = load_settings(config_path, search=False)
        result.settings = settings
    except ConfigError as e:
        result.errors.append(str(e))
        return result

    # Semantic checks
    scheme = urlparse(settings.source).scheme.lower()
    if scheme not in SUPPORTED_SCHEMES:
        result.errors.append(
            f"Unsupported source scheme {scheme or '(none)'!r} in {settings.source!r}."
        )
    elif scheme == "http":
        result.warnings.append("Source uses plain http. Prefer https.")

    target = Path(settings.target)
    if target.is_absolute():
        result.warnings.append(
            f"Target {settings.target!r} is absolute. It is usually relative to the project."
        )
    if not target.suffix.lower() == ".md":
        result.warnings.append(f"Target {settings.target!r} is not a Markdown (.md) file.")

    result.valid = len(result.errors) == 0
    return result
