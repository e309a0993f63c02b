"""
Domain models — Pydantic types for guideline distribution.

    from guidedist.core.models import GuidelineDocument, TargetFile, InstallMode, Settings
"""

from guidedist.core.models.guideline import GuidelineDocument, InstallMode, TargetFile
from guidedist.core.models.settings import DEFAULT_SOURCE_URI, DEFAULT_TARGET, Settings

__all__ = [
    # guideline.py
    "GuidelineDocument",
    "InstallMode",
    "TargetFile",
    # settings.py
    "DEFAULT_SOURCE_URI",
    "DEFAULT_TARGET",
    "Settings",
]
