"""
semverkit/core/exceptions.py
============================
Exception hierarchy for semverkit.

Parsing never raises: ``Semver.parse`` and ``Semver.from_record`` report
failure through their boolean result. These exceptions are raised only at
explicit validation boundaries (``assert_valid_semver``) and when building
configuration.
"""

from __future__ import annotations
from typing import List, Optional


class SemverError(Exception):
    """Base exception for all semverkit errors."""

    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidVersionError(SemverError):
    """Raised when a version value fails validation.

    ``errors`` holds every problem found, in field order, so callers can
    report all of them at once instead of fixing one at a time.
    """

    def __init__(self, message: str, errors: List[str], context: dict = None):
        super().__init__(message, context)
        self.errors = errors


class ConfigError(SemverError):
    """Raised for an unknown configuration profile."""

    pass
