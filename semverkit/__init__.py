"""
semverkit/__init__.py — Public API exports
"""

from semverkit.core.config import DEFAULT_CONFIG, SemverConfig
from semverkit.core.exceptions import (
    ConfigError,
    InvalidVersionError,
    SemverError,
)
from semverkit.core.semver import Semver, new_semver
from semverkit.core.types import NO_PATCH, SemverFields, VersionPart
from semverkit.core.validators import (
    assert_valid_semver,
    assert_valid_version_text,
    validate_semver,
    validate_version_text,
)
from semverkit.version import VERSION_INFO, __version__

__all__ = [
    "Semver",
    "SemverFields",
    "VersionPart",
    "NO_PATCH",
    "new_semver",
    "SemverConfig",
    "DEFAULT_CONFIG",
    "SemverError",
    "InvalidVersionError",
    "ConfigError",
    "validate_semver",
    "validate_version_text",
    "assert_valid_semver",
    "assert_valid_version_text",
    "VERSION_INFO",
    "__version__",
]
