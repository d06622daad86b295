"""
semverkit/core/validators.py
============================
Strict checks for version values.

``Semver.parse`` is deliberately lenient (it only rejects a major that
starts with a letter). Use these at boundaries where a well-formed
``MAJOR.MINOR[.PATCH][-SUFFIX]`` is required:

    - major and minor non-empty and all digits (major may carry a ``v``)
    - patch, when present, all digits
    - suffix, when present, free of ``.`` so the value formats back to
      something ``parse`` reads identically

``validate_*`` return a list of error strings; ``assert_valid_*`` raise
**InvalidVersionError** with the full list.
"""
from __future__ import annotations

import re
from typing import List, Optional, Union

from semverkit.core.config import SemverConfig
from semverkit.core.exceptions import InvalidVersionError
from semverkit.core.numeric import to_text
from semverkit.core.semver import Semver
from semverkit.core.types import SemverFields


DIGITS_RE = re.compile(r'^[0-9]+$')
V_PREFIX_RE = re.compile(r'^[vV]')

VersionLike = Union[Semver, SemverFields]


def _check_digits(name: str, value: str, errors: List[str]) -> None:
    if value == "":
        errors.append(f"{name} is empty")
    elif not DIGITS_RE.match(value):
        errors.append(f"{name} '{value}' is not a non-negative integer")


def validate_semver(
    value: VersionLike,
    config: Optional[SemverConfig] = None,
) -> List[str]:
    """Validate a Semver or SemverFields. Returns list of errors."""
    cfg = config or SemverConfig()
    errors: List[str] = []

    major, minor, patch, suffix = (
        None if v is None else to_text(v)
        for v in (value.major, value.minor, value.patch, value.suffix)
    )
    if cfg.allow_v_prefix and V_PREFIX_RE.match(major or ""):
        major = major[1:]
    _check_digits("major", major or "", errors)
    _check_digits("minor", minor or "", errors)

    if patch is not None:
        _check_digits("patch", patch, errors)

    if suffix is not None and "." in suffix:
        errors.append(
            f"suffix '{suffix}' contains '.', would not parse back unchanged"
        )
    if suffix and patch is None:
        errors.append(f"suffix '{suffix}' set without a patch level")
    return errors


def validate_version_text(
    text: str,
    config: Optional[SemverConfig] = None,
) -> List[str]:
    """Parse ``text`` and validate the result. Returns list of errors."""
    sv = Semver(config=config or SemverConfig())
    if not sv.parse(text):
        return [f"'{text}' is not a version string"]
    errors = validate_semver(sv, config)
    # parse() drops everything past minor when there are 4+ segments
    if text.count(".") > 2:
        errors.append(f"'{text}' has more than three dot-separated segments")
    return errors


def assert_valid_semver(
    value: VersionLike,
    config: Optional[SemverConfig] = None,
) -> None:
    """Validate and raise InvalidVersionError on any violation."""
    errors = validate_semver(value, config)
    if errors:
        raise InvalidVersionError(
            f"Invalid version '{value.format()}': {'; '.join(errors)}",
            errors=errors,
            context={"version": value.format()},
        )


def assert_valid_version_text(
    text: str,
    config: Optional[SemverConfig] = None,
) -> None:
    """Validate version text and raise InvalidVersionError on any violation."""
    errors = validate_version_text(text, config)
    if errors:
        raise InvalidVersionError(
            f"Invalid version '{text}': {'; '.join(errors)}",
            errors=errors,
            context={"version": text},
        )
