"""
semverkit/core/parsing.py
=========================
Text → SemverFields.

Scanning rules:
    1. Split on ``.``; fewer than two segments is a failure.
    2. Segments 1 and 2 (trimmed) are major and minor.
    3. When there are exactly three segments the third is
       ``patch[-suffix]``, split on the first ``-``. Without a dash the
       trimmed segment is the patch. Longer inputs ignore everything past
       the minor segment.
    4. The major segment may not start with a letter, except ``v``/``V``
       so that ``v1.2.3`` is accepted.

Failures return ``None`` and are logged at DEBUG level; nothing raises.
"""
from __future__ import annotations

import logging
import re
from typing import Optional

from semverkit.core.config import SemverConfig
from semverkit.core.types import SemverFields

logger = logging.getLogger(__name__)


# Any leading letter other than v/V
BAD_ALPHA_RE = re.compile(r'^[a-uw-zA-UW-Z]+')


def has_bad_prefix(segment: Optional[str]) -> bool:
    return segment is not None and BAD_ALPHA_RE.match(segment) is not None


def scan_version(text: str) -> Optional[SemverFields]:
    """Split ``text`` into candidate fields without validating them."""
    segments = text.split(".")
    if len(segments) < 2:
        return None

    patch: Optional[str] = None
    suffix: Optional[str] = None
    if len(segments) == 3:
        tail = segments[2]
        if "-" in tail:
            patch, _, suffix = tail.partition("-")
        else:
            patch = tail.strip()

    return SemverFields(
        major=segments[0].strip(),
        minor=segments[1].strip(),
        patch=patch,
        suffix=suffix,
    )


def parse_fields(
    text: str,
    config: Optional[SemverConfig] = None,
) -> Optional[SemverFields]:
    """Scan and validate ``text``. Returns ``None`` when it is not a version."""
    cfg = config or SemverConfig()
    if not isinstance(text, str):
        logger.debug(f"Rejected non-string version input of type {type(text).__name__}")
        return None

    fields = scan_version(text)
    if fields is None:
        logger.debug(f"Rejected '{text}': needs at least major.minor")
        return None

    if has_bad_prefix(fields.major):
        logger.debug(f"Rejected '{text}': major '{fields.major}' starts with a letter")
        return None

    if cfg.validate_all_segments:
        for name in ("minor", "patch"):
            segment = getattr(fields, name)
            if has_bad_prefix(segment):
                logger.debug(f"Rejected '{text}': {name} '{segment}' starts with a letter")
                return None

    return fields
