"""
semverkit/core/semver.py
========================
``Semver``: a mutable semantic version value.

Fields are plain attributes and may be assigned directly; ``format()``
reflects whatever is stored without validating it. ``parse()`` and
``from_record()`` overwrite all four fields at once and report failure
through their return value:

    sv = Semver()
    if not sv.parse("1.0.3"):
        ...
    sv.inc_patch()
    str(sv)        # "1.0.4"

For an immutable value use ``Semver.freeze()`` / ``SemverFields``.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from semverkit.core.config import SemverConfig
from semverkit.core.numeric import Number, to_text
from semverkit.core.parsing import parse_fields
from semverkit.core.types import SemverFields, VersionPart, format_segments

logger = logging.getLogger(__name__)


@dataclass
class Semver:
    major:  str           = ""
    minor:  str           = ""
    patch:  Optional[str] = None
    suffix: Optional[str] = None
    config: SemverConfig  = field(
        default_factory=SemverConfig, compare=False, repr=False,
    )

    def __str__(self) -> str:
        return self.format()

    # ─── TEXT ─────────────────────────────────────────────────────

    def parse(self, text: str) -> bool:
        """Parse ``text`` into this instance. Returns False if it is not a version.

        On success every field is replaced; patch/suffix missing from
        ``text`` become ``None``. On failure the instance is untouched.
        """
        fields = parse_fields(text, self.config)
        if fields is None:
            return False
        self._merge(fields)
        return True

    def format(self) -> str:
        return format_segments(self.major, self.minor, self.patch, self.suffix)

    # ─── RECORDS ──────────────────────────────────────────────────

    def from_record(self, record: Mapping[str, Any]) -> bool:
        """Overwrite fields from a mapping with major/minor and optional patch/suffix."""
        fields = SemverFields.from_mapping(record)
        if fields is None:
            logger.debug(f"Record missing major/minor: keys={list(record)}")
            return False
        self._merge(fields)
        return True

    def to_record(self) -> Dict[str, str]:
        return self.freeze().to_record()

    def to_json(self) -> str:
        return json.dumps(self.to_record(), separators=(",", ":"), ensure_ascii=False)

    def to_array(self) -> List[str]:
        return self.freeze().to_array()

    # ─── NUMBERS ──────────────────────────────────────────────────

    def get_major(self) -> Number:
        """Major as a number; NaN when it is not numeric (e.g. ``"v1"``)."""
        return self.freeze().number(VersionPart.MAJOR)

    def get_minor(self) -> Number:
        return self.freeze().number(VersionPart.MINOR)

    def get_patch(self) -> Number:
        """Patch as a number, or -1 when there is no numeric patch."""
        return self.freeze().number(VersionPart.PATCH)

    def inc_major(self, amount: Number = 1) -> Number:
        return self._increment(VersionPart.MAJOR, amount)

    def inc_minor(self, amount: Number = 1) -> Number:
        return self._increment(VersionPart.MINOR, amount)

    def inc_patch(self, amount: Number = 1) -> Number:
        return self._increment(VersionPart.PATCH, amount)

    def _increment(self, part: VersionPart, amount: Number) -> Number:
        before = self.format()
        fields, value = self.freeze().incremented(
            part, amount, cascade=self.config.cascade_resets,
        )
        self._merge(fields)
        logger.debug(f"{part.value} +{amount}: '{before}' → '{self.format()}'")
        return value

    # ─── SNAPSHOTS ────────────────────────────────────────────────

    def freeze(self) -> SemverFields:
        return SemverFields(self.major, self.minor, self.patch, self.suffix)

    @classmethod
    def from_fields(
        cls,
        fields: SemverFields,
        config: Optional[SemverConfig] = None,
    ) -> "Semver":
        sv = cls(config=config or SemverConfig())
        sv._merge(fields)
        return sv

    def _merge(self, fields: SemverFields) -> None:
        self.major = fields.major
        self.minor = fields.minor
        self.patch = fields.patch
        self.suffix = fields.suffix


def new_semver(
    major: Number,
    minor: Number,
    patch: Union[Number, str],
    suffix: Optional[str] = None,
    config: Optional[SemverConfig] = None,
) -> Semver:
    """Build a populated ``Semver``.

        new_semver(0, 0, 1, "alpha")    # 0.0.1-alpha
        new_semver(0, 0, 1, "-alpha")   # same, leading dash dropped
    """
    sv = Semver(
        major=to_text(major),
        minor=to_text(minor),
        patch=to_text(patch),
        config=config or SemverConfig(),
    )
    if suffix is not None and suffix != "":
        sv.suffix = suffix[1:] if suffix.startswith("-") else suffix
    return sv
