"""
semverkit/core/types.py
=======================
Foundation types for semverkit.
Every module imports from here. No circular dependencies.

A version is four text segments:

    major . minor [ . patch [ - suffix ] ]

``major`` and ``minor`` are required. ``patch`` and ``suffix`` are
independently optional; ``None`` means absent, which is different from
an empty string when projecting to records and arrays.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from semverkit.core.numeric import Number, coerce_number, is_nan, to_text


class VersionPart(Enum):
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


# Sentinel returned for a missing or non-numeric patch level
NO_PATCH = -1


def _as_text(value: Any) -> Optional[str]:
    return None if value is None else to_text(value)


def format_segments(
    major: Any,
    minor: Any,
    patch: Any,
    suffix: Any,
) -> str:
    """Join non-empty segments with ``.`` and append ``-suffix`` if set.

    Segments assigned as numbers are rendered as text, so ``0`` is kept.
    """
    parts = [to_text(p) for p in (major, minor, patch) if p is not None]
    text = ".".join(p for p in parts if p != "")
    if suffix is not None and to_text(suffix) != "":
        return f"{text}-{to_text(suffix)}"
    return text


@dataclass(frozen=True)
class SemverFields:
    """Immutable version record.

    Produced directly by the parser and used as the unit of merging into a
    ``Semver``. Also usable on its own when a value type is preferred over
    in-place mutation:

        v = SemverFields("1", "4", "2")
        v.bumped(VersionPart.MINOR, cascade=True)   # → 1.5.0, v unchanged
    """
    major:  str
    minor:  str
    patch:  Optional[str] = None
    suffix: Optional[str] = None

    def __str__(self) -> str:
        return self.format()

    def format(self) -> str:
        return format_segments(self.major, self.minor, self.patch, self.suffix)

    def to_record(self) -> Dict[str, str]:
        record = {"major": self.major, "minor": self.minor}
        if self.patch is not None:
            record["patch"] = self.patch
        if self.suffix is not None:
            record["suffix"] = self.suffix
        return record

    def to_array(self) -> List[str]:
        items = [self.major, self.minor]
        if self.patch is not None:
            items.append(self.patch)
        if self.suffix is not None:
            items.append(self.suffix)
        return items

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> Optional["SemverFields"]:
        """Build a record from a mapping, or ``None`` if major/minor is missing.

        Values are stringified; a missing or ``None`` patch/suffix is absent.
        """
        if mapping.get("major") is None or mapping.get("minor") is None:
            return None
        patch = mapping.get("patch")
        suffix = mapping.get("suffix")
        return cls(
            major=to_text(mapping["major"]),
            minor=to_text(mapping["minor"]),
            patch=None if patch is None else to_text(patch),
            suffix=None if suffix is None else to_text(suffix),
        )

    # ─── NUMERIC VIEW ─────────────────────────────────────────────

    def number(self, part: VersionPart) -> Number:
        """Numeric value of a segment.

        MAJOR/MINOR give NaN when the text is not a number. PATCH gives
        ``NO_PATCH`` (-1) when absent, empty or not a number. An empty patch
        (e.g. after parsing ``"1.2."``) counts as missing rather than 0, so
        the next patch increment yields ``1.2.0``, not ``1.2.1``.
        """
        if part is VersionPart.MAJOR:
            return coerce_number(_as_text(self.major))
        if part is VersionPart.MINOR:
            return coerce_number(_as_text(self.minor))
        patch = _as_text(self.patch)
        if patch is None or patch.strip() == "":
            return NO_PATCH
        value = coerce_number(patch)
        if is_nan(value):
            return NO_PATCH
        return value

    def incremented(
        self,
        part: VersionPart,
        amount: Number = 1,
        cascade: bool = False,
    ) -> Tuple["SemverFields", Number]:
        """Return ``(new_record, new_value)`` with ``part`` raised by ``amount``.

        A non-numeric major/minor counts as 0. An absent patch counts as -1,
        so the first increment yields patch ``0``. With ``cascade`` the lower
        numeric components are reset to ``"0"``; an absent patch stays absent.
        """
        current = self.number(part)
        if is_nan(current):
            current = 0
        value = current + amount
        text = to_text(value)

        if part is VersionPart.MAJOR:
            changed = replace(self, major=text)
            if cascade:
                changed = replace(changed, minor="0", patch=self._reset_patch())
        elif part is VersionPart.MINOR:
            changed = replace(self, minor=text)
            if cascade:
                changed = replace(changed, patch=self._reset_patch())
        else:
            changed = replace(self, patch=text)
        return changed, value

    def bumped(
        self,
        part: VersionPart,
        amount: Number = 1,
        cascade: bool = False,
    ) -> "SemverFields":
        return self.incremented(part, amount, cascade)[0]

    def _reset_patch(self) -> Optional[str]:
        return None if self.patch is None else "0"

    # ─── "WITH FIELD CHANGED" ────────────────────────────────────

    def with_major(self, major: Any) -> "SemverFields":
        return replace(self, major=to_text(major))

    def with_minor(self, minor: Any) -> "SemverFields":
        return replace(self, minor=to_text(minor))

    def with_patch(self, patch: Any) -> "SemverFields":
        return replace(self, patch=None if patch is None else to_text(patch))

    def with_suffix(self, suffix: Any) -> "SemverFields":
        return replace(self, suffix=None if suffix is None else to_text(suffix))
