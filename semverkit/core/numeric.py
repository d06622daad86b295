"""
semverkit/core/numeric.py
=========================
Number <-> text conversions for version segments.

Segments are stored as text. Reading them as numbers follows the usual
"number-like string" rules:

    ""  / "   "         → 0
    "12", " 12 ", "+3"  → 12, 12, 3
    "1e3", "1.5"        → 1000, 1.5
    "0x1f", "0o17"      → 31, 15
    "Infinity"          → inf
    anything else       → NaN

Integral results come back as ``int``.
"""
from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

Number = Union[int, float]

NAN = float("nan")

_INTEGER_RE  = re.compile(r'^[+-]?[0-9]+$')
_DECIMAL_RE  = re.compile(r'^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$')
_INFINITY_RE = re.compile(r'^[+-]?Infinity$')
_RADIX_RE = {
    16: re.compile(r'^0[xX][0-9a-fA-F]+$'),
    8:  re.compile(r'^0[oO][0-7]+$'),
    2:  re.compile(r'^0[bB][01]+$'),
}


# Floats at or above this magnitude render in exponent form ("1e+21")
_EXPONENT_LIMIT = 1e21


def _normalize(value: float) -> Number:
    if math.isfinite(value) and value.is_integer() and abs(value) < _EXPONENT_LIMIT:
        return int(value)
    return value


def coerce_number(text: Optional[str]) -> Number:
    """Read a segment as a number. ``None`` and unparseable text give NaN."""
    if text is None:
        return NAN
    s = text.strip()
    if s == "":
        return 0
    if _INTEGER_RE.match(s):
        return int(s)
    if _DECIMAL_RE.match(s):
        return _normalize(float(s))
    if _INFINITY_RE.match(s):
        return -math.inf if s.startswith("-") else math.inf
    for base, pattern in _RADIX_RE.items():
        if pattern.match(s):
            return int(s[2:], base)
    return NAN


def is_nan(value: Number) -> bool:
    return isinstance(value, float) and math.isnan(value)


def to_text(value: Any) -> str:
    """Render a value the way it is stored in a segment.

    Integral floats drop the trailing ``.0`` so ``2.0`` is stored as ``"2"``;
    floats of 1e21 and above keep exponent form, e.g. ``"1e+21"``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(_normalize(value))
    return str(value)
