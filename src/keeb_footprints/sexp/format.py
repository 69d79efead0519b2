"""Explicit string building for KiCad s-expression tokens.

Values are inserted verbatim: numbers keep their shortest form and strings
are quoted without escaping, so what the caller supplies is what KiCad sees.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from ..schema.common import Position


def fmt_number(value: Any) -> str:
    """Format a parameter value the way it should appear in the output.

    Floats follow JavaScript number-to-string rules: integral values drop
    their fractional part (``1.0`` -> ``"1"``), plain decimal notation is
    used from 1e-6 up to 1e21, and outside that range the exponent carries
    an explicit sign and no padding (``1e-7``, ``1e+21``). Anything else
    goes through ``str``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _fmt_float(value)
    return str(value)


def fmt_at(at: Any) -> str:
    """Render a position token.

    A :class:`Position` becomes ``(at x y angle)``; a string is passed
    through untouched; ``None`` becomes empty text.
    """
    if at is None:
        return ""
    if isinstance(at, Position):
        return f"(at {fmt_number(at.x)} {fmt_number(at.y)} {fmt_number(at.angle)})"
    return str(at)


def quoted(value: Any) -> str:
    return f'"{value}"'


def opposite_side(side: str) -> str:
    """Return the other board side; anything but ``F`` maps to ``F``."""
    return "B" if side == "F" else "F"


def _fmt_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exponent = text.split("e")
    exp = int(exponent)
    if -7 < exp < 21:
        return format(Decimal(text), "f")
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
