"""Silkscreen text, optionally mirrored onto the opposite side.

Params:
    side: ``F`` or ``B``, the side of the primary element.
    layer: layer suffix after the side prefix, ``SilkS`` by default.
    reversible: also emit a mirrored copy on the opposite side.
    thickness: stroke thickness.
    size: font height and width.
    bold, italic: font style flags.
    align: justification keywords such as ``left top``.
    face: font face; empty uses the KiCad default font.
    text: literal content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..logging_config import get_logger
from ..schema.params import FootprintParams
from ..sexp import fmt_at, fmt_number, opposite_side, quoted
from .registry import register_footprint

logger = get_logger(__name__)


@dataclass(frozen=True)
class TextParams(FootprintParams):
    designator: str = "TXT"
    at: Any = ""
    side: str = "F"
    layer: str = "SilkS"
    reversible: bool = False
    thickness: Any = 0.15
    size: Any = 1
    bold: bool = False
    italic: bool = False
    align: str = ""
    face: str = ""
    text: str = ""


def _font(p: TextParams) -> str:
    parts = ["font"]
    if p.face:
        parts.append(f"(face {quoted(p.face)})")
    size = fmt_number(p.size)
    parts.append(f"(size {size} {size})")
    parts.append(f"(thickness {fmt_number(p.thickness)})")
    font = " ".join(parts)
    if p.bold:
        font += " (bold yes)"
    if p.italic:
        font += " (italic yes)"
    return f"({font})"


def _justify(p: TextParams, mirrored: bool) -> str:
    keywords = [k for k in (p.align, "mirror" if mirrored else "") if k]
    if not keywords:
        return ""
    return f" (justify {' '.join(keywords)})"


def text_element(p: TextParams, side: str, mirror: bool) -> str:
    """Render one ``gr_text`` element on ``side``.

    The mirror annotation only applies when ``side`` differs from the
    configured side, so the primary element is never mirrored.
    """
    mirrored = mirror and side != p.side
    return (
        f"\n      (gr_text {quoted(p.text)} {fmt_at(p.at)} (layer {side}.{p.layer})"
        f"\n        (effects {_font(p)}{_justify(p, mirrored)})"
        "\n      )"
    )


def body(p: TextParams) -> str:
    """Render the primary element and, when reversible, its mirrored copy."""
    if not p.at:
        logger.warning("No position token supplied; text will be unplaced")

    final = text_element(p, p.side, mirror=False)
    if p.reversible:
        final += text_element(p, opposite_side(p.side), mirror=True)
    logger.debug("Rendered %s text on %s", "reversible" if p.reversible else "single-sided", p.side)
    return final


register_footprint(
    name="text",
    description="Silkscreen text, optionally mirrored on the opposite side.",
    params_type=TextParams,
    body=body,
)
