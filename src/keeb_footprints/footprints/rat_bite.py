"""Rat-bite breakaway tab.

A row of nine non-plated holes between two guide lines, used to snap a
panel apart. Geometry is fixed; only placement and the reference label
come from the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..constants import (
    ALL_COPPER,
    ALL_MASK,
    DRAWINGS_LAYER,
    FRONT_COPPER,
    FRONT_SILKSCREEN,
    RAT_BITE_FOOTPRINT_ID,
    RAT_BITE_GUIDE_HALF_LENGTH,
    RAT_BITE_GUIDE_OFFSET,
    RAT_BITE_GUIDE_WIDTH,
    RAT_BITE_HOLE_COUNT,
    RAT_BITE_HOLE_DIAMETER,
    RAT_BITE_HOLE_PITCH,
    RAT_BITE_PAD_ANGLE,
    REFERENCE_FONT_SIZE,
    REFERENCE_FONT_THICKNESS,
)
from ..logging_config import get_logger
from ..schema.params import FootprintParams
from ..sexp import fmt_at, fmt_number, quoted
from .registry import register_footprint

logger = get_logger(__name__)

INDENT = "      "


@dataclass(frozen=True)
class RatBiteParams(FootprintParams):
    designator: str = "RB"
    at: Any = ""
    ref: str = ""
    ref_hide: Any = ""


def hole_positions() -> list[float]:
    """X offsets of the holes, symmetric about the origin."""
    center = (RAT_BITE_HOLE_COUNT - 1) / 2
    return [(i - center) * RAT_BITE_HOLE_PITCH for i in range(RAT_BITE_HOLE_COUNT)]


def hide_token(ref_hide: Any) -> str:
    """Map the visibility flag to its token; strings pass through verbatim."""
    if isinstance(ref_hide, bool):
        return "hide" if ref_hide else ""
    if ref_hide is None:
        return ""
    return str(ref_hide)


def _reference(p: RatBiteParams) -> str:
    size = fmt_number(REFERENCE_FONT_SIZE)
    return (
        f"(fp_text reference {quoted(p.ref)} (at 0 0) (layer {FRONT_SILKSCREEN}) {hide_token(p.ref_hide)}"
        f" (effects (font (size {size} {size}) (thickness {fmt_number(REFERENCE_FONT_THICKNESS)}))))"
    )


def _guide_line(y: float) -> str:
    half = RAT_BITE_GUIDE_HALF_LENGTH
    return (
        f"(fp_line (start {fmt_number(-half)} {fmt_number(y)}) (end {fmt_number(half)} {fmt_number(y)})"
        f" (width {fmt_number(RAT_BITE_GUIDE_WIDTH)}) (layer {quoted(DRAWINGS_LAYER)}) )"
    )


def _hole(x: float) -> str:
    d = fmt_number(RAT_BITE_HOLE_DIAMETER)
    return (
        f'(pad "" np_thru_hole circle (at {fmt_number(x)} 0 {fmt_number(RAT_BITE_PAD_ANGLE)})'
        f" (size {d} {d}) (drill {d}) (layers {quoted(ALL_COPPER)} {quoted(ALL_MASK)}) )"
    )


def body(p: RatBiteParams) -> str:
    """Render the tab as a ``module`` block."""
    if not p.at:
        logger.warning("No position token supplied; module will be unplaced")
    if not p.ref:
        logger.warning("No reference label supplied")

    lines = [
        "",
        f"  (module {quoted(RAT_BITE_FOOTPRINT_ID)} (layer {quoted(FRONT_COPPER)})",
        INDENT + fmt_at(p.at),
        INDENT + _reference(p),
        "",
        INDENT + "(attr virtual)",
        "",
        INDENT + _guide_line(-RAT_BITE_GUIDE_OFFSET),
        INDENT + _guide_line(RAT_BITE_GUIDE_OFFSET),
    ]
    lines.extend(INDENT + _hole(x) for x in hole_positions())
    lines.append("  )")
    lines.append("")
    return "\n".join(lines)


register_footprint(
    name="rat_bite",
    description="Row of nine non-plated breakaway holes with guide lines.",
    params_type=RatBiteParams,
    body=body,
)
