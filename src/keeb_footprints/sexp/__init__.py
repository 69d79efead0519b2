"""S-expression token formatting for KiCad footprint fragments."""

from .format import fmt_at, fmt_number, opposite_side, quoted

__all__ = ["fmt_at", "fmt_number", "opposite_side", "quoted"]
