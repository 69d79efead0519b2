"""KiCad footprint generators for keyboard PCBs."""

from .exceptions import FootprintError, ParameterError, UnknownFootprintError
from .footprints import FOOTPRINT_REGISTRY, get_footprint, render_footprint
from .schema import Position

__version__ = "0.1.0"

__all__ = [
    "FOOTPRINT_REGISTRY",
    "FootprintError",
    "ParameterError",
    "Position",
    "UnknownFootprintError",
    "get_footprint",
    "render_footprint",
]
