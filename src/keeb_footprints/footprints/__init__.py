"""Footprint generators and their registry."""

# Import modules to trigger footprint registration via register_footprint() calls
from . import rat_bite, text  # noqa: F401
from .rat_bite import RatBiteParams
from .registry import FOOTPRINT_REGISTRY, FootprintSpec, get_footprint, register_footprint, render_footprint
from .text import TextParams

__all__ = [
    "FOOTPRINT_REGISTRY",
    "FootprintSpec",
    "RatBiteParams",
    "TextParams",
    "get_footprint",
    "register_footprint",
    "render_footprint",
]
