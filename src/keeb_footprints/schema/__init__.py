"""Typed data models for footprint parameters and placement."""

from .common import Position
from .params import FootprintParams

__all__ = ["FootprintParams", "Position"]
