"""Exception hierarchy for footprint lookup and parameter handling.

Generators never raise for bad parameter values; these cover the
registry and the shape of the caller's input.
"""

from __future__ import annotations

from typing import Any


class FootprintError(Exception):
    """Base exception for all footprint generator errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a serializable dict."""
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


class UnknownFootprintError(FootprintError):
    """Raised when a footprint name is not in the registry."""

    error_code = "UNKNOWN_FOOTPRINT"

    def __init__(self, message: str, footprint: str | None = None, **kwargs: Any):
        super().__init__(message, "UNKNOWN_FOOTPRINT", footprint=footprint, **kwargs)


class ParameterError(FootprintError):
    """Raised when the caller's parameters are not a mapping."""

    error_code = "PARAMETER_ERROR"

    def __init__(self, message: str, footprint: str | None = None, **kwargs: Any):
        super().__init__(message, "PARAMETER_ERROR", footprint=footprint, **kwargs)


__all__ = [
    "FootprintError",
    "ParameterError",
    "UnknownFootprintError",
]
