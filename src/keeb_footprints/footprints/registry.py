"""Footprint registry: single source of truth for the available generators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..exceptions import UnknownFootprintError
from ..logging_config import footprint_ctx, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..schema.params import FootprintParams

logger = get_logger(__name__)


@dataclass
class FootprintSpec:
    """Declarative specification for a single footprint generator."""

    name: str
    description: str
    params_type: type[FootprintParams]
    body: Callable[[Any], str]

    def defaults(self) -> dict[str, Any]:
        """Return the parameter schema (name -> default)."""
        return self.params_type.defaults()

    def resolve(self, overrides: Mapping[str, Any] | None = None) -> FootprintParams:
        """Merge defaults with ``overrides`` into a parameter record."""
        return self.params_type.from_mapping(overrides, footprint=self.name)

    def render(self, overrides: Mapping[str, Any] | None = None) -> str:
        """Resolve parameters and run the body."""
        token = footprint_ctx.set(self.name)
        try:
            params = self.resolve(overrides)
            logger.debug("Rendering %s", self.name)
            return self.body(params)
        finally:
            footprint_ctx.reset(token)


FOOTPRINT_REGISTRY: dict[str, FootprintSpec] = {}


def register_footprint(
    name: str,
    description: str,
    params_type: type[FootprintParams],
    body: Callable[[Any], str],
) -> None:
    """Register a footprint generator in the global registry."""
    FOOTPRINT_REGISTRY[name] = FootprintSpec(
        name=name,
        description=description,
        params_type=params_type,
        body=body,
    )


def get_footprint(name: str) -> FootprintSpec:
    """Look up a registered footprint.

    Raises:
        UnknownFootprintError: If no footprint is registered under ``name``.
    """
    try:
        return FOOTPRINT_REGISTRY[name]
    except KeyError:
        raise UnknownFootprintError(
            f"Unknown footprint {name!r}; available: {sorted(FOOTPRINT_REGISTRY)}",
            footprint=name,
        ) from None


def render_footprint(name: str, overrides: Mapping[str, Any] | None = None) -> str:
    """Render the footprint registered as ``name`` with the given parameters."""
    return get_footprint(name).render(overrides)
