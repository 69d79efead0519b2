"""Parameter records and the merge of defaults with caller overrides."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, TypeVar

from ..exceptions import ParameterError
from ..logging_config import get_logger

logger = get_logger(__name__)

P = TypeVar("P", bound="FootprintParams")


@dataclasses.dataclass(frozen=True)
class FootprintParams:
    """Base for per-footprint parameter records.

    Subclasses declare one field per option with its default. ``at`` and
    the other caller-supplied tokens are ordinary fields defaulting to
    empty, so a missing token renders as empty text instead of failing.
    """

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Return the parameter schema as an ordered name -> default mapping."""
        result: dict[str, Any] = {}
        for f in dataclasses.fields(cls):
            if f.default is not dataclasses.MISSING:
                result[f.name] = f.default
            elif f.default_factory is not dataclasses.MISSING:
                result[f.name] = f.default_factory()
        return result

    @classmethod
    def from_mapping(
        cls: type[P],
        overrides: Mapping[str, Any] | None = None,
        footprint: str | None = None,
    ) -> P:
        """Merge the declared defaults with ``overrides``.

        Unknown names are ignored. Values are taken as given.

        Raises:
            ParameterError: If ``overrides`` is not a mapping.
        """
        if overrides is None:
            overrides = {}
        if not isinstance(overrides, Mapping):
            raise ParameterError(
                f"Parameters must be a mapping, got {type(overrides).__name__}",
                footprint=footprint,
            )

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(k for k in overrides if k not in known)
        if unknown:
            logger.debug("Ignoring unknown parameters for %s: %s", cls.__name__, unknown)

        values = cls.defaults()
        values.update({k: v for k, v in overrides.items() if k in known})
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
