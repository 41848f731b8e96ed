"""Layered call parameters for hicframe.

Drawing calls take their inputs from three tiers, resolved once at call
entry, per field:

    explicit argument > Params bundle > hard default

A ``None`` explicit argument counts as "not given". A Params bundle can
carry any field of any drawing call, so one bundle can be shared by
several calls (e.g. a common ``default_units`` or ``half``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict


class Params(BaseModel):
    """A reusable bundle of drawing parameters.

    Example:
        >>> shared = Params(half="both", shift=2)
        >>> shared.get("half")
        'both'
        >>> shared.get("type") is None
        True
    """

    model_config = ConfigDict(extra="allow", frozen=True, arbitrary_types_allowed=True)

    def get(self, name: str) -> Any:
        """Return a bundled value, or None when the bundle does not set it."""
        extra = self.model_extra or {}
        return extra.get(name)


def resolve_params(
    explicit: Mapping[str, Any],
    bundled: Params | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge the three parameter tiers.

    Args:
        explicit: Arguments passed directly to the call.
        bundled: Optional Params bundle.
        defaults: Hard defaults for fields still unset.

    Returns:
        One value per field named in ``explicit`` or ``defaults``.
    """
    defaults = defaults or {}
    resolved: dict[str, Any] = {}
    for name in {**defaults, **explicit}:
        value = explicit.get(name)
        if value is None and bundled is not None:
            value = bundled.get(name)
        if value is None:
            value = defaults.get(name)
        resolved[name] = value
    return resolved
