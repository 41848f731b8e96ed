"""Placement primitives for hicframe.

This module provides immutable Pydantic models describing where a plot
sits on the page: its justification anchor and its rectangular region,
together with the optional data scales that map genomic coordinates into
the region.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from hicframe.geometry.units import PhysicalLength, Unit, resolve_length

_HORIZONTAL = {"left": 0.0, "center": 0.5, "centre": 0.5, "right": 1.0}
_VERTICAL = {"bottom": 0.0, "center": 0.5, "centre": 0.5, "top": 1.0}

DataScale = tuple[float, float]


class Justification(BaseModel, frozen=True):
    """Anchor of a region relative to its (x, y) location.

    Attributes:
        hjust: 0 anchors the left edge, 0.5 the center, 1 the right edge.
        vjust: 0 anchors the bottom edge, 0.5 the center, 1 the top edge.
    """

    hjust: float = Field(0.5, ge=0.0, le=1.0)
    vjust: float = Field(0.5, ge=0.0, le=1.0)

    @classmethod
    def parse(cls, value: str | Sequence[str] | Justification) -> Justification:
        """Parse one or two justification words.

        A single horizontal word centers vertically and a single vertical
        word centers horizontally. With two words the first is horizontal
        and the second vertical.

        Args:
            value: e.g. "center", "left", ("left", "top").

        Returns:
            The numeric justification.

        Raises:
            ValueError: If a word is not valid for its position.
        """
        if isinstance(value, Justification):
            return value
        words = [value] if isinstance(value, str) else list(value)
        words = [str(w).strip().lower() for w in words]

        if len(words) == 1:
            word = words[0]
            if word in ("center", "centre"):
                return cls(hjust=0.5, vjust=0.5)
            if word in _HORIZONTAL:
                return cls(hjust=_HORIZONTAL[word], vjust=0.5)
            if word in _VERTICAL:
                return cls(hjust=0.5, vjust=_VERTICAL[word])
        elif len(words) == 2:
            hword, vword = words
            if hword in _HORIZONTAL and vword in _VERTICAL:
                return cls(hjust=_HORIZONTAL[hword], vjust=_VERTICAL[vword])

        raise ValueError(
            f"Invalid justification {value!r}. Use one or two of "
            "'left', 'right', 'center', 'top', 'bottom'."
        )


class PlotRegion(BaseModel, frozen=True):
    """A rectangular drawable area on the page.

    Positions are measured from the top-left corner of the page. The region
    is owned by the plot that created it and is never mutated by the
    annotations drawn on top of it.

    Attributes:
        x: Horizontal location of the justification anchor.
        y: Vertical location of the justification anchor (from the top).
        width: Horizontal extent (> 0).
        height: Vertical extent (> 0).
        just: Which point of the region sits at (x, y).
        xscale: Data range mapped across the width, if any.
        yscale: Data range mapped across the height, if any.
    """

    x: PhysicalLength
    y: PhysicalLength
    width: PhysicalLength
    height: PhysicalLength
    just: Justification = Field(default_factory=Justification)
    xscale: DataScale | None = None
    yscale: DataScale | None = None

    @field_validator("just", mode="before")
    @classmethod
    def _parse_just(cls, value: Any) -> Justification:
        return Justification.parse(value)

    @model_validator(mode="after")
    def _validate_region(self) -> Self:
        """Reject degenerate sizes and empty data scales."""
        for name, length in (("width", self.width), ("height", self.height)):
            if length.value <= 0:
                raise ValueError(f"Region {name} must be positive, got {length}")
            if length.units is Unit.NATIVE:
                raise ValueError(f"Region {name} must be in physical units")
        for name, scale in (("xscale", self.xscale), ("yscale", self.yscale)):
            if scale is not None and scale[0] == scale[1]:
                raise ValueError(f"{name} must span a non-empty range, got {scale}")
        return self

    @classmethod
    def build(
        cls,
        x: Any,
        y: Any,
        width: Any,
        height: Any,
        *,
        default_units: str | Unit | None,
        just: str | Sequence[str] | Justification = "center",
        xscale: DataScale | None = None,
        yscale: DataScale | None = None,
    ) -> Self:
        """Create a PlotRegion from numbers or physical lengths.

        Raises:
            MissingUnitError: If a plain number is given without default_units.
            InvalidCoordinateTypeError: If a value is not a number or length.
        """
        return cls(
            x=resolve_length(x, default_units, name="x-coordinate"),
            y=resolve_length(y, default_units, name="y-coordinate"),
            width=resolve_length(width, default_units, name="width"),
            height=resolve_length(height, default_units, name="height"),
            just=Justification.parse(just),
            xscale=xscale,
            yscale=yscale,
        )
