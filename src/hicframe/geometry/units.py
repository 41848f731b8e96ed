"""Physical units and coordinate resolution for hicframe.

Every position or size placed on a page is a ``PhysicalLength``: a
magnitude tagged with a unit. Plain numbers are only accepted together with
a default unit, so a raw number never reaches placement untagged.

Page Space:
    Page coordinates are plain floats in the page's unit. User-facing ``y``
    values are measured from the top edge of the page, while drawing space
    grows upward from the bottom edge, so the vertical axis is flipped as
    ``page_y = page_height - y``.
"""

from __future__ import annotations

import numbers
from enum import Enum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, field_validator

from hicframe.exceptions import InvalidCoordinateTypeError, MissingUnitError

if TYPE_CHECKING:
    from hicframe.page import Page


class Unit(str, Enum):
    """Units a length can be expressed in."""

    INCHES = "inches"
    CM = "cm"
    MM = "mm"
    POINTS = "points"  # TeX points, 72.27 per inch
    BIGPTS = "bigpts"  # PostScript points, 72 per inch
    NATIVE = "native"  # viewport data units

    @classmethod
    def parse(cls, value: str | Unit) -> Unit:
        """Parse a unit name, accepting common aliases.

        Args:
            value: Unit instance or case-insensitive name ("in", "pt", ...).

        Returns:
            The matching Unit.

        Raises:
            ValueError: If the name is not a known unit.
        """
        if isinstance(value, Unit):
            return value
        key = str(value).strip().lower()
        key = _UNIT_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            valid = ", ".join(u.value for u in cls)
            raise ValueError(f"Unknown unit '{value}'. Options are: {valid}") from None


_UNIT_ALIASES = {
    "in": "inches",
    "inch": "inches",
    "centimetres": "cm",
    "centimeters": "cm",
    "millimetres": "mm",
    "millimeters": "mm",
    "pt": "points",
    "bp": "bigpts",
}

# Size of one unit in inches
_INCHES_PER_UNIT = {
    Unit.INCHES: 1.0,
    Unit.CM: 1.0 / 2.54,
    Unit.MM: 1.0 / 25.4,
    Unit.POINTS: 1.0 / 72.27,
    Unit.BIGPTS: 1.0 / 72.0,
}


class PhysicalLength(BaseModel, frozen=True):
    """A magnitude tagged with a unit.

    Attributes:
        value: Numeric magnitude.
        units: Unit the magnitude is expressed in.
    """

    value: float
    units: Unit

    @field_validator("units", mode="before")
    @classmethod
    def _parse_units(cls, value: Any) -> Unit:
        return Unit.parse(value)

    def __str__(self) -> str:
        return f"{self.value:g} {self.units.value}"


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def resolve_length(
    value: Any,
    default_units: str | Unit | None,
    *,
    name: str = "value",
) -> PhysicalLength:
    """Coerce a coordinate or size into a PhysicalLength.

    Args:
        value: A PhysicalLength (returned unchanged) or a plain number.
        default_units: Unit attached to plain numbers.
        name: Argument name used in error messages (e.g. "x-coordinate").

    Returns:
        The value as a PhysicalLength.

    Raises:
        InvalidCoordinateTypeError: If value is neither numeric nor a
            PhysicalLength.
        MissingUnitError: If value is numeric and default_units is None.

    Example:
        >>> resolve_length(1.5, "inches", name="x-coordinate")
        PhysicalLength(value=1.5, units=<Unit.INCHES: 'inches'>)
    """
    if isinstance(value, PhysicalLength):
        return value
    if not _is_number(value):
        raise InvalidCoordinateTypeError(name, value)
    if default_units is None:
        raise MissingUnitError(name)
    return PhysicalLength(value=float(value), units=Unit.parse(default_units))


def convert_length(length: PhysicalLength, to_units: str | Unit) -> float:
    """Convert a physical length to a plain number in another unit.

    Raises:
        InvalidCoordinateTypeError: If either side is in native units.
    """
    target = Unit.parse(to_units)
    if length.units is Unit.NATIVE or target is Unit.NATIVE:
        raise InvalidCoordinateTypeError(
            "length",
            str(length),
            reason="Native units only exist inside a viewport's data scale "
            "and cannot be converted to physical units.",
        )
    if length.units is target:
        return length.value
    return length.value * _INCHES_PER_UNIT[length.units] / _INCHES_PER_UNIT[target]


def inches_per_unit(units: str | Unit) -> float:
    """Return the size of one unit in inches."""
    unit = Unit.parse(units)
    if unit is Unit.NATIVE:
        raise InvalidCoordinateTypeError(
            "units", unit.value, reason="Native units have no physical size."
        )
    return _INCHES_PER_UNIT[unit]


def to_page_x(length: PhysicalLength, page: Page) -> float:
    """Convert a horizontal position or size to page units."""
    return convert_length(length, page.units)


def to_page_y(length: PhysicalLength, page: Page) -> float:
    """Convert a vertical position to page units, flipping the axis."""
    return page.height - convert_length(length, page.units)
