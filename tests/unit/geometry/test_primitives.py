"""Unit tests for placement primitives.

Tests Justification parsing and the PlotRegion model including:
- Construction from numbers and physical lengths
- Validation of sizes, units and data scales
- Immutability
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hicframe.exceptions import InvalidCoordinateTypeError, MissingUnitError
from hicframe.geometry import Justification, PhysicalLength, PlotRegion, Unit


def _inches(value: float) -> PhysicalLength:
    return PhysicalLength(value=value, units=Unit.INCHES)


class TestJustification:
    """Tests for Justification.parse."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("center", (0.5, 0.5)),
            ("centre", (0.5, 0.5)),
            ("left", (0.0, 0.5)),
            ("right", (1.0, 0.5)),
            ("top", (0.5, 1.0)),
            ("bottom", (0.5, 0.0)),
            (("left", "top"), (0.0, 1.0)),
            (["right", "bottom"], (1.0, 0.0)),
            (("center", "top"), (0.5, 1.0)),
            ("LEFT", (0.0, 0.5)),
        ],
    )
    def test_parse_words(self, value: object, expected: tuple[float, float]) -> None:
        just = Justification.parse(value)  # type: ignore[arg-type]
        assert (just.hjust, just.vjust) == expected

    def test_parse_returns_instance_unchanged(self) -> None:
        just = Justification(hjust=0.25, vjust=0.75)
        assert Justification.parse(just) is just

    @pytest.mark.parametrize("value", ["middle", ("top", "left"), ("left", "top", "x"), ()])
    def test_parse_rejects_invalid_words(self, value: object) -> None:
        with pytest.raises(ValueError, match="Invalid justification"):
            Justification.parse(value)  # type: ignore[arg-type]

    def test_rejects_out_of_range_values(self) -> None:
        with pytest.raises(ValidationError):
            Justification(hjust=1.5, vjust=0.5)


class TestPlotRegion:
    """Tests for the PlotRegion model."""

    def test_build_tags_numbers_with_default_unit(self) -> None:
        region = PlotRegion.build(0.5, 1, 2, 3, default_units="cm")
        assert region.x == PhysicalLength(value=0.5, units="cm")
        assert region.height == PhysicalLength(value=3, units="cm")
        assert region.just == Justification(hjust=0.5, vjust=0.5)

    def test_build_keeps_physical_lengths(self) -> None:
        width = PhysicalLength(value=5, units="mm")
        region = PlotRegion.build(0, 0, width, 1, default_units="inches")
        assert region.width is width
        assert region.height.units is Unit.INCHES

    def test_build_parses_justification_and_scales(self) -> None:
        region = PlotRegion.build(
            0, 0, 1, 1,
            default_units="inches",
            just=("left", "top"),
            xscale=(100.0, 200.0),
        )
        assert region.just == Justification(hjust=0.0, vjust=1.0)
        assert region.xscale == (100.0, 200.0)
        assert region.yscale is None

    def test_build_without_units_fails(self) -> None:
        with pytest.raises(MissingUnitError, match="width detected as numeric"):
            PlotRegion.build(
                _inches(0), _inches(0), 1, _inches(1), default_units=None
            )

    def test_build_rejects_non_numeric(self) -> None:
        with pytest.raises(InvalidCoordinateTypeError):
            PlotRegion.build("a", 0, 1, 1, default_units="inches")

    def test_just_string_is_parsed_on_construction(self) -> None:
        region = PlotRegion(
            x=_inches(0), y=_inches(0), width=_inches(1), height=_inches(1), just="right"
        )
        assert region.just.hjust == 1.0

    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_non_positive_size(self, size: float) -> None:
        with pytest.raises(ValidationError, match="width must be positive"):
            PlotRegion(x=_inches(0), y=_inches(0), width=_inches(size), height=_inches(1))

    def test_rejects_native_size(self) -> None:
        with pytest.raises(ValidationError, match="physical units"):
            PlotRegion(
                x=_inches(0),
                y=_inches(0),
                width=_inches(1),
                height=PhysicalLength(value=1, units="native"),
            )

    def test_rejects_empty_scale(self) -> None:
        with pytest.raises(ValidationError, match="xscale must span"):
            PlotRegion.build(0, 0, 1, 1, default_units="inches", xscale=(5.0, 5.0))

    def test_region_is_frozen(self) -> None:
        region = PlotRegion.build(0, 0, 1, 1, default_units="inches")
        with pytest.raises(ValidationError):
            region.x = _inches(2)  # type: ignore[misc]
