"""Unit tests for annotation shape geometry."""

from __future__ import annotations

import pandas as pd
import pytest

from hicframe.annotate import (
    AnnotationRequest,
    CircleShape,
    RectShape,
    SegmentShape,
    Style,
    generate_shapes,
)
from hicframe.annotate.diagnostics import ARROW_DEFAULT_FILL
from hicframe.annotate.geometry import (
    IntervalPair,
    arrow_shape,
    box_shape,
    circle_shape,
    resolve_style,
)
from hicframe.annotate.shapes import ArrowHead
from hicframe.config import settings
from hicframe.genome import normalize_pairs
from hicframe.geometry import PhysicalLength, PlotRegion
from hicframe.plots import Half, HicSquare

PAIR = IntervalPair("chr21", 100, 200, "chr21", 500, 600)
SHIFT_BP = 40.0
STYLE = Style()


@pytest.fixture
def small_square() -> HicSquare:
    return HicSquare(
        chrom="chr21",
        chromstart=0,
        chromend=1000,
        resolution=10,
        region=PlotRegion.build(0, 0, 1, 1, default_units="inches"),
    )


@pytest.fixture
def pairs() -> pd.DataFrame:
    return normalize_pairs(
        pd.DataFrame(
            [
                ("chr21", 100, 200, "chr21", 500, 600),
                ("chr21", 300, 320, "chr21", 700, 720),
            ]
        )
    )


class TestBoxShape:
    """Tests for box geometry."""

    def test_bottom_is_centered_on_mirrored_midpoints(self) -> None:
        box = box_shape(PAIR, Half.BOTTOM, SHIFT_BP, STYLE)
        assert (box.x, box.y) == (550.0, 150.0)
        assert (box.width, box.height) == (180.0, 180.0)
        assert (box.hjust, box.vjust) == (0.5, 0.5)

    def test_top_is_centered_on_midpoints(self) -> None:
        box = box_shape(PAIR, Half.TOP, SHIFT_BP, STYLE)
        assert (box.x, box.y) == (150.0, 550.0)

    def test_zero_shift_is_pair_extent(self) -> None:
        assert box_shape(PAIR, Half.TOP, 0.0, STYLE).width == 100.0


class TestCircleShape:
    """Tests for circle geometry."""

    def test_radius_is_half_extent_plus_shift(self) -> None:
        circle = circle_shape(PAIR, Half.BOTTOM, SHIFT_BP, STYLE)
        assert circle.r == 90.0
        assert (circle.x, circle.y) == (550.0, 150.0)

    def test_top(self) -> None:
        circle = circle_shape(PAIR, Half.TOP, SHIFT_BP, STYLE)
        assert (circle.x, circle.y) == (150.0, 550.0)


class TestArrowShape:
    """Tests for arrow geometry."""

    head = ArrowHead(length=PhysicalLength(value=0.1, units="inches"))

    def test_bottom_points_up_left_from_below_right(self) -> None:
        arrow = arrow_shape(PAIR, Half.BOTTOM, SHIFT_BP, STYLE, self.head)
        assert (arrow.x0, arrow.y0) == (650.0, 50.0)
        assert (arrow.x1, arrow.y1) == (690.0, 10.0)

    def test_top_points_down_right_from_above_left(self) -> None:
        arrow = arrow_shape(PAIR, Half.TOP, SHIFT_BP, STYLE, self.head)
        assert (arrow.x0, arrow.y0) == (50.0, 650.0)
        assert (arrow.x1, arrow.y1) == (10.0, 690.0)

    def test_head_is_on_first_end(self) -> None:
        arrow = arrow_shape(PAIR, Half.TOP, SHIFT_BP, STYLE, self.head)
        assert arrow.arrow is not None
        assert arrow.arrow.ends == "first"
        assert arrow.arrow.closed is True


class TestResolveStyle:
    """Tests for resolve_style."""

    @pytest.mark.parametrize("kind", ["box", "circle"])
    def test_box_and_circle_are_never_filled(self, kind: str) -> None:
        request = AnnotationRequest.build(kind, stroke="red", fill="blue")
        style, diagnostics = resolve_style(request)
        assert style.fill is None
        assert style.stroke == "red"
        assert diagnostics == ()

    def test_stroke_defaults_to_black(self) -> None:
        style, _ = resolve_style(AnnotationRequest.build("box"))
        assert style.stroke == "black"

    def test_arrow_fill_follows_stroke(self) -> None:
        style, diagnostics = resolve_style(AnnotationRequest.build("arrow", stroke="blue"))
        assert style.fill == "blue"
        assert diagnostics == ()

    def test_arrow_without_colors_is_black_with_warning(self) -> None:
        style, diagnostics = resolve_style(AnnotationRequest.build("arrow"))
        assert (style.stroke, style.fill) == ("black", "black")
        (diagnostic,) = diagnostics
        assert diagnostic.code == ARROW_DEFAULT_FILL
        assert diagnostic.level == "warning"

    def test_arrow_explicit_fill(self) -> None:
        style, diagnostics = resolve_style(AnnotationRequest.build("arrow", fill="green"))
        assert (style.stroke, style.fill) == ("black", "green")
        assert diagnostics == ()

    def test_alpha_and_width_are_carried(self) -> None:
        style, _ = resolve_style(AnnotationRequest.build("circle", alpha=0.3, lwd=2))
        assert (style.alpha, style.lwd) == (0.3, 2.0)


class TestGenerateShapes:
    """Tests for generate_shapes."""

    def test_both_yields_bottom_then_top_per_pair(
        self, pairs: pd.DataFrame, small_square: HicSquare
    ) -> None:
        request = AnnotationRequest.build("box", shift=4)
        shapes = list(generate_shapes(pairs, small_square, request, Half.BOTH))

        assert len(shapes) == 4
        assert all(isinstance(shape, RectShape) for shape in shapes)
        centers = [(shape.x, shape.y) for shape in shapes]  # type: ignore[union-attr]
        assert centers == [(550.0, 150.0), (150.0, 550.0), (710.0, 310.0), (310.0, 710.0)]

    def test_shift_is_scaled_by_resolution(
        self, pairs: pd.DataFrame, small_square: HicSquare
    ) -> None:
        sequence = generate_shapes(
            pairs, small_square, AnnotationRequest.build("circle", shift=4), Half.TOP
        )
        assert sequence.shift_bp == 40.0
        first = next(iter(sequence))
        assert isinstance(first, CircleShape)
        assert first.r == 90.0

    def test_sequence_is_restartable(
        self, pairs: pd.DataFrame, small_square: HicSquare
    ) -> None:
        sequence = generate_shapes(
            pairs, small_square, AnnotationRequest.build("arrow"), Half.BOTTOM
        )
        assert len(sequence) == 2
        assert list(sequence) == list(sequence)

    def test_arrowhead_uses_configured_length(
        self, pairs: pd.DataFrame, small_square: HicSquare
    ) -> None:
        sequence = generate_shapes(
            pairs, small_square, AnnotationRequest.build("arrow"), Half.TOP
        )
        arrow = next(iter(sequence))
        assert isinstance(arrow, SegmentShape)
        assert arrow.arrow is not None
        assert arrow.arrow.length == PhysicalLength(
            value=settings.ARROW_HEAD_LENGTH, units="inches"
        )

    def test_empty_table_yields_nothing(self, small_square: HicSquare) -> None:
        empty = normalize_pairs(pd.DataFrame(columns=range(6)))
        sequence = generate_shapes(empty, small_square, AnnotationRequest.build(), Half.BOTH)
        assert len(sequence) == 0
        assert list(sequence) == []

    def test_unresolved_half_is_rejected(
        self, pairs: pd.DataFrame, small_square: HicSquare
    ) -> None:
        with pytest.raises(ValueError, match="resolved"):
            generate_shapes(pairs, small_square, AnnotationRequest.build(), Half.INHERIT)
