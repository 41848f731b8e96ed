"""Annotation geometry for interval pairs on Hi-C plots.

For each interval pair (chrom1, start1, end1, chrom2, start2, end2) and a
resolved half, computes the shapes marking the pair in the plot's genomic
data scale. ``shift`` is given in matrix cells and multiplied by the plot's
resolution (base pairs per cell) to reach base-pair units.

Placement:
    - "top": x from the first interval, y from the second.
    - "bottom": the mirror image, x from the second interval and y from
      the first.
    - "both": the bottom placement followed by the top placement.

Shapes:
    - Box: side = (end2 - start2) + 2 * shift * resolution.
    - Circle: radius = 0.5 * (end2 - start2) + shift * resolution.
    - Arrow: a segment of length shift * resolution along each axis,
      pointing diagonally at the pair from just beyond its span, with the
      arrowhead on the segment's first end.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

import pandas as pd

from hicframe.annotate.diagnostics import ARROW_DEFAULT_FILL, Diagnostic
from hicframe.annotate.request import AnnotationRequest, ShapeKind
from hicframe.annotate.shapes import (
    ArrowHead,
    CircleShape,
    RectShape,
    SegmentShape,
    Shape,
    Style,
)
from hicframe.config import settings
from hicframe.geometry.units import PhysicalLength, Unit
from hicframe.plots.matrix import Half, HicSquare, HicTriangle

DEFAULT_COLOR = "black"


class IntervalPair(NamedTuple):
    """One BEDPE record with integer coordinates."""

    chrom1: str
    start1: int
    end1: int
    chrom2: str
    start2: int
    end2: int


def _placements(half: Half) -> tuple[Half, ...]:
    match half:
        case Half.BOTTOM:
            return (Half.BOTTOM,)
        case Half.TOP:
            return (Half.TOP,)
        case Half.BOTH:
            return (Half.BOTTOM, Half.TOP)
        case _:
            raise ValueError(f"Half must be resolved before drawing, got {half.value}")


def _center(pair: IntervalPair, placement: Half) -> tuple[float, float]:
    mid1 = 0.5 * (pair.start1 + pair.end1)
    mid2 = 0.5 * (pair.start2 + pair.end2)
    if placement is Half.BOTTOM:
        return (mid2, mid1)
    return (mid1, mid2)


def box_shape(
    pair: IntervalPair, placement: Half, shift_bp: float, style: Style
) -> RectShape:
    """Square centered on the pair, padded by shift on every side."""
    side = (pair.end2 - pair.start2) + 2 * shift_bp
    x, y = _center(pair, placement)
    return RectShape(x=x, y=y, width=side, height=side, style=style)


def circle_shape(
    pair: IntervalPair, placement: Half, shift_bp: float, style: Style
) -> CircleShape:
    """Circle centered on the pair, padded by shift."""
    radius = 0.5 * (pair.end2 - pair.start2) + shift_bp
    x, y = _center(pair, placement)
    return CircleShape(x=x, y=y, r=radius, style=style)


def arrow_shape(
    pair: IntervalPair,
    placement: Half,
    shift_bp: float,
    style: Style,
    head: ArrowHead,
) -> SegmentShape:
    """Diagonal arrow whose head ends at the edge of the pair's span."""
    span = 0.5 * (pair.end2 - pair.start2)
    if placement is Half.BOTTOM:
        x0 = pair.end2 + span
        y0 = pair.start1 - span
        x1, y1 = x0 + shift_bp, y0 - shift_bp
    else:
        x0 = pair.start1 - span
        y0 = pair.end2 + span
        x1, y1 = x0 - shift_bp, y0 + shift_bp
    return SegmentShape(x0=x0, y0=y0, x1=x1, y1=y1, arrow=head, style=style)


def resolve_style(request: AnnotationRequest) -> tuple[Style, tuple[Diagnostic, ...]]:
    """Derive the drawing style for a request.

    Boxes and circles are always unfilled. Arrows fill their heads with the
    stroke color when no fill is given, and with black (with a warning)
    when neither color is given.
    """
    stroke = request.stroke or DEFAULT_COLOR
    if request.kind is not ShapeKind.ARROW:
        style = Style(stroke=stroke, fill=None, alpha=request.alpha, lwd=request.lwd)
        return style, ()

    diagnostics: tuple[Diagnostic, ...] = ()
    fill = request.fill
    if fill is None:
        if request.stroke is None:
            diagnostics = (
                Diagnostic.warning(
                    ARROW_DEFAULT_FILL,
                    f"No arrow color given; filling arrowheads with {DEFAULT_COLOR}.",
                ),
            )
        fill = stroke
    style = Style(stroke=stroke, fill=fill, alpha=request.alpha, lwd=request.lwd)
    return style, diagnostics


class ShapeSequence:
    """Lazy, restartable sequence of annotation shapes.

    Iterating walks the interval pairs in table order and yields one shape
    per placement (bottom before top for "both"). Each iteration starts
    over from the first pair.
    """

    def __init__(
        self,
        pairs: pd.DataFrame,
        plot: HicSquare | HicTriangle,
        request: AnnotationRequest,
        half: Half,
    ) -> None:
        self.pairs = pairs
        self.plot = plot
        self.request = request
        self.placements = _placements(half)
        self.style, self.diagnostics = resolve_style(request)
        self.shift_bp = request.shift * plot.resolution
        self.head = ArrowHead(
            length=PhysicalLength(value=settings.ARROW_HEAD_LENGTH, units=Unit.INCHES)
        )

    def _shape(self, pair: IntervalPair, placement: Half) -> Shape:
        match self.request.kind:
            case ShapeKind.BOX:
                return box_shape(pair, placement, self.shift_bp, self.style)
            case ShapeKind.CIRCLE:
                return circle_shape(pair, placement, self.shift_bp, self.style)
            case ShapeKind.ARROW:
                return arrow_shape(pair, placement, self.shift_bp, self.style, self.head)

    def __iter__(self) -> Iterator[Shape]:
        columns = self.pairs.iloc[:, :6].itertuples(index=False, name=None)
        for row in columns:
            pair = IntervalPair(
                str(row[0]), int(row[1]), int(row[2]), str(row[3]), int(row[4]), int(row[5])
            )
            for placement in self.placements:
                yield self._shape(pair, placement)

    def __len__(self) -> int:
        return len(self.pairs) * len(self.placements)


def generate_shapes(
    pairs: pd.DataFrame,
    plot: HicSquare | HicTriangle,
    request: AnnotationRequest,
    half: Half,
) -> ShapeSequence:
    """Create the shape sequence for subset interval pairs.

    Args:
        pairs: Interval pairs already subset to the plot's windows.
        plot: Source Hi-C plot (its resolution scales ``shift``).
        request: Shape kind, shift and style.
        half: Resolved half (top, bottom or both).

    Returns:
        A ShapeSequence; iterate it to obtain the shapes.

    Raises:
        ValueError: If half is still INHERIT.
    """
    return ShapeSequence(pairs, plot, request, half)
