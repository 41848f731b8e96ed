"""Shape descriptors for hicframe scenes.

Shapes are plain immutable values describing what to draw, in the data
(native) coordinates of the viewport that will hold them. They never draw
themselves; the renderer interprets them.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from hicframe.geometry.units import PhysicalLength


class Style(BaseModel, frozen=True):
    """Stroke and fill attributes of a shape.

    Attributes:
        stroke: Outline color, or None for no outline.
        fill: Interior color, or None for an unfilled interior.
        alpha: Opacity in [0, 1].
        lwd: Line width, where 1 is 1/96 inch.
    """

    stroke: str | None = "black"
    fill: str | None = None
    alpha: float = Field(1.0, ge=0.0, le=1.0)
    lwd: float = Field(1.0, ge=0.0)


class ArrowHead(BaseModel, frozen=True):
    """Arrowhead attached to a segment.

    Attributes:
        length: Length of the head's sides.
        ends: Which end of the segment carries the head.
        closed: Closed heads are filled triangles; open heads are two lines.
        angle: Half-angle of the head in degrees.
    """

    length: PhysicalLength
    ends: Literal["first", "last", "both"] = "first"
    closed: bool = True
    angle: float = Field(30.0, gt=0.0, lt=90.0)


class RectShape(BaseModel, frozen=True):
    """A rectangle positioned by a justification anchor."""

    shape: Literal["rect"] = "rect"
    x: float
    y: float
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    hjust: float = 0.5
    vjust: float = 0.5
    style: Style = Field(default_factory=Style)


class CircleShape(BaseModel, frozen=True):
    """A circle; the radius is measured along the viewport's x scale."""

    shape: Literal["circle"] = "circle"
    x: float
    y: float
    r: float = Field(..., ge=0)
    style: Style = Field(default_factory=Style)


class SegmentShape(BaseModel, frozen=True):
    """A line segment from (x0, y0) to (x1, y1) with an optional arrowhead."""

    shape: Literal["segment"] = "segment"
    x0: float
    y0: float
    x1: float
    y1: float
    arrow: ArrowHead | None = None
    style: Style = Field(default_factory=Style)


Shape = Annotated[
    RectShape | CircleShape | SegmentShape,
    Field(discriminator="shape"),
]
