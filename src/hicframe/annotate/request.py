"""Annotation requests: what to draw around each interval pair."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from hicframe.annotate.half import parse_half
from hicframe.exceptions import UnsupportedShapeKindError
from hicframe.plots.matrix import Half


class ShapeKind(str, Enum):
    """Annotation shape drawn for each interval pair."""

    BOX = "box"
    CIRCLE = "circle"
    ARROW = "arrow"

    @classmethod
    def parse(cls, value: Any) -> ShapeKind:
        """Parse a shape kind name.

        Raises:
            UnsupportedShapeKindError: If value is not box, circle or arrow.
        """
        if isinstance(value, ShapeKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedShapeKindError(value) from None


class AnnotationRequest(BaseModel, frozen=True):
    """An immutable description of one annotation call.

    Attributes:
        kind: Shape drawn per interval pair.
        shift: Padding (box, circle) or arrow length, in matrix cells.
        half: Requested half, possibly "inherit".
        stroke: Requested outline color; None when not given.
        fill: Requested fill color; None when not given.
        alpha: Opacity in [0, 1].
        lwd: Line width.
    """

    kind: ShapeKind = ShapeKind.BOX
    shift: float = Field(4.0, ge=0.0)
    half: Half = Half.INHERIT
    stroke: str | None = None
    fill: str | None = None
    alpha: float = Field(1.0, ge=0.0, le=1.0)
    lwd: float = Field(1.0, ge=0.0)

    @classmethod
    def build(
        cls,
        kind: Any = ShapeKind.BOX,
        *,
        shift: float = 4.0,
        half: Any = Half.INHERIT,
        stroke: str | None = None,
        fill: str | None = None,
        alpha: float | None = None,
        lwd: float | None = None,
    ) -> AnnotationRequest:
        """Create a request from user-facing values.

        Raises:
            UnsupportedShapeKindError: If kind is not box, circle or arrow.
            InvalidHalfError: If half is not inherit, both, top or bottom.
        """
        return cls(
            kind=ShapeKind.parse(kind),
            shift=shift,
            half=parse_half(half),
            stroke=stroke,
            fill=fill,
            alpha=1.0 if alpha is None else alpha,
            lwd=1.0 if lwd is None else lwd,
        )
