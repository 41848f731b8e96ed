"""Rectangles placed directly on the page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hicframe.annotate.scene import SceneGroup
from hicframe.annotate.shapes import RectShape, Style
from hicframe.exceptions import MissingRequiredArgumentError
from hicframe.geometry.primitives import Justification
from hicframe.geometry.units import (
    PhysicalLength,
    convert_length,
    resolve_length,
    to_page_x,
    to_page_y,
)
from hicframe.page import Page
from hicframe.params import Params, resolve_params
from hicframe.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class RectPlot:
    """A rectangle on the page.

    Attributes:
        x: Horizontal position of the anchor.
        y: Vertical position of the anchor, from the page top.
        width: Rectangle width.
        height: Rectangle height.
        just: Which point of the rectangle sits at (x, y).
        scene: The rectangle in page coordinates, in the page's root viewport.
    """

    x: PhysicalLength
    y: PhysicalLength
    width: PhysicalLength
    height: PhysicalLength
    just: Justification
    scene: SceneGroup


def plot_rect(
    page: Page,
    *,
    x: Any = None,
    y: Any = None,
    width: Any = None,
    height: Any = None,
    just: Any = None,
    default_units: str | None = None,
    linecolor: str | None = None,
    lwd: float | None = None,
    fill: str | None = None,
    alpha: float | None = None,
    params: Params | None = None,
) -> RectPlot:
    """Place a rectangle on the page.

    Plain numbers take ``default_units`` (falling back to the page's
    default unit). The y position is measured from the top of the page.

    Raises:
        MissingRequiredArgumentError: If x, y, width or height is missing.
        MissingUnitError: If a plain number has no unit to resolve to.
        InvalidCoordinateTypeError: If a value is not a number or length.
    """
    values = resolve_params(
        {
            "x": x,
            "y": y,
            "width": width,
            "height": height,
            "just": just,
            "default_units": default_units,
            "linecolor": linecolor,
            "lwd": lwd,
            "fill": fill,
            "alpha": alpha,
        },
        params,
        {
            "just": "center",
            "default_units": page.default_units,
            "linecolor": "black",
            "lwd": 1.0,
            "alpha": 1.0,
        },
    )
    for name in ("x", "y", "width", "height"):
        if values[name] is None:
            raise MissingRequiredArgumentError(name)

    units = values["default_units"]
    rect_x = resolve_length(values["x"], units, name="x-coordinate")
    rect_y = resolve_length(values["y"], units, name="y-coordinate")
    rect_width = resolve_length(values["width"], units, name="width")
    rect_height = resolve_length(values["height"], units, name="height")
    justification = Justification.parse(values["just"])

    shape = RectShape(
        x=to_page_x(rect_x, page),
        y=to_page_y(rect_y, page),
        width=convert_length(rect_width, page.units),
        height=convert_length(rect_height, page.units),
        hjust=justification.hjust,
        vjust=justification.vjust,
        style=Style(
            stroke=values["linecolor"],
            fill=values["fill"],
            alpha=values["alpha"],
            lwd=values["lwd"],
        ),
    )
    logger.debug("Rectangle placed", x=shape.x, y=shape.y, width=shape.width)
    return RectPlot(
        x=rect_x,
        y=rect_y,
        width=rect_width,
        height=rect_height,
        just=justification,
        scene=SceneGroup(viewport=page.root_viewport(), shapes=[shape]),
    )
