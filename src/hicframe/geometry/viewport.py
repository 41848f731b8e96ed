"""Viewport composition for hicframe.

A viewport is a named rectangular drawing region placed on a page. It has
its own data scales, so shapes inside it are described in data (native)
coordinates, and it may be rotated around its justification point.

Coordinate Systems:
    - Native: the viewport's xscale/yscale (e.g. genomic base pairs).
    - Page: page units with the origin at the bottom-left corner of the
      page (the vertical flip has already been applied).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, Field, model_validator

from hicframe.geometry.primitives import DataScale, Justification, PlotRegion
from hicframe.geometry.units import convert_length, to_page_x, to_page_y
from hicframe.utils.logging import get_logger

if TYPE_CHECKING:
    from hicframe.page import Page

logger = get_logger(__name__)


class Viewport(BaseModel, frozen=True):
    """A named, placed drawing region in page units.

    Attributes:
        name: Unique name within the page's viewport registry.
        x: Horizontal page position of the justification anchor.
        y: Vertical page position of the anchor (from the page bottom).
        width: Extent along the viewport's own x axis.
        height: Extent along the viewport's own y axis.
        hjust: Horizontal justification of the anchor (0 = left).
        vjust: Vertical justification of the anchor (0 = bottom).
        xscale: Native range mapped across the width.
        yscale: Native range mapped across the height.
        clip: Whether drawing is clipped to the viewport.
        angle: Counter-clockwise rotation in degrees around the anchor.
    """

    name: str
    x: float
    y: float
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    hjust: float = Field(0.5, ge=0.0, le=1.0)
    vjust: float = Field(0.5, ge=0.0, le=1.0)
    xscale: DataScale = (0.0, 1.0)
    yscale: DataScale = (0.0, 1.0)
    clip: bool = False
    angle: float = 0.0

    @model_validator(mode="after")
    def _validate_scales(self) -> Self:
        if self.xscale[0] == self.xscale[1] or self.yscale[0] == self.yscale[1]:
            raise ValueError("Viewport scales must span a non-empty range")
        return self

    def npc_to_page(self, u: float, v: float) -> tuple[float, float]:
        """Map normalized (0-1) viewport coordinates to page coordinates."""
        dx = (u - self.hjust) * self.width
        dy = (v - self.vjust) * self.height
        if self.angle:
            theta = math.radians(self.angle)
            cos_t, sin_t = math.cos(theta), math.sin(theta)
            dx, dy = dx * cos_t - dy * sin_t, dx * sin_t + dy * cos_t
        return (self.x + dx, self.y + dy)

    def native_to_page(self, x: float, y: float) -> tuple[float, float]:
        """Map native (data) coordinates to page coordinates."""
        u = (x - self.xscale[0]) / (self.xscale[1] - self.xscale[0])
        v = (y - self.yscale[0]) / (self.yscale[1] - self.yscale[0])
        return self.npc_to_page(u, v)

    def native_width(self, dx: float) -> float:
        """Convert a native horizontal distance to page units."""
        return abs(dx * self.width / (self.xscale[1] - self.xscale[0]))

    def native_height(self, dy: float) -> float:
        """Convert a native vertical distance to page units."""
        return abs(dy * self.height / (self.yscale[1] - self.yscale[0]))

    def corners(self) -> list[tuple[float, float]]:
        """Return the page-space corners (bottom-left, counter-clockwise)."""
        return [
            self.npc_to_page(0.0, 0.0),
            self.npc_to_page(1.0, 0.0),
            self.npc_to_page(1.0, 1.0),
            self.npc_to_page(0.0, 1.0),
        ]


def compose_viewport(
    page: Page,
    region: PlotRegion,
    category: str,
    *,
    clip: bool = False,
    xscale: DataScale | None = None,
    yscale: DataScale | None = None,
    angle: float = 0.0,
    just: Justification | None = None,
) -> Viewport:
    """Build a named viewport from a plot region and register its name.

    The region is converted into page units (flipping its y position) and
    the viewport is named ``<category><n>`` with the next unused suffix in
    the page's registry.

    Args:
        page: Active page; its registry records the new name.
        region: Placement of the viewport.
        category: Name prefix, e.g. "loopAnnotation".
        clip: Clip drawing to the viewport.
        xscale: Native x range. Defaults to the region's xscale, then (0, 1).
        yscale: Native y range. Defaults to the region's yscale, then (0, 1).
        angle: Counter-clockwise rotation in degrees.
        just: Justification override. Defaults to the region's.

    Returns:
        The composed Viewport.

    Raises:
        InvalidCoordinateTypeError: If the region is given in native units.
    """
    justification = just or region.just
    x = to_page_x(region.x, page)
    y = to_page_y(region.y, page)
    width = convert_length(region.width, page.units)
    height = convert_length(region.height, page.units)

    viewport = Viewport(
        name=category,
        x=x,
        y=y,
        width=width,
        height=height,
        hjust=justification.hjust,
        vjust=justification.vjust,
        xscale=xscale or region.xscale or (0.0, 1.0),
        yscale=yscale or region.yscale or (0.0, 1.0),
        clip=clip,
        angle=angle,
    )
    name = page.register_viewport(category)
    viewport = viewport.model_copy(update={"name": name})
    logger.debug(
        "Viewport composed",
        name=name,
        x=x,
        y=y,
        width=width,
        height=height,
        angle=angle,
    )
    return viewport
