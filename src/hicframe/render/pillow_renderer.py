"""Pillow rendering of hicframe scenes.

This is the drawing boundary: everything above it only describes shapes
in viewport data coordinates. The renderer maps those shapes through their
viewport (scales, justification, rotation) into page coordinates, then
into pixels, and paints them onto an RGBA canvas.

Pixel Space:
    Page coordinates grow upward from the bottom-left corner, while image
    rows grow downward, so ``row = image_height - page_y * pixels_per_unit``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageChops, ImageColor, ImageDraw

from hicframe.annotate.scene import SceneGroup
from hicframe.annotate.shapes import (
    ArrowHead,
    CircleShape,
    RectShape,
    SegmentShape,
    Style,
)
from hicframe.config import settings
from hicframe.geometry.units import convert_length, inches_per_unit
from hicframe.geometry.viewport import Viewport
from hicframe.page import Page
from hicframe.utils.logging import get_logger

logger = get_logger(__name__)

Pixel = tuple[float, float]
RGBA = tuple[int, int, int, int]


@dataclass(frozen=True)
class RenderStyle:
    """Canvas-wide rendering options.

    Attributes:
        background: Page background color.
        circle_segments: Number of polygon vertices used to draw a circle.
        points_per_lwd: Line width 1 corresponds to 1/96 inch.
    """

    background: str = "white"
    circle_segments: int = 180
    points_per_lwd: float = 96.0


def to_rgba(color: str, alpha: float = 1.0) -> RGBA:
    """Resolve a color name or hex string to an RGBA tuple scaled by alpha."""
    rgb = ImageColor.getrgb(color)
    base_alpha = rgb[3] if len(rgb) == 4 else 255
    return (rgb[0], rgb[1], rgb[2], round(base_alpha * alpha))


class PageRenderer:
    """Renders scene groups of a page to a Pillow image.

    Example:
        >>> renderer = PageRenderer(page, dpi=100)
        >>> image = renderer.render(loops.scene)
        >>> image.mode
        'RGB'
    """

    def __init__(
        self,
        page: Page,
        dpi: int | None = None,
        style: RenderStyle | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            page: Page whose coordinate system the scenes are placed in.
            dpi: Pixels per inch. Defaults to settings.RENDER_DPI.
            style: Canvas options. Uses defaults if not provided.

        Raises:
            ValueError: If dpi is not positive.
        """
        self.page = page
        self.dpi = dpi or settings.RENDER_DPI
        if self.dpi <= 0:
            raise ValueError(f"dpi must be positive, got {self.dpi}")
        self.style = style or RenderStyle()
        self.pixels_per_unit = inches_per_unit(page.units) * self.dpi

    @property
    def size(self) -> tuple[int, int]:
        """Return the (width, height) of the canvas in pixels."""
        return (
            max(1, round(self.page.width * self.pixels_per_unit)),
            max(1, round(self.page.height * self.pixels_per_unit)),
        )

    def to_pixels(self, x: float, y: float) -> Pixel:
        """Map page coordinates to image pixel coordinates."""
        return (x * self.pixels_per_unit, self.size[1] - y * self.pixels_per_unit)

    def new_canvas(self) -> Image.Image:
        """Create an empty RGBA canvas filled with the background color."""
        return Image.new("RGBA", self.size, to_rgba(self.style.background))

    def render(self, *groups: SceneGroup) -> Image.Image:
        """Draw scene groups in order and return an RGB image."""
        canvas = self.new_canvas()
        for group in groups:
            self.draw(canvas, group)
        logger.debug("Page rendered", size=self.size, groups=len(groups))
        return canvas.convert("RGB")

    def draw(self, canvas: Image.Image, group: SceneGroup) -> None:
        """Draw one scene group onto an RGBA canvas in place."""
        viewport = group.viewport
        layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
        for shape in group:
            shape_layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
            draw = ImageDraw.Draw(shape_layer)
            match shape:
                case RectShape():
                    self._draw_rect(draw, viewport, shape)
                case CircleShape():
                    self._draw_circle(draw, viewport, shape)
                case SegmentShape():
                    self._draw_segment(draw, viewport, shape)
            layer.alpha_composite(shape_layer)

        if viewport.clip:
            layer = self._clip(layer, viewport)
        canvas.alpha_composite(layer)

    def _clip(self, layer: Image.Image, viewport: Viewport) -> Image.Image:
        mask = Image.new("L", layer.size, 0)
        corners = [self.to_pixels(*corner) for corner in viewport.corners()]
        ImageDraw.Draw(mask).polygon(corners, fill=255)
        alpha = ImageChops.multiply(layer.getchannel("A"), mask)
        layer.putalpha(alpha)
        return layer

    def _line_width(self, style: Style) -> int:
        return max(1, round(style.lwd * self.dpi / self.style.points_per_lwd))

    def _colors(self, style: Style) -> tuple[RGBA | None, RGBA | None]:
        stroke = to_rgba(style.stroke, style.alpha) if style.stroke else None
        fill = to_rgba(style.fill, style.alpha) if style.fill else None
        return stroke, fill

    def _native_polygon(
        self, viewport: Viewport, points: list[tuple[float, float]]
    ) -> list[Pixel]:
        return [self.to_pixels(*viewport.native_to_page(x, y)) for x, y in points]

    def _draw_rect(
        self, draw: ImageDraw.ImageDraw, viewport: Viewport, shape: RectShape
    ) -> None:
        left = shape.x - shape.hjust * shape.width
        bottom = shape.y - shape.vjust * shape.height
        right, top = left + shape.width, bottom + shape.height
        polygon = self._native_polygon(
            viewport, [(left, bottom), (right, bottom), (right, top), (left, top)]
        )
        stroke, fill = self._colors(shape.style)
        draw.polygon(
            polygon, fill=fill, outline=stroke, width=self._line_width(shape.style)
        )

    def _draw_circle(
        self, draw: ImageDraw.ImageDraw, viewport: Viewport, shape: CircleShape
    ) -> None:
        cx, cy = self.to_pixels(*viewport.native_to_page(shape.x, shape.y))
        radius = viewport.native_width(shape.r) * self.pixels_per_unit
        theta = np.linspace(0.0, 2.0 * np.pi, self.style.circle_segments, endpoint=False)
        xs = cx + radius * np.cos(theta)
        ys = cy + radius * np.sin(theta)
        polygon = list(zip(xs.tolist(), ys.tolist(), strict=True))
        stroke, fill = self._colors(shape.style)
        draw.polygon(
            polygon, fill=fill, outline=stroke, width=self._line_width(shape.style)
        )

    def _draw_segment(
        self, draw: ImageDraw.ImageDraw, viewport: Viewport, shape: SegmentShape
    ) -> None:
        start = self.to_pixels(*viewport.native_to_page(shape.x0, shape.y0))
        end = self.to_pixels(*viewport.native_to_page(shape.x1, shape.y1))
        stroke, fill = self._colors(shape.style)
        width = self._line_width(shape.style)
        if stroke is not None:
            draw.line([start, end], fill=stroke, width=width)

        if shape.arrow is None:
            return
        if shape.arrow.ends in ("first", "both"):
            self._draw_arrowhead(draw, start, end, shape.arrow, stroke, fill, width)
        if shape.arrow.ends in ("last", "both"):
            self._draw_arrowhead(draw, end, start, shape.arrow, stroke, fill, width)

    def _draw_arrowhead(
        self,
        draw: ImageDraw.ImageDraw,
        tip: Pixel,
        tail: Pixel,
        head: ArrowHead,
        stroke: RGBA | None,
        fill: RGBA | None,
        width: int,
    ) -> None:
        """Draw a head at ``tip`` pointing away from ``tail``."""
        dx, dy = tip[0] - tail[0], tip[1] - tail[1]
        if dx == 0 and dy == 0:
            return
        length = convert_length(head.length, "inches") * self.dpi
        back = math.atan2(-dy, -dx)
        spread = math.radians(head.angle)
        wings = [
            (
                tip[0] + length * math.cos(back + side * spread),
                tip[1] + length * math.sin(back + side * spread),
            )
            for side in (-1, 1)
        ]
        if head.closed:
            draw.polygon([tip, *wings], fill=fill or stroke, outline=stroke)
        elif stroke is not None:
            draw.line([wings[0], tip, wings[1]], fill=stroke, width=width)
