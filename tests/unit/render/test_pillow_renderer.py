"""Unit tests for the Pillow renderer."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from hicframe.annotate import (
    ArrowHead,
    CircleShape,
    RectShape,
    SceneGroup,
    SegmentShape,
    Style,
    annotate_loops,
)
from hicframe.config import settings
from hicframe.geometry import PhysicalLength, Viewport
from hicframe.page import Page, create_page
from hicframe.plots import HicSquare, plot_rect
from hicframe.render import PageRenderer, RenderStyle, to_rgba

WHITE = (255, 255, 255)
RED = (255, 0, 0)


@pytest.fixture
def small_page() -> Page:
    """A 2 x 2 inch page rendered at 50 dpi is 100 x 100 pixels."""
    return create_page(width=2, height=2, units="inches")


def _clipped_viewport(clip: bool) -> Viewport:
    return Viewport(
        name="v1",
        x=0.5,
        y=0.5,
        width=1.0,
        height=1.0,
        hjust=0.0,
        vjust=0.0,
        clip=clip,
    )


class TestToRgba:
    """Tests for color resolution."""

    def test_named_color(self) -> None:
        assert to_rgba("red") == (255, 0, 0, 255)

    def test_alpha_scales_opacity(self) -> None:
        assert to_rgba("#00ff00", 0.0) == (0, 255, 0, 0)
        assert to_rgba("#00ff0080", 0.5) == (0, 255, 0, 64)

    def test_unknown_color(self) -> None:
        with pytest.raises(ValueError):
            to_rgba("not-a-color")


class TestPageRenderer:
    """Tests for PageRenderer geometry."""

    def test_size_in_pixels(self, small_page: Page) -> None:
        assert PageRenderer(small_page, dpi=50).size == (100, 100)

    def test_size_for_metric_page(self) -> None:
        page = create_page(width=2.54, height=5.08, units="cm")
        assert PageRenderer(page, dpi=100).size == (100, 200)

    def test_default_dpi_from_settings(self, small_page: Page) -> None:
        assert PageRenderer(small_page).dpi == settings.RENDER_DPI

    def test_rejects_negative_dpi(self, small_page: Page) -> None:
        with pytest.raises(ValueError, match="dpi must be positive"):
            PageRenderer(small_page, dpi=-10)

    def test_pixel_rows_grow_downward(self, small_page: Page) -> None:
        renderer = PageRenderer(small_page, dpi=50)
        assert renderer.to_pixels(0.0, 0.0) == (0.0, 100.0)
        assert renderer.to_pixels(2.0, 2.0) == (100.0, 0.0)

    def test_empty_render_is_background(self, small_page: Page) -> None:
        image = PageRenderer(small_page, dpi=50).render()
        assert image.mode == "RGB"
        assert image.size == (100, 100)
        assert image.getpixel((50, 50)) == WHITE

    def test_custom_background(self, small_page: Page) -> None:
        renderer = PageRenderer(small_page, dpi=50, style=RenderStyle(background="black"))
        assert renderer.render().getpixel((10, 10)) == (0, 0, 0)


class TestPageRendererShapes:
    """Tests for drawing shapes."""

    def test_page_rectangle(self, small_page: Page) -> None:
        rect = plot_rect(small_page, x=1, y=0.5, width=1, height=0.5, fill="red")
        image = PageRenderer(small_page, dpi=50).render(rect.scene)

        # Centered at 1 inch across and half an inch down from the top
        assert image.getpixel((50, 25)) == RED
        assert image.getpixel((50, 75)) == WHITE
        assert image.getpixel((10, 25)) == WHITE

    def test_transparent_fill_blends_with_background(self, small_page: Page) -> None:
        rect = plot_rect(
            small_page, x=1, y=1, width=1, height=1, fill="red", alpha=0.0
        )
        image = PageRenderer(small_page, dpi=50).render(rect.scene)
        assert image.getpixel((50, 50)) == WHITE

    def test_circle(self, small_page: Page) -> None:
        group = SceneGroup(
            viewport=small_page.root_viewport(),
            shapes=[CircleShape(x=1.0, y=1.0, r=0.5, style=Style(stroke=None, fill="blue"))],
        )
        image = PageRenderer(small_page, dpi=50).render(group)

        assert image.getpixel((50, 50)) == (0, 0, 255)
        assert image.getpixel((5, 5)) == WHITE

    def test_clip_masks_outside_viewport(self, small_page: Page) -> None:
        shape = RectShape(
            x=-1.0, y=-1.0, width=3.0, height=3.0, hjust=0.0, vjust=0.0,
            style=Style(stroke=None, fill="red"),
        )
        renderer = PageRenderer(small_page, dpi=50)

        clipped = renderer.render(SceneGroup(viewport=_clipped_viewport(True), shapes=[shape]))
        unclipped = renderer.render(
            SceneGroup(viewport=_clipped_viewport(False), shapes=[shape])
        )

        assert clipped.getpixel((50, 50)) == RED
        assert clipped.getpixel((12, 87)) == WHITE
        assert unclipped.getpixel((12, 87)) == RED

    def test_segment_with_arrowhead(self, small_page: Page) -> None:
        segment = SegmentShape(
            x0=0.5,
            y0=1.0,
            x1=1.5,
            y1=1.0,
            arrow=ArrowHead(length=PhysicalLength(value=0.2, units="inches")),
            style=Style(stroke="black", fill="black", lwd=10),
        )
        group = SceneGroup(viewport=small_page.root_viewport(), shapes=[segment])
        image = np.asarray(PageRenderer(small_page, dpi=50).render(group))

        # Line along the middle row, head widening it near its first end
        assert (image[50, 40:60] == 0).all()
        assert (image[47, 32] == 0).all()
        assert (image[30, 50] == 255).all()

    def test_groups_are_drawn_in_order(self, small_page: Page) -> None:
        first = plot_rect(small_page, x=1, y=1, width=1, height=1, fill="red")
        second = plot_rect(small_page, x=1, y=1, width=0.5, height=0.5, fill="blue")
        image = PageRenderer(small_page, dpi=50).render(first.scene, second.scene)
        assert image.getpixel((50, 50)) == (0, 0, 255)

    def test_loop_annotation_is_drawn(
        self, page: Page, square_plot: HicSquare, loops_frame: pd.DataFrame
    ) -> None:
        loops = annotate_loops(page, square_plot, loops_frame, type="arrow", stroke="red")
        image = np.asarray(PageRenderer(page, dpi=40).render(loops.scene))

        assert image.shape == (120, 120, 3)
        assert (image != 255).any()
