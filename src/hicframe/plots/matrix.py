"""Hi-C contact-matrix plot models.

Annotations only need to know where a Hi-C plot sits and which genomic
windows it shows, so these models describe exactly that: the genomic
windows, the matrix resolution, the orientation (half), and the plot's
placement on the page. Drawing the matrix itself happens elsewhere.

Variants:
    - HicSquare: a square matrix, optionally with a distinct alternate
      (y-axis) window and an alternate-orientation flag.
    - HicTriangle: the upper triangle of a square matrix, drawn inside a
      square rotated by -45 degrees. Always oriented "top".
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from hicframe.config import settings
from hicframe.genome.assembly import Assembly
from hicframe.genome.window import GenomicWindow
from hicframe.geometry.primitives import DataScale, PlotRegion
from hicframe.geometry.units import PhysicalLength, convert_length
from hicframe.geometry.viewport import Viewport, compose_viewport

if TYPE_CHECKING:
    from hicframe.page import Page

TRIANGLE_ANGLE = -45.0


class Half(str, Enum):
    """Side of a contact matrix's diagonal."""

    INHERIT = "inherit"
    BOTH = "both"
    TOP = "top"
    BOTTOM = "bottom"


def _default_assembly() -> Assembly:
    return Assembly.from_name(settings.DEFAULT_ASSEMBLY)


class _HicPlot(BaseModel, frozen=True):
    """Fields shared by every Hi-C plot variant."""

    chrom: str = Field(..., min_length=1)
    chromstart: int = Field(..., ge=0)
    chromend: int = Field(..., gt=0)
    resolution: int = Field(..., gt=0, description="Base pairs per matrix cell")
    assembly: Assembly = Field(default_factory=_default_assembly)
    region: PlotRegion

    @field_validator("assembly", mode="before")
    @classmethod
    def _parse_assembly(cls, value: Any) -> Any:
        if isinstance(value, str):
            return Assembly.from_name(value)
        return value

    @model_validator(mode="after")
    def _validate_window(self) -> Self:
        if self.chromend <= self.chromstart:
            raise ValueError(
                f"chromend ({self.chromend}) must be greater than "
                f"chromstart ({self.chromstart})"
            )
        return self

    @property
    def window(self) -> GenomicWindow:
        """Return the primary (x-axis) genomic window."""
        return GenomicWindow(self.chrom, self.chromstart, self.chromend)


class HicSquare(_HicPlot, frozen=True):
    """A square Hi-C plot.

    Attributes:
        altchrom: Chromosome on the alternate axis (defaults to chrom).
        altchromstart: Start of the alternate window.
        altchromend: End of the alternate window.
        half: Half of the matrix the plot shows.
        althalf: Set when the two axes were swapped; records which half the
            swapped plot shows.
    """

    plot_type: Literal["square"] = "square"
    altchrom: str | None = None
    altchromstart: int | None = Field(None, ge=0)
    altchromend: int | None = Field(None, gt=0)
    half: Literal["top", "bottom", "both"] = "both"
    althalf: Literal["top", "bottom"] | None = None

    @property
    def alt_window(self) -> GenomicWindow:
        """Return the alternate (y-axis) window, falling back to the primary."""
        return GenomicWindow(
            self.altchrom if self.altchrom is not None else self.chrom,
            self.altchromstart if self.altchromstart is not None else self.chromstart,
            self.altchromend if self.altchromend is not None else self.chromend,
        )

    @property
    def data_scales(self) -> tuple[DataScale, DataScale]:
        """Return the (xscale, yscale) genomic data scales of the plot."""
        alt = self.alt_window
        xscale = self.region.xscale or (float(self.chromstart), float(self.chromend))
        yscale = self.region.yscale or (float(alt.start), float(alt.end))
        return xscale, yscale


class HicTriangle(_HicPlot, frozen=True):
    """A triangular Hi-C plot showing the upper half of the matrix.

    ``region`` is the outside placement of the triangle: its width is the
    triangle's base, and the matrix square has side ``width / sqrt(2)``.
    """

    plot_type: Literal["triangle"] = "triangle"
    half: Literal["top"] = "top"

    @property
    def alt_window(self) -> GenomicWindow:
        """Return the primary window; triangles have no distinct alternate axis."""
        return self.window

    @property
    def data_scales(self) -> tuple[DataScale, DataScale]:
        """Return the (xscale, yscale) genomic data scales of the plot."""
        default = (float(self.chromstart), float(self.chromend))
        return self.region.xscale or default, self.region.yscale or default


MatrixPlot = Annotated[HicSquare | HicTriangle, Field(discriminator="plot_type")]


def _triangle_square_region(plot: HicTriangle, page: Page) -> PlotRegion:
    """Place the rotated matrix square at the triangle's bottom-left corner."""
    outside = plot.region
    width = convert_length(outside.width, page.units)
    height = convert_length(outside.height, page.units)
    left = convert_length(outside.x, page.units) - outside.just.hjust * width
    bottom = convert_length(outside.y, page.units) + outside.just.vjust * height
    side = width / math.sqrt(2)
    return PlotRegion(
        x=PhysicalLength(value=left, units=page.units),
        y=PhysicalLength(value=bottom, units=page.units),
        width=PhysicalLength(value=side, units=page.units),
        height=PhysicalLength(value=side, units=page.units),
        just=("left", "bottom"),
    )


def compose_matrix_viewport(
    page: Page,
    plot: HicSquare | HicTriangle,
    category: str,
) -> Viewport:
    """Compose a viewport aligned with a Hi-C plot's matrix.

    Square plots get a clipped viewport matching their region. Triangle
    plots get the matrix square, side ``width / sqrt(2)``, rotated -45
    degrees around the bottom-left corner of the triangle's region so the
    diagonal runs along the triangle's base.
    """
    xscale, yscale = plot.data_scales
    match plot:
        case HicSquare():
            return compose_viewport(
                page, plot.region, category, clip=True, xscale=xscale, yscale=yscale
            )
        case HicTriangle():
            return compose_viewport(
                page,
                _triangle_square_region(plot, page),
                category,
                xscale=xscale,
                yscale=yscale,
                angle=TRIANGLE_ANGLE,
            )
