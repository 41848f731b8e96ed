"""Loop annotation on Hi-C plots.

Draws a box, circle or arrow around every chromatin loop (BEDPE interval
pair) that falls inside a square or triangle Hi-C plot. The pipeline:

1. Resolve parameters (explicit > Params bundle > settings).
2. Validate the plot, the half, and the shape kind.
3. Load the BEDPE table and check chromosome names for the assembly.
4. Subset the loops to the plot's genomic windows.
5. Generate shapes in the plot's data scale.
6. Compose the annotation viewport and assemble the scene.

Every fatal error is raised before step 6, so a failed call leaves the
page's viewport registry untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pandas as pd

from hicframe.annotate.diagnostics import EMPTY_INPUT, NO_ELEMENTS, Diagnostic
from hicframe.annotate.geometry import generate_shapes
from hicframe.annotate.half import resolve_half
from hicframe.annotate.request import AnnotationRequest
from hicframe.annotate.scene import SceneGroup, assemble_scene
from hicframe.config import settings
from hicframe.exceptions import MissingRequiredArgumentError
from hicframe.genome.assembly import Assembly
from hicframe.genome.bedpe import check_chromosome_format, read_bedpe, subset_pairs
from hicframe.geometry.primitives import PlotRegion
from hicframe.page import Page
from hicframe.params import Params, resolve_params
from hicframe.plots.matrix import Half, HicSquare, HicTriangle, compose_matrix_viewport
from hicframe.utils.logging import get_logger

logger = get_logger(__name__)

LOOP_CATEGORY = "loopAnnotation"


@dataclass(frozen=True)
class LoopAnnotation:
    """Loops drawn on a Hi-C plot.

    Mirrors the genomic windows and placement of the source plot, so the
    annotation itself can be passed as the plot of another
    ``annotate_loops`` call.

    Attributes:
        plot: Source Hi-C plot.
        half: Half the loops were drawn on.
        scene: Shapes and the viewport they are drawn in.
        diagnostics: Non-fatal conditions met while annotating.
    """

    plot: HicSquare | HicTriangle
    half: Half
    scene: SceneGroup
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    @property
    def chrom(self) -> str:
        return self.plot.chrom

    @property
    def chromstart(self) -> int:
        return self.plot.chromstart

    @property
    def chromend(self) -> int:
        return self.plot.chromend

    @property
    def altchrom(self) -> str:
        return self.plot.alt_window.chrom

    @property
    def altchromstart(self) -> int:
        return self.plot.alt_window.start

    @property
    def altchromend(self) -> int:
        return self.plot.alt_window.end

    @property
    def assembly(self) -> Assembly:
        return self.plot.assembly

    @property
    def region(self) -> PlotRegion:
        return self.plot.region


def annotate_loops(
    page: Page,
    hic_plot: HicSquare | HicTriangle | LoopAnnotation | None = None,
    bedpe_data: str | Path | pd.DataFrame | None = None,
    *,
    type: str | None = None,  # noqa: A002
    half: str | None = None,
    shift: float | None = None,
    stroke: str | None = None,
    fill: str | None = None,
    alpha: float | None = None,
    lwd: float | None = None,
    params: Params | None = None,
) -> LoopAnnotation:
    """Annotate chromatin loops on a Hi-C plot.

    Args:
        page: Active page.
        hic_plot: Square or triangle Hi-C plot, or a previous LoopAnnotation.
        bedpe_data: BEDPE file path or DataFrame of loops.
        type: "box", "circle" or "arrow". Default settings.DEFAULT_ANNOTATION_TYPE.
        half: "inherit", "both", "top" or "bottom". Default settings.DEFAULT_HALF.
        shift: Padding (box, circle) or arrow length in matrix cells.
            Default settings.DEFAULT_SHIFT.
        stroke: Outline color.
        fill: Fill color (ignored for boxes and circles).
        alpha: Opacity.
        lwd: Line width.
        params: Optional bundle supplying any of the above.

    Returns:
        The LoopAnnotation; its scene is empty when no loops fall in the plot.

    Raises:
        MissingRequiredArgumentError: If hic_plot or bedpe_data is missing.
        TypeError: If hic_plot is not a Hi-C plot.
        UnsupportedShapeKindError: If type is not box, circle or arrow.
        InvalidHalfError: If half is not a known half.
        IncompatibleHalfError: If the plot cannot show the requested half.
        FileNotFoundError: If the BEDPE path does not exist.
        BedpeFormatError: If the loop table has fewer than six columns.
        ChromosomeFormatError: If chromosome names do not match the assembly.
    """
    values = resolve_params(
        {
            "hic_plot": hic_plot,
            "bedpe_data": bedpe_data,
            "type": type,
            "half": half,
            "shift": shift,
            "stroke": stroke,
            "fill": fill,
            "alpha": alpha,
            "lwd": lwd,
        },
        params,
        {
            "type": settings.DEFAULT_ANNOTATION_TYPE,
            "half": settings.DEFAULT_HALF,
            "shift": settings.DEFAULT_SHIFT,
        },
    )

    plot = values["hic_plot"]
    if plot is None:
        raise MissingRequiredArgumentError("hic_plot")
    if isinstance(plot, LoopAnnotation):
        plot = plot.plot
    if not isinstance(plot, HicSquare | HicTriangle):
        raise TypeError("Input plot must be a HicSquare or HicTriangle plot.")
    if values["bedpe_data"] is None:
        raise MissingRequiredArgumentError("bedpe_data")

    request = AnnotationRequest.build(
        values["type"],
        shift=values["shift"],
        half=values["half"],
        stroke=values["stroke"],
        fill=values["fill"],
        alpha=values["alpha"],
        lwd=values["lwd"],
    )
    resolution = resolve_half(request.half, plot)
    diagnostics = list(resolution.diagnostics)

    loops = read_bedpe(values["bedpe_data"])
    if loops.empty:
        diagnostics.append(
            Diagnostic.warning(EMPTY_INPUT, "Loop input contains no values.")
        )
    check_chromosome_format(loops, plot.assembly)
    loops_subset = subset_pairs(plot, loops)

    sequence = generate_shapes(loops_subset, plot, request, resolution.half)
    shapes = list(sequence)
    if loops_subset.empty:
        diagnostics.append(Diagnostic.warning(NO_ELEMENTS, "No loops found in region."))
    else:
        diagnostics.extend(sequence.diagnostics)

    viewport = compose_matrix_viewport(page, plot, LOOP_CATEGORY)
    scene = assemble_scene(viewport, shapes)

    for diagnostic in diagnostics[len(resolution.diagnostics) :]:
        diagnostic.log(logger)
    logger.info(
        "Loops annotated",
        viewport=viewport.name,
        type=request.kind.value,
        half=resolution.half.value,
        loops=len(loops_subset),
        shapes=len(scene),
    )
    return LoopAnnotation(
        plot=plot,
        half=resolution.half,
        scene=scene,
        diagnostics=tuple(diagnostics),
    )
