"""Anchor highlights for BEDPE plots.

Shades both anchors of every interval pair shown by a BEDPE plot with a
full-height box, in a band placed on the page below or above the plot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from hicframe.annotate.diagnostics import NO_ELEMENTS, Diagnostic
from hicframe.annotate.scene import SceneGroup, assemble_scene
from hicframe.annotate.shapes import RectShape, Style
from hicframe.exceptions import MissingBedpeDataError, MissingRequiredArgumentError
from hicframe.genome.assembly import Assembly
from hicframe.geometry.primitives import PlotRegion
from hicframe.geometry.units import resolve_length
from hicframe.geometry.viewport import compose_viewport
from hicframe.page import Page
from hicframe.params import Params, resolve_params
from hicframe.plots.pairs import BedpePlot
from hicframe.utils.logging import get_logger

logger = get_logger(__name__)

ANCHOR_CATEGORY = "bedpeAnchor"


@dataclass(frozen=True)
class AnchorAnnotation:
    """Anchor highlights drawn for a BEDPE plot.

    Attributes:
        chrom: Chromosome of the source plot.
        chromstart: Start of the source plot's window.
        chromend: End of the source plot's window.
        assembly: Genome assembly of the source plot.
        region: Placement of the highlight band.
        scene: Anchor boxes and their viewport.
        diagnostics: Non-fatal conditions met while annotating.
    """

    chrom: str
    chromstart: int
    chromend: int
    assembly: Assembly
    region: PlotRegion
    scene: SceneGroup
    diagnostics: tuple[Diagnostic, ...] = field(default=())


def annotate_bedpe_anchors(
    page: Page,
    plot: BedpePlot | None = None,
    *,
    x: Any = None,
    y: Any = None,
    height: Any = None,
    fillcolor: str | None = None,
    linecolor: str | None = None,
    alpha: float | None = None,
    just: Any = None,
    default_units: str | None = None,
    params: Params | None = None,
) -> AnchorAnnotation:
    """Highlight the anchors of a BEDPE plot's interval pairs.

    The band is as wide as the plot and shares its genomic x scale. Each
    pair contributes two boxes, one per anchor, spanning the band's full
    height; all first anchors are drawn before all second anchors.

    Args:
        page: Active page.
        plot: BEDPE plot whose pairs are highlighted.
        x: Horizontal position of the band.
        y: Vertical position of the band, from the page top.
        height: Band height.
        fillcolor: Box fill. Default "lightgrey".
        linecolor: Box outline. Default none.
        alpha: Opacity. Default 0.4.
        just: Justification of the band. Default ("left", "top").
        default_units: Unit for plain numbers. Default the page's.
        params: Optional bundle supplying any of the above.

    Returns:
        The AnchorAnnotation; its scene is empty when the plot has no pairs.

    Raises:
        MissingRequiredArgumentError: If plot, x, y or height is missing.
        MissingBedpeDataError: If the plot carries no BEDPE data.
        MissingUnitError: If a plain number has no unit to resolve to.
        InvalidCoordinateTypeError: If a position is not a number or length.
    """
    values = resolve_params(
        {
            "plot": plot,
            "x": x,
            "y": y,
            "height": height,
            "fillcolor": fillcolor,
            "linecolor": linecolor,
            "alpha": alpha,
            "just": just,
            "default_units": default_units,
        },
        params,
        {
            "fillcolor": "lightgrey",
            "alpha": 0.4,
            "just": ("left", "top"),
            "default_units": page.default_units,
        },
    )

    source = values["plot"]
    if source is None:
        raise MissingRequiredArgumentError("plot")
    if not isinstance(source, BedpePlot) or source.bedpe is None:
        raise MissingBedpeDataError()
    for name in ("x", "y", "height"):
        if values[name] is None:
            raise MissingRequiredArgumentError(name)

    units = values["default_units"]
    region = PlotRegion(
        x=resolve_length(values["x"], units, name="x-coordinate"),
        y=resolve_length(values["y"], units, name="y-coordinate"),
        width=source.region.width,
        height=resolve_length(values["height"], units, name="height"),
        just=values["just"],
        xscale=source.xscale,
    )
    style = Style(
        stroke=values["linecolor"],
        fill=values["fillcolor"],
        alpha=values["alpha"],
    )

    pairs = source.bedpe
    shapes = [
        RectShape(
            x=start, y=0.0, width=end - start, height=1.0, hjust=0, vjust=0, style=style
        )
        for starts, ends in (("start1", "end1"), ("start2", "end2"))
        for start, end in zip(pairs[starts].tolist(), pairs[ends].tolist(), strict=True)
    ]
    diagnostics: list[Diagnostic] = []
    if not shapes:
        diagnostics.append(
            Diagnostic.warning(NO_ELEMENTS, "No bedpe elements found in region.")
        )

    viewport = compose_viewport(page, region, ANCHOR_CATEGORY, clip=True)
    scene = assemble_scene(viewport, shapes)

    for diagnostic in diagnostics:
        diagnostic.log(logger)
    logger.info("Bedpe anchors annotated", viewport=viewport.name, shapes=len(scene))
    return AnchorAnnotation(
        chrom=source.chrom,
        chromstart=source.chromstart,
        chromend=source.chromend,
        assembly=source.assembly,
        region=region,
        scene=scene,
        diagnostics=tuple(diagnostics),
    )
