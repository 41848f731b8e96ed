"""hicframe: page layout and loop annotation for Hi-C figures.

Resolves mixed numeric/physical-unit coordinates into page space, composes
named viewports, and overlays box, circle, and arrow annotations onto
square or triangular Hi-C contact-matrix plots from BEDPE interval pairs.

Example:
    from hicframe import HicSquare, PlotRegion, annotate_loops, create_page

    page = create_page(width=3, height=3, units="inches")
    region = PlotRegion.build(
        x=0, y=0, width=3, height=3, default_units="inches",
        just=("left", "top"), xscale=(28_000_000, 30_300_000),
        yscale=(28_000_000, 30_300_000),
    )
    hic = HicSquare(
        chrom="chr21", chromstart=28_000_000, chromend=30_300_000,
        resolution=10_000, region=region,
    )
    loops = annotate_loops(page, hic, "loops.bedpe", type="box", half="both")
"""

__version__ = "0.1.0"

from hicframe.annotate import (
    AnchorAnnotation,
    AnnotationRequest,
    LoopAnnotation,
    SceneGroup,
    annotate_bedpe_anchors,
    annotate_loops,
    generate_shapes,
    resolve_half,
)
from hicframe.genome import Assembly, read_bedpe, subset_pairs
from hicframe.geometry import (
    PhysicalLength,
    PlotRegion,
    Unit,
    Viewport,
    compose_viewport,
    resolve_length,
)
from hicframe.page import Page, create_page
from hicframe.params import Params
from hicframe.plots import BedpePlot, HicSquare, HicTriangle, plot_rect
from hicframe.render import PageRenderer

__all__ = [
    "AnchorAnnotation",
    "AnnotationRequest",
    "Assembly",
    "BedpePlot",
    "HicSquare",
    "HicTriangle",
    "LoopAnnotation",
    "Page",
    "PageRenderer",
    "Params",
    "PhysicalLength",
    "PlotRegion",
    "SceneGroup",
    "Unit",
    "Viewport",
    "__version__",
    "annotate_bedpe_anchors",
    "annotate_loops",
    "compose_viewport",
    "create_page",
    "generate_shapes",
    "plot_rect",
    "read_bedpe",
    "resolve_half",
    "resolve_length",
    "subset_pairs",
]
