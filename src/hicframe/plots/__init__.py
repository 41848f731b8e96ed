"""Plot models for hicframe.

Key Components:
    - HicSquare / HicTriangle: Hi-C contact-matrix plots that loops are
      annotated on
    - BedpePlot: genomic plot drawn from interval pairs
    - plot_rect: rectangles placed directly on the page
"""

from hicframe.plots.matrix import (
    Half,
    HicSquare,
    HicTriangle,
    MatrixPlot,
    compose_matrix_viewport,
)
from hicframe.plots.pairs import BedpePlot
from hicframe.plots.rect import RectPlot, plot_rect

__all__ = [
    "BedpePlot",
    "Half",
    "HicSquare",
    "HicTriangle",
    "MatrixPlot",
    "RectPlot",
    "compose_matrix_viewport",
    "plot_rect",
]
