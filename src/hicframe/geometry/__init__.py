"""Geometry module for hicframe.

This package provides unit-tagged lengths, plot placement primitives, and
named viewports that map data coordinates onto the page.

Key Components:
    - Units: PhysicalLength, Unit, and the coordinate resolver
    - Primitives: Justification and PlotRegion placement models
    - Viewports: Viewport model and the viewport composer

Example:
    from hicframe.geometry import PlotRegion, compose_viewport

    region = PlotRegion.build(
        x=0.5, y=0.5, width=2, height=2,
        default_units="inches", just=("left", "top"),
    )
    vp = compose_viewport(page, region, "loopAnnotation", clip=True)
"""

from hicframe.geometry.primitives import DataScale, Justification, PlotRegion
from hicframe.geometry.units import (
    PhysicalLength,
    Unit,
    convert_length,
    inches_per_unit,
    resolve_length,
    to_page_x,
    to_page_y,
)
from hicframe.geometry.viewport import Viewport, compose_viewport

__all__ = [
    "DataScale",
    "Justification",
    "PhysicalLength",
    "PlotRegion",
    "Unit",
    "Viewport",
    "compose_viewport",
    "convert_length",
    "inches_per_unit",
    "resolve_length",
    "to_page_x",
    "to_page_y",
]
