"""Rendering boundary for hicframe.

Key Components:
    - PageRenderer: draws SceneGroups onto a Pillow image of the page
    - RenderStyle: canvas-wide options (background, circle smoothness)
"""

from hicframe.render.pillow_renderer import PageRenderer, RenderStyle, to_rgba

__all__ = ["PageRenderer", "RenderStyle", "to_rgba"]
