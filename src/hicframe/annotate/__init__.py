"""Annotations drawn on top of existing plots.

Key Components:
    - annotate_loops: boxes, circles or arrows around chromatin loops on
      square and triangle Hi-C plots
    - annotate_bedpe_anchors: full-height highlights of BEDPE anchors
    - resolve_half: reconciles a requested half with the plot's half
    - generate_shapes: per-pair annotation geometry in genomic coordinates
    - SceneGroup: shapes plus the viewport they are drawn in
"""

from hicframe.annotate.anchors import AnchorAnnotation, annotate_bedpe_anchors
from hicframe.annotate.diagnostics import Diagnostic
from hicframe.annotate.geometry import ShapeSequence, generate_shapes
from hicframe.annotate.half import HalfResolution, inherit_half, parse_half, resolve_half
from hicframe.annotate.loops import LoopAnnotation, annotate_loops
from hicframe.annotate.request import AnnotationRequest, ShapeKind
from hicframe.annotate.scene import SceneGroup, assemble_scene
from hicframe.annotate.shapes import (
    ArrowHead,
    CircleShape,
    RectShape,
    SegmentShape,
    Shape,
    Style,
)

__all__ = [
    "AnchorAnnotation",
    "AnnotationRequest",
    "ArrowHead",
    "CircleShape",
    "Diagnostic",
    "HalfResolution",
    "LoopAnnotation",
    "RectShape",
    "SceneGroup",
    "SegmentShape",
    "Shape",
    "ShapeKind",
    "ShapeSequence",
    "Style",
    "annotate_bedpe_anchors",
    "annotate_loops",
    "assemble_scene",
    "generate_shapes",
    "inherit_half",
    "parse_half",
    "resolve_half",
]
