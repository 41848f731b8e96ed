"""Scene assembly for hicframe.

A SceneGroup is the unit handed to the rendering boundary: a viewport and
the shapes to draw inside it, in the order they were produced.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from hicframe.annotate.shapes import Shape
from hicframe.geometry.viewport import Viewport


@dataclass
class SceneGroup:
    """Ordered shapes anchored to a viewport.

    Attributes:
        viewport: Viewport whose data scales the shapes are expressed in.
        shapes: Shapes in drawing order.
    """

    viewport: Viewport
    shapes: list[Shape] = field(default_factory=list)

    def append(self, shape: Shape) -> None:
        """Add a shape after all existing ones."""
        self.shapes.append(shape)

    def extend(self, shapes: Iterable[Shape]) -> None:
        """Add shapes in iteration order."""
        for shape in shapes:
            self.append(shape)

    @property
    def is_empty(self) -> bool:
        """Return True if the group holds no shapes."""
        return not self.shapes

    def __len__(self) -> int:
        return len(self.shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)


def assemble_scene(
    viewport: Viewport,
    shapes: Iterable[Shape],
) -> SceneGroup:
    """Collect shapes into a new SceneGroup, preserving their order."""
    group = SceneGroup(viewport=viewport)
    group.extend(shapes)
    return group
