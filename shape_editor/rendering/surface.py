"""
Rendering surfaces: the collaborators a paint pass draws onto.
"""

from typing import Iterator, List

from shape_editor.rendering.primitives import (
    FilledCircle, FilledRect, Point, OutlineRect, Primitive, RenderError
)
from shape_editor.utils.logger import get_logger

logger = get_logger(__name__)


class Surface:
    """
    Base class for rendering surfaces.

    Shapes call `draw` with one primitive at a time; subclasses implement
    the per-primitive methods.
    """

    def draw(self, primitive: Primitive) -> None:
        """
        Dispatch a primitive to the matching draw method.

        Raises:
            RenderError: If the primitive type is not supported
        """
        if isinstance(primitive, FilledCircle):
            self.draw_filled_circle(primitive)
        elif isinstance(primitive, FilledRect):
            self.draw_filled_rect(primitive)
        elif isinstance(primitive, Point):
            self.draw_point(primitive)
        elif isinstance(primitive, OutlineRect):
            self.draw_outline_rect(primitive)
        else:
            raise RenderError(f"Unsupported primitive: {primitive!r}")

    def draw_filled_circle(self, primitive: FilledCircle) -> None:
        raise NotImplementedError("Subclasses must implement draw_filled_circle")

    def draw_filled_rect(self, primitive: FilledRect) -> None:
        raise NotImplementedError("Subclasses must implement draw_filled_rect")

    def draw_point(self, primitive: Point) -> None:
        raise NotImplementedError("Subclasses must implement draw_point")

    def draw_outline_rect(self, primitive: OutlineRect) -> None:
        raise NotImplementedError("Subclasses must implement draw_outline_rect")


class RecordingSurface(Surface):
    """Surface that records primitives in the order they are drawn."""

    def __init__(self):
        self._primitives: List[Primitive] = []

    @property
    def primitives(self) -> List[Primitive]:
        """Get a copy of the recorded primitives."""
        return list(self._primitives)

    def clear(self) -> None:
        self._primitives.clear()

    def draw(self, primitive: Primitive) -> None:
        super().draw(primitive)
        self._primitives.append(primitive)

    # Validation happens in draw(); nothing else to do per type
    def draw_filled_circle(self, primitive: FilledCircle) -> None:
        pass

    def draw_filled_rect(self, primitive: FilledRect) -> None:
        pass

    def draw_point(self, primitive: Point) -> None:
        pass

    def draw_outline_rect(self, primitive: OutlineRect) -> None:
        pass

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives)
