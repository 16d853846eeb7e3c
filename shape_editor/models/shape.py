"""
Shape models for the editor canvas.
Provides primitive shapes (dot, circle, rectangle) and a compound shape
that owns an ordered list of children and derives its geometry, hit
testing and painting from them.
"""

import numbers
from enum import Enum, auto
from typing import Iterator, List, NamedTuple, Optional, Union

from shape_editor.core import CONFIG
from shape_editor.models.color import Color, ColorValue, parse_color
from shape_editor.rendering.primitives import (
    FilledCircle, FilledRect, Point, OutlineRect, SelectionStyle
)
from shape_editor.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)


class ShapeType(Enum):
    """Enum for the shape variants."""
    DOT = auto()
    CIRCLE = auto()
    RECTANGLE = auto()
    COMPOUND = auto()


class ShapeError(Exception):
    """Custom exception for shape-related errors."""
    pass


class BoundingBox(NamedTuple):
    """Axis-aligned box (x, y, width, height)."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def contains(self, px: int, py: int) -> bool:
        """Return whether a point lies inside the box, edges included."""
        return self.x <= px <= self.right and self.y <= py <= self.bottom

    def expanded(self, amount: int) -> 'BoundingBox':
        """Grow the box by `amount` on every side."""
        return BoundingBox(
            self.x - amount,
            self.y - amount,
            self.width + 2 * amount,
            self.height + 2 * amount
        )


EMPTY_BOX = BoundingBox(0, 0, 0, 0)


def _require_int(name: str, value) -> int:
    """Validate an integer coordinate or extent."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ShapeError(f"{name} must be an integer, got {value!r}")
    return int(value)


class Shape:
    """
    Base class for all shapes on the canvas.

    Holds position, color and the selection flag. Subclasses provide the
    geometry (`bounding_box`), the hit test (`contains_point`) and the
    primitive they paint.
    """

    __slots__ = ('_x', '_y', '_color', '_selected', '_type')

    def __init__(
        self,
        shape_type: ShapeType,
        x: int,
        y: int,
        color: Optional[Union[Color, ColorValue]] = None
    ):
        """
        Initialize a shape.

        Args:
            shape_type: Type of shape
            x: X-coordinate
            y: Y-coordinate
            color: Color (Color object, string, or tuple); black if None

        Raises:
            ShapeError: If a coordinate is not an integer
        """
        self._x = _require_int("x", x)
        self._y = _require_int("y", y)
        self._color = parse_color(color)
        self._selected = False
        self._type = shape_type

    @property
    def type(self) -> ShapeType:
        return self._type

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, value: Union[Color, ColorValue]) -> None:
        self._color = parse_color(value)

    @property
    def selected(self) -> bool:
        return self._selected

    @property
    def width(self) -> int:
        return self.bounding_box().width

    @property
    def height(self) -> int:
        return self.bounding_box().height

    def bounding_box(self) -> BoundingBox:
        """
        Get the bounding box of the shape.

        Returns:
            Bounding box (x, y, width, height)
        """
        raise NotImplementedError("Subclasses must implement bounding_box")

    def contains_point(self, px: int, py: int) -> bool:
        """
        Check if the shape's visible area contains a point.

        Unlike `is_inside_bounds`, empty space inside the bounding box
        does not count.
        """
        raise NotImplementedError("Subclasses must implement contains_point")

    def is_inside_bounds(self, px: int, py: int) -> bool:
        """Check a point against the bounding box only."""
        return self.bounding_box().contains(px, py)

    def move(self, dx: int, dy: int) -> None:
        """Translate the shape by (dx, dy)."""
        self._x += dx
        self._y += dy

    def select(self) -> None:
        """Mark this shape as selected."""
        self._selected = True

    def unselect(self) -> None:
        """Clear the selection flag."""
        self._selected = False

    def paint(self, surface) -> None:
        """
        Emit draw primitives for this shape.

        The shape's own primitive comes first; a selected shape then adds
        its selection outline on top.

        Args:
            surface: Rendering surface receiving primitives
        """
        self._paint_shape(surface)
        if self._selected:
            self._paint_selection(surface)

    def _paint_shape(self, surface) -> None:
        raise NotImplementedError("Subclasses must implement _paint_shape")

    def _paint_selection(self, surface) -> None:
        box = self.bounding_box().expanded(CONFIG["selection_padding"])
        surface.draw(OutlineRect(
            box.x, box.y, box.width, box.height,
            style=SelectionStyle.from_config()
        ))

    def walk(self) -> Iterator['Shape']:
        """Iterate over this shape and its descendants, pre-order."""
        yield self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(x={self._x}, y={self._y}, color={self._color})"


class Dot(Shape):
    """
    Zero-size point.

    A dot has no area, so it is never hit by a point query.
    """

    __slots__ = ()

    def __init__(self, x: int, y: int, color: Optional[Union[Color, ColorValue]] = None):
        super().__init__(ShapeType.DOT, x, y, color)

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(self._x, self._y, 0, 0)

    def contains_point(self, px: int, py: int) -> bool:
        return False

    def _paint_shape(self, surface) -> None:
        surface.draw(Point(self._x, self._y, self._color))


class Circle(Shape):
    """
    Filled circle centred on (x, y).
    """

    __slots__ = ('_radius',)

    def __init__(
        self,
        x: int,
        y: int,
        radius: int,
        color: Optional[Union[Color, ColorValue]] = None
    ):
        """
        Initialize a circle.

        Args:
            x: X-coordinate of center
            y: Y-coordinate of center
            radius: Radius of circle
            color: Fill color
        """
        super().__init__(ShapeType.CIRCLE, x, y, color)
        self._radius = _require_int("radius", radius)

    @property
    def radius(self) -> int:
        return self._radius

    def bounding_box(self) -> BoundingBox:
        r = self._radius
        return BoundingBox(self._x - r, self._y - r, 2 * r, 2 * r)

    def contains_point(self, px: int, py: int) -> bool:
        """
        Check if the circle contains a point.

        Returns:
            True if the point is no farther from the center than the radius
        """
        if self._radius < 0:
            return False
        dx = px - self._x
        dy = py - self._y
        return dx * dx + dy * dy <= self._radius * self._radius

    def _paint_shape(self, surface) -> None:
        surface.draw(FilledCircle(self._x, self._y, self._radius, self._color))

    def __repr__(self) -> str:
        return f"Circle(x={self._x}, y={self._y}, radius={self._radius}, color={self._color})"


class Rectangle(Shape):
    """
    Filled rectangle with its top-left corner at (x, y).
    """

    __slots__ = ('_width', '_height')

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color: Optional[Union[Color, ColorValue]] = None
    ):
        super().__init__(ShapeType.RECTANGLE, x, y, color)
        self._width = _require_int("width", width)
        self._height = _require_int("height", height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def bounding_box(self) -> BoundingBox:
        return BoundingBox(self._x, self._y, self._width, self._height)

    def contains_point(self, px: int, py: int) -> bool:
        return (
            self._x <= px <= self._x + self._width and
            self._y <= py <= self._y + self._height
        )

    def _paint_shape(self, surface) -> None:
        surface.draw(FilledRect(self._x, self._y, self._width, self._height, self._color))

    def __repr__(self) -> str:
        return (
            f"Rectangle(x={self._x}, y={self._y}, width={self._width}, "
            f"height={self._height}, color={self._color})"
        )


class CompoundShape(Shape):
    """
    Ordered group of shapes.

    A compound owns its children and has no position of its own: its
    bounding box, hit test and movement are all derived from them. Child
    order is both hit-test priority (first match wins) and paint order
    (later children paint over earlier ones).

    A shape must belong to at most one compound; moving a shape between
    groups requires removing it from the old one first. This is not
    checked.
    """

    __slots__ = ('_children',)

    def __init__(self, *shapes: Shape, color: Optional[Union[Color, ColorValue]] = None):
        """
        Initialize a compound shape.

        Args:
            *shapes: Initial children, in order
            color: Nominal group color (black if None)
        """
        super().__init__(ShapeType.COMPOUND, 0, 0, color)
        self._children: List[Shape] = []
        self.add(*shapes)

    @property
    def children(self) -> List[Shape]:
        """Get list of children in the group."""
        return list(self._children)

    @property
    def is_empty(self) -> bool:
        return not self._children

    @property
    def x(self) -> int:
        return self.bounding_box().x

    @property
    def y(self) -> int:
        return self.bounding_box().y

    def add(self, *shapes: Shape) -> None:
        """
        Append shapes in call order.

        Raises:
            ShapeError: If an argument is not a Shape
        """
        for shape in shapes:
            if not isinstance(shape, Shape):
                raise ShapeError(f"Can only add shapes, got {shape!r}")
        self._children.extend(shapes)

    def remove(self, *shapes: Shape) -> None:
        """Remove shapes by identity; shapes not present are ignored."""
        if not shapes or not self._children:
            return
        targets = {id(shape) for shape in shapes}
        self._children = [child for child in self._children if id(child) not in targets]

    def clear(self) -> None:
        """Remove all children."""
        self._children.clear()

    def bounding_box(self) -> BoundingBox:
        """
        Get the bounding box of the group.

        Returns:
            Minimal box enclosing every child's box, or (0, 0, 0, 0) if empty
        """
        if not self._children:
            return EMPTY_BOX

        boxes = [child.bounding_box() for child in self._children]

        x_min = min(box.x for box in boxes)
        y_min = min(box.y for box in boxes)
        x_max = max(box.right for box in boxes)
        y_max = max(box.bottom for box in boxes)

        return BoundingBox(x_min, y_min, x_max - x_min, y_max - y_min)

    def move(self, dx: int, dy: int) -> None:
        for child in self._children:
            child.move(dx, dy)

    def contains_point(self, px: int, py: int) -> bool:
        """
        Check if any child contains a point.

        Empty space inside the group's bounding box does not count.
        """
        return any(child.contains_point(px, py) for child in self._children)

    def unselect(self) -> None:
        """Clear the selection flag on this group and every descendant."""
        super().unselect()
        for child in self._children:
            child.unselect()

    def select_child_at(self, px: int, py: int) -> bool:
        """
        Select the deepest shape under a point.

        Children are tried in order and the first one containing the
        point ends the search. A compound child gets the chance to select
        one of its own children first; only if none claims the point is
        the compound child itself selected.

        Returns:
            True if some descendant was selected
        """
        for child in self._children:
            if not child.contains_point(px, py):
                continue
            if isinstance(child, CompoundShape) and child.select_child_at(px, py):
                return True
            child.select()
            logger.debug(f"Selected {child!r} at ({px}, {py})")
            return True
        return False

    def paint(self, surface) -> None:
        """
        Emit draw primitives for the group.

        A selected group draws its outline first so that children, and
        any selected descendant's own outline, paint over it.
        """
        if self._selected:
            self._paint_selection(surface)
        for child in self._children:
            child.paint(surface)

    def walk(self) -> Iterator[Shape]:
        yield self
        for child in self._children:
            yield from child.walk()

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._children))

    def __getitem__(self, index: int) -> Shape:
        return self._children[index]

    def __bool__(self) -> bool:
        # A shape is always truthy, even when it has no children
        return True

    def __repr__(self) -> str:
        return f"CompoundShape(children={len(self._children)}, box={tuple(self.bounding_box())})"
