"""
Draw primitives emitted by a paint traversal.
Surfaces receive these in paint order; they carry no geometry logic.
"""

from dataclasses import dataclass, field
from typing import Tuple, Union

from shape_editor.core import CONFIG
from shape_editor.models.color import Color, parse_color


class RenderError(Exception):
    """Custom exception for rendering-related errors."""
    pass


@dataclass(frozen=True)
class SelectionStyle:
    """Stroke style for selection outlines."""
    color: Color
    dash: Tuple[int, ...] = (2, 2)

    @classmethod
    def from_config(cls) -> 'SelectionStyle':
        """Build the style from the current configuration."""
        return cls(
            color=parse_color(CONFIG["selection_color"]),
            dash=tuple(CONFIG["selection_dash"] or ()),
        )


@dataclass(frozen=True)
class FilledCircle:
    """Filled circle centred on (x, y)."""
    x: int
    y: int
    radius: int
    color: Color


@dataclass(frozen=True)
class FilledRect:
    """Filled rectangle with top-left corner at (x, y)."""
    x: int
    y: int
    width: int
    height: int
    color: Color


@dataclass(frozen=True)
class Point:
    """Single point marker."""
    x: int
    y: int
    color: Color


@dataclass(frozen=True)
class OutlineRect:
    """Unfilled rectangle drawn in a selection style."""
    x: int
    y: int
    width: int
    height: int
    style: SelectionStyle = field(default_factory=SelectionStyle.from_config, compare=False)


Primitive = Union[FilledCircle, FilledRect, Point, OutlineRect]
