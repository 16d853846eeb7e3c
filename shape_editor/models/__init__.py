"""
Shape Editor - Data Models
==========================
This package contains the color, shape and scene models.
"""

from shape_editor.models.color import (
    ColorError, Color, parse_color
)
from shape_editor.models.shape import (
    ShapeType, ShapeError, BoundingBox, Shape,
    Dot, Circle, Rectangle, CompoundShape
)
from shape_editor.models.scene import (
    SceneEvent, SceneError, ImageEditor, Scene
)

__all__ = [
    'ColorError', 'Color', 'parse_color',
    'ShapeType', 'ShapeError', 'BoundingBox', 'Shape',
    'Dot', 'Circle', 'Rectangle', 'CompoundShape',
    'SceneEvent', 'SceneError', 'ImageEditor', 'Scene'
]
