"""
Shape Editor Package
====================
Composable 2D shapes with bounding boxes, hit testing, hierarchical
selection and painting onto pluggable rendering surfaces.
"""

from shape_editor.core import CONFIG, configure, Profiler
# Models must load before rendering: shapes import the draw primitives
from shape_editor.models import (
    Color, ColorError, ShapeError, BoundingBox, Shape,
    Dot, Circle, Rectangle, CompoundShape,
    SceneEvent, SceneError, ImageEditor, Scene
)
from shape_editor.rendering import (
    RenderError, RecordingSurface, SvgSurface, MatplotlibSurface, render_png
)

__version__ = "0.1.0"

__all__ = [
    'CONFIG', 'configure', 'Profiler',
    'Color', 'ColorError', 'ShapeError', 'BoundingBox', 'Shape',
    'Dot', 'Circle', 'Rectangle', 'CompoundShape',
    'SceneEvent', 'SceneError', 'ImageEditor', 'Scene',
    'RenderError', 'RecordingSurface', 'SvgSurface', 'MatplotlibSurface',
    'render_png'
]
