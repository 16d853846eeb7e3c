"""
Shape Editor - Rendering
========================
Draw primitives and the surfaces that receive them.
"""

from shape_editor.rendering.primitives import (
    RenderError, SelectionStyle, FilledCircle, FilledRect, Point,
    OutlineRect, Primitive
)
from shape_editor.rendering.surface import Surface, RecordingSurface
from shape_editor.rendering.svg_surface import SvgSurface, render_png
from shape_editor.rendering.mpl_surface import MatplotlibSurface

__all__ = [
    'RenderError', 'SelectionStyle', 'FilledCircle', 'FilledRect', 'Point',
    'OutlineRect', 'Primitive',
    'Surface', 'RecordingSurface',
    'SvgSurface', 'render_png',
    'MatplotlibSurface'
]
