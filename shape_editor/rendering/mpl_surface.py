"""
Matplotlib rendering surface for previews and figures.
"""

from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt
from matplotlib.patches import Circle, Rectangle

from shape_editor.core import CONFIG
from shape_editor.models.color import Color, parse_color
from shape_editor.rendering.primitives import FilledCircle, FilledRect, Point, OutlineRect
from shape_editor.rendering.surface import Surface
from shape_editor.utils.logger import get_logger

logger = get_logger(__name__)


class MatplotlibSurface(Surface):
    """
    Surface that draws primitives as matplotlib patches.

    The y axis is inverted so coordinates match screen space (origin at
    the top-left, y growing downwards).
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Optional[Union[Color, str]] = None,
        dpi: int = 100
    ):
        self._width = max(1, width)
        self._height = max(1, height)
        self.figure = plt.figure(figsize=(self._width / dpi, self._height / dpi), dpi=dpi)
        self.axes = self.figure.add_axes((0, 0, 1, 1))
        self.axes.set_xlim(0, self._width)
        self.axes.set_ylim(self._height, 0)
        self.axes.set_aspect('equal')
        self.axes.axis('off')
        if background is not None:
            self.axes.set_facecolor(parse_color(background).to_mpl_rgba())
            self.axes.set_axis_on()
            self.axes.set_xticks([])
            self.axes.set_yticks([])

        # Keeps later primitives above earlier ones
        self._z = 0

    def _next_z(self) -> int:
        self._z += 1
        return self._z

    def draw_filled_circle(self, primitive: FilledCircle) -> None:
        self.axes.add_patch(Circle(
            (primitive.x, primitive.y), abs(primitive.radius),
            facecolor=primitive.color.to_mpl_rgba(), edgecolor='none',
            zorder=self._next_z()
        ))

    def draw_filled_rect(self, primitive: FilledRect) -> None:
        self.axes.add_patch(Rectangle(
            (primitive.x, primitive.y), primitive.width, primitive.height,
            facecolor=primitive.color.to_mpl_rgba(), edgecolor='none',
            zorder=self._next_z()
        ))

    def draw_point(self, primitive: Point) -> None:
        size = CONFIG["dot_size"]
        half = size // 2
        self.axes.add_patch(Rectangle(
            (primitive.x - half, primitive.y - half), size, size,
            facecolor=primitive.color.to_mpl_rgba(), edgecolor='none',
            zorder=self._next_z()
        ))

    def draw_outline_rect(self, primitive: OutlineRect) -> None:
        dash = primitive.style.dash
        linestyle = (0, tuple(dash)) if dash else 'solid'
        self.axes.add_patch(Rectangle(
            (primitive.x, primitive.y), primitive.width, primitive.height,
            fill=False, edgecolor=primitive.style.color.to_mpl_rgba(),
            linewidth=1, linestyle=linestyle, zorder=self._next_z()
        ))

    @property
    def patch_count(self) -> int:
        return len(self.axes.patches)

    def save(self, path: Union[str, Path]) -> str:
        """Save the figure and return the path."""
        path = Path(path)
        path.parent.mkdir(exist_ok=True, parents=True)
        self.figure.savefig(path, dpi=self.figure.dpi)
        logger.info(f"Figure saved to {path}")
        return str(path)

    def close(self) -> None:
        plt.close(self.figure)
