"""
SVG rendering surface and PNG rasterisation.
"""

import io
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from shape_editor.core import CONFIG, Profiler
from shape_editor.models.color import Color, parse_color
from shape_editor.rendering.primitives import (
    FilledCircle, FilledRect, Point, OutlineRect, RenderError
)
from shape_editor.rendering.surface import Surface
from shape_editor.utils.logger import get_logger

logger = get_logger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n'


class SvgSurface(Surface):
    """
    Surface that accumulates primitives into an SVG document.

    Elements are appended in draw order, so later primitives paint over
    earlier ones exactly as on a raster canvas.
    """

    def __init__(
        self,
        width: int,
        height: int,
        background: Optional[Union[Color, str]] = None,
        dot_size: Optional[int] = None
    ):
        """
        Initialize an SVG surface.

        Args:
            width: Document width
            height: Document height
            background: Background color or None for transparent
            dot_size: Side of the square drawn for a point marker
        """
        self._width = max(0, width)
        self._height = max(0, height)
        self._background = parse_color(background) if background is not None else None
        self._dot_size = dot_size if dot_size is not None else CONFIG["dot_size"]

        self._root = ET.Element('svg')
        self._root.set('xmlns', SVG_NAMESPACE)
        self._root.set('width', str(self._width))
        self._root.set('height', str(self._height))
        self._root.set('viewBox', f"0 0 {self._width} {self._height}")

        if self._background is not None:
            bg = ET.SubElement(self._root, 'rect')
            bg.set('width', str(self._width))
            bg.set('height', str(self._height))
            bg.set('fill', self._background.to_svg_string())

    @property
    def size(self) -> Tuple[int, int]:
        return self._width, self._height

    def draw_filled_circle(self, primitive: FilledCircle) -> None:
        element = ET.SubElement(self._root, 'circle')
        element.set('cx', str(primitive.x))
        element.set('cy', str(primitive.y))
        element.set('r', str(abs(primitive.radius)))
        element.set('fill', primitive.color.to_svg_string())

    def draw_filled_rect(self, primitive: FilledRect) -> None:
        # SVG rejects negative extents; normalise to the covered area
        x = min(primitive.x, primitive.x + primitive.width)
        y = min(primitive.y, primitive.y + primitive.height)
        element = ET.SubElement(self._root, 'rect')
        element.set('x', str(x))
        element.set('y', str(y))
        element.set('width', str(abs(primitive.width)))
        element.set('height', str(abs(primitive.height)))
        element.set('fill', primitive.color.to_svg_string())

    def draw_point(self, primitive: Point) -> None:
        half = self._dot_size // 2
        element = ET.SubElement(self._root, 'rect')
        element.set('x', str(primitive.x - half))
        element.set('y', str(primitive.y - half))
        element.set('width', str(self._dot_size))
        element.set('height', str(self._dot_size))
        element.set('fill', primitive.color.to_svg_string())

    def draw_outline_rect(self, primitive: OutlineRect) -> None:
        element = ET.SubElement(self._root, 'rect')
        element.set('x', str(min(primitive.x, primitive.x + primitive.width)))
        element.set('y', str(min(primitive.y, primitive.y + primitive.height)))
        element.set('width', str(abs(primitive.width)))
        element.set('height', str(abs(primitive.height)))
        element.set('fill', 'none')
        element.set('stroke', primitive.style.color.to_svg_string())
        element.set('stroke-width', '1')
        if primitive.style.dash:
            element.set('stroke-dasharray', ",".join(str(d) for d in primitive.style.dash))

    def to_svg_element(self) -> ET.Element:
        """Get the SVG root element."""
        return self._root

    def to_svg_string(self) -> str:
        """
        Convert the document to an SVG string.

        Returns:
            SVG string with XML declaration
        """
        return XML_DECLARATION + ET.tostring(self._root, encoding='unicode')

    def save(self, path: Union[str, Path]) -> str:
        """
        Write the document to a file.

        Args:
            path: Output file path

        Returns:
            Path to the saved SVG file
        """
        path = str(path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_svg_string())

        logger.info(f"SVG saved to {path}")
        return path


def render_png(
    svg_code: str,
    output_path: Optional[Union[str, Path]] = None,
    size: Optional[Tuple[int, int]] = None
) -> Image.Image:
    """
    Convert SVG code to a PIL Image.

    Args:
        svg_code: SVG code as a string
        output_path: Optional path to save the rendered image
        size: Optional (width, height); defaults to CONFIG["png_size"] or the SVG size

    Returns:
        PIL Image of the rendered SVG

    Raises:
        RenderError: If rasterisation fails
    """
    # cairosvg loads the native cairo library on import
    import cairosvg

    size = size or CONFIG["png_size"]
    kwargs = {}
    if size:
        kwargs["output_width"], kwargs["output_height"] = size

    try:
        with Profiler("render_png"):
            png_data = cairosvg.svg2png(bytestring=svg_code.encode('utf-8'), **kwargs)
        image = Image.open(io.BytesIO(png_data))
        image.load()
    except Exception as e:
        logger.error(f"Error rendering SVG to PNG: {e}")
        raise RenderError(f"Failed to rasterise SVG: {e}") from e

    if output_path:
        output_path = Path(output_path)
        output_path.parent.mkdir(exist_ok=True, parents=True)
        image.save(output_path)
        logger.info(f"PNG saved to {output_path}")

    return image
