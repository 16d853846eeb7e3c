"""
Tests for the rendering surfaces.
"""

import os
import shutil
import tempfile
import unittest

import matplotlib
matplotlib.use("Agg")

from shape_editor.models.color import Color
from shape_editor.rendering.mpl_surface import MatplotlibSurface
from shape_editor.rendering.primitives import (
    FilledCircle, FilledRect, OutlineRect, Point, RenderError, SelectionStyle
)
from shape_editor.rendering.surface import RecordingSurface, Surface
from shape_editor.rendering.svg_surface import SvgSurface, render_png

try:
    import cairosvg  # noqa: F401
    HAS_CAIRO = True
except (ImportError, OSError):
    HAS_CAIRO = False


RED = Color("red")
PRIMITIVES = [
    FilledCircle(10, 10, 10, RED),
    FilledRect(20, 20, 30, 40, RED),
    Point(5, 5, RED),
    OutlineRect(19, 19, 32, 42),
]


class TestRecordingSurface(unittest.TestCase):
    """Tests for the recording surface."""

    def test_records_in_order(self):
        """Primitives are kept in draw order."""
        surface = RecordingSurface()
        for primitive in PRIMITIVES:
            surface.draw(primitive)
        self.assertEqual(surface.primitives, PRIMITIVES)
        self.assertEqual(len(surface), 4)

    def test_clear(self):
        """clear drops every recorded primitive."""
        surface = RecordingSurface()
        surface.draw(PRIMITIVES[0])
        surface.clear()
        self.assertEqual(len(surface), 0)

    def test_unsupported_primitive(self):
        """Unknown primitives raise RenderError."""
        with self.assertRaises(RenderError):
            RecordingSurface().draw("circle")
        self.assertEqual(len(RecordingSurface()), 0)

    def test_base_surface_is_abstract(self):
        """The base surface has no drawing implementation."""
        with self.assertRaises(NotImplementedError):
            Surface().draw(PRIMITIVES[0])

    def test_outline_style_defaults_from_config(self):
        """Outlines pick up the configured selection style."""
        outline = OutlineRect(0, 0, 1, 1)
        self.assertEqual(outline.style, SelectionStyle(Color("lightgray"), (2, 2)))


class TestSvgSurface(unittest.TestCase):
    """Tests for the SVG surface."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def _elements(self, *primitives, **kwargs):
        surface = SvgSurface(100, 80, **kwargs)
        for primitive in primitives:
            surface.draw(primitive)
        return list(surface.to_svg_element())

    def test_document_attributes(self):
        """The root carries size, viewBox and namespace."""
        surface = SvgSurface(100, 80)
        root = surface.to_svg_element()
        self.assertEqual(root.get("width"), "100")
        self.assertEqual(root.get("viewBox"), "0 0 100 80")
        self.assertEqual(root.get("xmlns"), "http://www.w3.org/2000/svg")
        self.assertTrue(surface.to_svg_string().startswith("<?xml"))
        self.assertEqual(surface.size, (100, 80))

    def test_background(self):
        """A background adds a full-size rectangle first."""
        elements = self._elements(PRIMITIVES[0], background="white")
        self.assertEqual(elements[0].get("fill"), "#ffffff")
        self.assertEqual(elements[0].get("width"), "100")
        self.assertEqual(elements[1].tag, "circle")

    def test_circle(self):
        """Circles map to circle elements."""
        circle, = self._elements(FilledCircle(10, 20, 5, RED))
        self.assertEqual((circle.get("cx"), circle.get("cy"), circle.get("r")), ("10", "20", "5"))
        self.assertEqual(circle.get("fill"), "#ff0000")

    def test_point_is_small_square(self):
        """Points are drawn as a dot-sized square around the coordinate."""
        dot, = self._elements(Point(5, 5, RED), dot_size=3)
        self.assertEqual((dot.get("x"), dot.get("y")), ("4", "4"))
        self.assertEqual((dot.get("width"), dot.get("height")), ("3", "3"))

    def test_outline(self):
        """Outlines are unfilled dashed rectangles."""
        outline, = self._elements(OutlineRect(-1, -1, 22, 22))
        self.assertEqual(outline.get("fill"), "none")
        self.assertEqual(outline.get("stroke"), "#c0c0c0")
        self.assertEqual(outline.get("stroke-dasharray"), "2,2")
        self.assertEqual(outline.get("x"), "-1")

    def test_negative_rect_is_normalised(self):
        """Negative extents cover the same area with positive sizes."""
        rect, = self._elements(FilledRect(10, 10, -4, -6, RED))
        self.assertEqual(
            (rect.get("x"), rect.get("y"), rect.get("width"), rect.get("height")),
            ("6", "4", "4", "6")
        )

    def test_save(self):
        """save writes the document, creating directories."""
        path = os.path.join(self.temp_dir, "nested", "scene.svg")
        surface = SvgSurface(10, 10)
        surface.draw(PRIMITIVES[0])
        self.assertEqual(surface.save(path), path)
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
        self.assertIn("<circle", content)


class TestMatplotlibSurface(unittest.TestCase):
    """Tests for the matplotlib surface."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.surface = MatplotlibSurface(100, 80, background="lightgray")

    def tearDown(self):
        self.surface.close()
        shutil.rmtree(self.temp_dir)

    def test_one_patch_per_primitive(self):
        """Each primitive becomes one patch."""
        for primitive in PRIMITIVES:
            self.surface.draw(primitive)
        self.assertEqual(self.surface.patch_count, len(PRIMITIVES))

    def test_y_axis_points_down(self):
        """Screen coordinates: y grows downwards."""
        bottom, top = self.surface.axes.get_ylim()
        self.assertEqual((bottom, top), (80, 0))

    def test_save(self):
        """Figures can be saved as PNG."""
        self.surface.draw(PRIMITIVES[1])
        path = self.surface.save(os.path.join(self.temp_dir, "scene.png"))
        self.assertTrue(os.path.exists(path))


@unittest.skipUnless(HAS_CAIRO, "cairosvg or the cairo library is not available")
class TestRenderPng(unittest.TestCase):
    """Tests for SVG rasterisation."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def test_render_and_save(self):
        """The image takes the SVG size and is written to disk."""
        surface = SvgSurface(40, 30, background="white")
        surface.draw(FilledCircle(20, 15, 10, RED))
        path = os.path.join(self.temp_dir, "scene.png")
        image = render_png(surface.to_svg_string(), output_path=path)
        self.assertEqual(image.size, (40, 30))
        self.assertTrue(os.path.exists(path))

    def test_explicit_size(self):
        """An explicit size overrides the SVG size."""
        surface = SvgSurface(40, 30)
        image = render_png(surface.to_svg_string(), size=(80, 60))
        self.assertEqual(image.size, (80, 60))

    def test_invalid_svg(self):
        """Unparseable SVG raises RenderError."""
        with self.assertRaises(RenderError):
            render_png("<svg")


if __name__ == "__main__":
    unittest.main()
