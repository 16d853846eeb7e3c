"""
Demo scene: a standalone circle and two groups of shapes.
"""

from typing import List

from shape_editor.models.shape import Circle, CompoundShape, Dot, Rectangle, Shape


def build_demo_shapes() -> List[Shape]:
    """Build the top-level shapes of the demo scene."""
    return [
        Circle(10, 10, 10, "blue"),

        CompoundShape(
            Circle(110, 110, 50, "red"),
            Dot(160, 160, "red")
        ),

        CompoundShape(
            Rectangle(250, 250, 100, 100, "green"),
            Dot(240, 240, "green"),
            Dot(240, 360, "green"),
            Dot(360, 360, "green"),
            Dot(360, 240, "green")
        ),
    ]
