"""
Tests for CompoundShape.
"""

import unittest

from shape_editor.models.color import Color
from shape_editor.models.shape import (
    BoundingBox, Circle, CompoundShape, Dot, Rectangle, ShapeError, ShapeType
)
from shape_editor.rendering.primitives import FilledCircle, FilledRect, OutlineRect, Point
from shape_editor.rendering.surface import RecordingSurface


class TestChildren(unittest.TestCase):
    """Tests for adding and removing children."""

    def test_add_keeps_call_order(self):
        """Children are stored in insertion order."""
        a, b, c = Dot(0, 0), Dot(1, 1), Dot(2, 2)
        group = CompoundShape(a)
        group.add(b, c)
        self.assertEqual(group.children, [a, b, c])
        self.assertEqual(len(group), 3)
        self.assertIs(group[1], b)
        self.assertEqual(group.type, ShapeType.COMPOUND)

    def test_add_does_not_deduplicate(self):
        """Adding the same shape twice is not checked."""
        dot = Dot(0, 0)
        group = CompoundShape(dot, dot)
        self.assertEqual(len(group), 2)

    def test_add_rejects_non_shapes(self):
        """Only shapes can be children."""
        with self.assertRaises(ShapeError):
            CompoundShape().add("circle")

    def test_remove_by_identity(self):
        """Remove matches identity, not equal geometry."""
        a, twin = Rectangle(0, 0, 1, 1), Rectangle(0, 0, 1, 1)
        group = CompoundShape(a, twin)
        group.remove(a)
        self.assertEqual(group.children, [twin])

    def test_remove_absent_is_noop(self):
        """Removing a shape that was never added changes nothing."""
        a = Dot(0, 0)
        group = CompoundShape(a)
        group.remove(Dot(0, 0))
        group.remove()
        self.assertEqual(group.children, [a])

    def test_remove_several(self):
        """Several shapes can be removed in one call."""
        a, b, c = Dot(0, 0), Dot(1, 1), Dot(2, 2)
        group = CompoundShape(a, b, c)
        group.remove(a, c)
        self.assertEqual(group.children, [b])

    def test_clear_is_repeatable(self):
        """Clearing twice is harmless."""
        group = CompoundShape(Dot(0, 0))
        group.clear()
        group.clear()
        self.assertTrue(group.is_empty)
        self.assertTrue(group)

    def test_children_is_a_copy(self):
        """Mutating the returned list does not touch the group."""
        group = CompoundShape(Dot(0, 0))
        group.children.append(Dot(1, 1))
        self.assertEqual(len(group), 1)


class TestGeometry(unittest.TestCase):
    """Tests for derived bounding box, movement and hit testing."""

    def test_empty_box(self):
        """An empty group has a zero box at the origin."""
        group = CompoundShape()
        self.assertEqual(group.bounding_box(), BoundingBox(0, 0, 0, 0))
        self.assertEqual((group.x, group.y, group.width, group.height), (0, 0, 0, 0))

    def test_box_encloses_children(self):
        """The box is the minimal one around every child."""
        group = CompoundShape(
            Rectangle(250, 250, 100, 100),
            Dot(240, 240),
            Dot(360, 360)
        )
        self.assertEqual(group.bounding_box(), BoundingBox(240, 240, 120, 120))
        self.assertEqual((group.x, group.y), (240, 240))

    def test_nested_box(self):
        """Nested groups contribute their own derived boxes."""
        inner = CompoundShape(Circle(110, 110, 50), Dot(160, 160))
        outer = CompoundShape(Circle(10, 10, 10), inner)
        self.assertEqual(inner.bounding_box(), BoundingBox(60, 60, 100, 100))
        self.assertEqual(outer.bounding_box(), BoundingBox(0, 0, 160, 160))

    def test_box_is_recomputed(self):
        """The box follows children after they move or are added."""
        rect = Rectangle(0, 0, 10, 10)
        group = CompoundShape(rect)
        rect.move(5, 5)
        self.assertEqual(group.bounding_box(), BoundingBox(5, 5, 10, 10))
        group.add(Dot(-5, 0))
        self.assertEqual(group.bounding_box(), BoundingBox(-5, 0, 20, 15))

    def test_move_round_trip(self):
        """Moving a tree and moving it back restores every descendant."""
        dot = Dot(240, 240)
        rect = Rectangle(250, 250, 100, 100)
        circle = Circle(10, 10, 10)
        tree = CompoundShape(circle, CompoundShape(rect, dot))
        tree.move(7, -3)
        self.assertEqual((dot.x, dot.y), (247, 237))
        self.assertEqual((circle.x, circle.y), (17, 7))
        tree.move(-7, 3)
        self.assertEqual((dot.x, dot.y), (240, 240))
        self.assertEqual((rect.x, rect.y), (250, 250))
        self.assertEqual((circle.x, circle.y), (10, 10))

    def test_contains_point_uses_content_not_box(self):
        """Empty space inside the box is not a hit."""
        group = CompoundShape(Rectangle(0, 0, 10, 10), Rectangle(90, 90, 10, 10))
        self.assertTrue(group.contains_point(5, 5))
        self.assertTrue(group.contains_point(95, 95))
        self.assertFalse(group.contains_point(50, 50))
        self.assertTrue(group.is_inside_bounds(50, 50))

    def test_dots_alone_are_never_hit(self):
        """A group of dots has no hittable content."""
        group = CompoundShape(Dot(0, 0), Dot(10, 10))
        self.assertFalse(group.contains_point(0, 0))
        self.assertFalse(CompoundShape().contains_point(0, 0))


class TestSelection(unittest.TestCase):
    """Tests for select, unselect and select_child_at."""

    def test_select_marks_only_the_group(self):
        """Selecting a group leaves its children unselected."""
        child = Dot(0, 0)
        group = CompoundShape(child)
        group.select()
        self.assertTrue(group.selected)
        self.assertFalse(child.selected)

    def test_unselect_cascades(self):
        """Unselect clears the whole subtree."""
        leaf = Rectangle(0, 0, 1, 1)
        inner = CompoundShape(leaf, Dot(3, 3))
        outer = CompoundShape(inner, Circle(5, 5, 1))
        for shape in outer.walk():
            shape.select()
        outer.unselect()
        self.assertFalse(any(shape.selected for shape in outer.walk()))

    def test_walk_is_pre_order(self):
        """walk yields a group before its children."""
        a = Dot(0, 0)
        inner = CompoundShape(a)
        b = Dot(1, 1)
        outer = CompoundShape(inner, b)
        self.assertEqual(list(outer.walk()), [outer, inner, a, b])

    def test_first_match_wins(self):
        """Overlapping siblings: the earlier child is selected."""
        first = Rectangle(0, 0, 10, 10)
        second = Circle(5, 5, 5)
        group = CompoundShape(first, second)
        self.assertTrue(group.select_child_at(5, 5))
        self.assertTrue(first.selected)
        self.assertFalse(second.selected)
        self.assertFalse(group.selected)

    def test_deepest_match(self):
        """A nested group hands selection to its own child."""
        leaf = Rectangle(0, 0, 10, 10)
        nested = CompoundShape(leaf)
        outer = CompoundShape(nested)
        self.assertTrue(outer.select_child_at(5, 5))
        self.assertTrue(leaf.selected)
        self.assertFalse(nested.selected)
        self.assertFalse(outer.selected)

    def test_miss_selects_nothing(self):
        """No child under the point returns False."""
        group = CompoundShape(Rectangle(0, 0, 10, 10), Dot(20, 20))
        self.assertFalse(group.select_child_at(20, 20))
        self.assertFalse(any(shape.selected for shape in group.walk()))

    def test_later_sibling_searched_after_miss(self):
        """Children that miss are skipped in order."""
        miss = CompoundShape(Rectangle(100, 100, 5, 5))
        hit = Circle(0, 0, 3)
        group = CompoundShape(miss, hit)
        self.assertTrue(group.select_child_at(1, 1))
        self.assertTrue(hit.selected)


class TestPaint(unittest.TestCase):
    """Tests for group painting order."""

    def setUp(self):
        self.surface = RecordingSurface()

    def test_children_paint_in_order(self):
        """Children paint in insertion order."""
        group = CompoundShape(Rectangle(250, 250, 100, 100, "green"), Dot(240, 240, "green"))
        group.paint(self.surface)
        self.assertEqual(self.surface.primitives, [
            FilledRect(250, 250, 100, 100, Color("green")),
            Point(240, 240, Color("green")),
        ])

    def test_selected_group_outline_comes_first(self):
        """A selected group's outline is drawn before its children."""
        circle = Circle(110, 110, 50, "red")
        group = CompoundShape(circle, Dot(160, 160, "red"))
        group.select()
        group.paint(self.surface)
        primitives = self.surface.primitives
        self.assertEqual(primitives[0], OutlineRect(59, 59, 102, 102))
        self.assertEqual(primitives[1], FilledCircle(110, 110, 50, Color("red")))
        self.assertEqual(len(primitives), 3)

    def test_selected_child_outline_follows_child(self):
        """A selected child draws its outline right after itself."""
        first = Rectangle(0, 0, 10, 10)
        second = Rectangle(20, 0, 10, 10)
        group = CompoundShape(first, second)
        first.select()
        group.paint(self.surface)
        kinds = [type(p).__name__ for p in self.surface]
        self.assertEqual(kinds, ["FilledRect", "OutlineRect", "FilledRect"])

    def test_empty_selected_group(self):
        """An empty selected group outlines the zero box."""
        group = CompoundShape()
        group.select()
        group.paint(self.surface)
        self.assertEqual(self.surface.primitives, [OutlineRect(-1, -1, 2, 2)])


if __name__ == "__main__":
    unittest.main()
