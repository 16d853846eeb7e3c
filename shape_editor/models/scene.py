"""
Scene root for the shape editor.
Owns the top-level compound shape, applies the pointer selection policy
and drives paint passes onto rendering surfaces.
"""

from enum import Enum, auto
from typing import Callable, Dict, List, Optional, Tuple, Union

from shape_editor.core import CONFIG, Profiler
from shape_editor.models.color import Color, ColorValue
from shape_editor.models.shape import CompoundShape, Shape
from shape_editor.rendering.svg_surface import SvgSurface
from shape_editor.utils.logger import get_logger

# Configure logger
logger = get_logger(__name__)

_DEFAULT = object()


class SceneEvent(Enum):
    """Events that can occur within a scene."""
    SHAPES_LOADED = auto()
    SCENE_CLEARED = auto()
    SELECTION_CHANGED = auto()


class SceneError(Exception):
    """Custom exception for scene-related errors."""
    pass


EventHandler = Callable[..., None]


class ImageEditor:
    """
    Scene root holding every loaded shape.

    All shapes live in a single root `CompoundShape`. Pointer events go
    through `pointer_down`, which clears the previous selection and then
    selects the deepest shape under the pointer, falling back to the
    root itself when the pointer only hits empty space inside the
    overall bounding box.
    """

    def __init__(self, *shapes: Shape):
        """
        Initialize the scene.

        Args:
            *shapes: Optional initial top-level shapes
        """
        self._root = CompoundShape()
        self._event_handlers: Dict[SceneEvent, List[EventHandler]] = {
            event: [] for event in SceneEvent
        }
        if shapes:
            self.load(*shapes)

    @property
    def shapes(self) -> CompoundShape:
        """Get the root compound shape."""
        return self._root

    def load(self, *shapes: Shape) -> 'ImageEditor':
        """
        Replace the scene content with the given shapes.

        Returns:
            Self for method chaining
        """
        self._root.clear()
        self._root.unselect()
        self._root.add(*shapes)
        logger.info(f"Loaded {len(shapes)} top-level shapes, bounds={tuple(self._root.bounding_box())}")
        self._trigger_event(SceneEvent.SHAPES_LOADED, list(shapes))
        return self

    def clear(self) -> 'ImageEditor':
        """
        Remove all shapes from the scene.

        Returns:
            Self for method chaining
        """
        self._root.clear()
        self._root.unselect()
        logger.info("Scene cleared")
        self._trigger_event(SceneEvent.SCENE_CLEARED)
        return self

    def pointer_down(self, px: int, py: int) -> Optional[Shape]:
        """
        Apply the selection policy for a pointer-down event.

        Args:
            px: Pointer x-coordinate
            py: Pointer y-coordinate

        Returns:
            The shape that ended up selected (a descendant or the root),
            or None if the pointer missed everything
        """
        previous = self.selected_shapes()

        self._root.unselect()
        if self._root.select_child_at(px, py):
            selected = self.selected_shapes()[0]
        elif self._root.is_inside_bounds(px, py):
            self._root.select()
            selected = self._root
        else:
            selected = None

        if selected is None:
            logger.debug(f"Pointer at ({px}, {py}) hit nothing")
        elif selected is self._root:
            logger.debug(f"Pointer at ({px}, {py}) hit empty space inside scene bounds")
        else:
            logger.debug(f"Pointer at ({px}, {py}) selected {selected!r}")

        current = [selected] if selected is not None else []
        if [id(s) for s in previous] != [id(s) for s in current]:
            self._trigger_event(SceneEvent.SELECTION_CHANGED, selected)

        return selected

    def selected_shapes(self) -> List[Shape]:
        """Get all selected shapes, in pre-order."""
        return [shape for shape in self._root.walk() if shape.selected]

    def preferred_size(self, padding: Optional[int] = None) -> Tuple[int, int]:
        """
        Get the canvas size needed to show every shape.

        Args:
            padding: Margin added right of and below the content

        Returns:
            (width, height)
        """
        if padding is None:
            padding = CONFIG["canvas_padding"]
        box = self._root.bounding_box()
        return box.x + box.width + padding, box.y + box.height + padding

    def paint(self, surface) -> None:
        """Paint the whole scene onto a surface."""
        with Profiler("scene_paint"):
            self._root.paint(surface)

    def svg_surface(self, background: Optional[Union[Color, ColorValue]] = _DEFAULT) -> SvgSurface:
        """
        Paint the scene onto a new SVG surface sized to the content.

        Args:
            background: Background color; CONFIG["background"] when omitted,
                None for transparent

        Returns:
            The painted SvgSurface
        """
        if background is _DEFAULT:
            background = CONFIG["background"]
        width, height = self.preferred_size()
        surface = SvgSurface(width, height, background=background)
        self.paint(surface)
        return surface

    def render_svg(self, background: Optional[Union[Color, ColorValue]] = _DEFAULT) -> str:
        """Paint the scene and return the SVG string."""
        return self.svg_surface(background).to_svg_string()

    def add_event_handler(self, event: SceneEvent, handler: EventHandler) -> 'ImageEditor':
        """
        Add an event handler.

        Handlers are called as handler(scene, event, *args).

        Raises:
            SceneError: If event is not a SceneEvent
        """
        if not isinstance(event, SceneEvent):
            raise SceneError(f"Unknown scene event: {event!r}")
        self._event_handlers[event].append(handler)
        return self

    def remove_event_handler(self, event: SceneEvent, handler: EventHandler) -> 'ImageEditor':
        """Remove an event handler; unknown handlers are ignored."""
        if event in self._event_handlers:
            try:
                self._event_handlers[event].remove(handler)
            except ValueError:
                pass
        return self

    def _trigger_event(self, event: SceneEvent, *args) -> None:
        # Copy so handlers may unregister themselves
        handlers = self._event_handlers[event].copy()

        for handler in handlers:
            try:
                handler(self, event, *args)
            except Exception as e:
                logger.error(f"Error in event handler for {event}: {str(e)}")

    def __repr__(self) -> str:
        return f"ImageEditor(shapes={len(self._root)})"


# The scene root is the editor; keep the shorter name available
Scene = ImageEditor
