"""
Color model for shapes and selection outlines.
Provides an immutable RGBA value parsed from hex strings, names,
rgb()/rgba() strings or tuples.
"""

import re
from typing import Dict, Tuple, Union, Optional

# Type definitions
RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, float]
ColorValue = Union[str, RGB, RGBA]

OPAQUE = 1.0
ALPHA_DIGITS = 4

# Named colors understood by the editor
_NAMED_COLORS: Dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "red": (255, 0, 0),
    "green": (0, 255, 0),
    "blue": (0, 0, 255),
    "yellow": (255, 255, 0),
    "cyan": (0, 255, 255),
    "magenta": (255, 0, 255),
    "orange": (255, 200, 0),
    "pink": (255, 175, 175),
    "gray": (128, 128, 128),
    "lightgray": (192, 192, 192),
    "darkgray": (64, 64, 64),
}

_HEX_PATTERN = re.compile(r'^#([0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$')
_FUNC_PATTERN = re.compile(r'^(rgba?)\(([^)]*)\)$')


class ColorError(Exception):
    """Custom exception for color-related errors."""
    pass


def _normalise_name(name: str) -> str:
    return name.strip().lower().replace("_", "").replace(" ", "")


def _clamp_channel(value: float) -> int:
    return min(255, max(0, int(round(value))))


class Color:
    """
    Immutable RGBA color.

    Colors compare and hash by value, so two shapes painted "red" share
    an equal color regardless of how it was spelled.
    """

    __slots__ = ('_rgba',)

    # Named colors built so far
    _named: Dict[str, 'Color'] = {}

    def __init__(self, value: ColorValue):
        """
        Initialize a color.

        Args:
            value: Hex string, color name, rgb()/rgba() string, or RGB(A) tuple

        Raises:
            ColorError: If the value can't be parsed
        """
        if isinstance(value, str):
            r, g, b, a = _parse_string(value)
        elif isinstance(value, tuple) and len(value) in (3, 4):
            if not all(isinstance(c, (int, float)) and not isinstance(c, bool) for c in value):
                raise ColorError(f"Color components must be numbers, got {value!r}")
            r, g, b = value[:3]
            a = value[3] if len(value) == 4 else OPAQUE
        else:
            raise ColorError(f"Unsupported color format: {value!r}")

        alpha = round(min(1.0, max(0.0, float(a))), ALPHA_DIGITS)
        self._rgba = (_clamp_channel(r), _clamp_channel(g), _clamp_channel(b), alpha)

    @classmethod
    def from_name(cls, name: str) -> 'Color':
        """
        Look up a named color; repeated lookups return the same instance.

        Raises:
            ColorError: If the name is not known
        """
        key = _normalise_name(name)
        if key not in cls._named:
            if key not in _NAMED_COLORS:
                raise ColorError(f"Unknown color name: {name}")
            cls._named[key] = cls(_NAMED_COLORS[key])
        return cls._named[key]

    @property
    def rgb(self) -> RGB:
        return self._rgba[:3]

    @property
    def alpha(self) -> float:
        return self._rgba[3]

    @property
    def hex(self) -> str:
        """Hex form (#rrggbb), alpha left out."""
        return "#{:02x}{:02x}{:02x}".format(*self.rgb)

    def to_svg_string(self) -> str:
        """Color as an SVG paint value: hex when opaque, rgba() otherwise."""
        if self.alpha < 0.999:
            r, g, b = self.rgb
            return f"rgba({r}, {g}, {b}, {self.alpha:.4f})"
        return self.hex

    def to_mpl_rgba(self) -> Tuple[float, float, float, float]:
        """Color as a matplotlib (0-1) RGBA tuple."""
        r, g, b = self.rgb
        return (r / 255, g / 255, b / 255, self.alpha)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Color) and self._rgba == other._rgba

    def __hash__(self) -> int:
        return hash(self._rgba)

    def __str__(self) -> str:
        return self.to_svg_string()

    def __repr__(self) -> str:
        return f"Color({self.to_svg_string()!r})"


def _parse_string(value: str) -> RGBA:
    text = value.strip().lower()

    name = _normalise_name(text)
    if name in _NAMED_COLORS:
        return _NAMED_COLORS[name] + (OPAQUE,)

    match = _HEX_PATTERN.match(text)
    if match:
        digits = match.group(1)
        if len(digits) <= 4:
            digits = "".join(c * 2 for c in digits)
        channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        alpha = channels[3] / 255 if len(channels) == 4 else OPAQUE
        return channels[0], channels[1], channels[2], alpha

    match = _FUNC_PATTERN.match(text)
    if match:
        func, args = match.groups()
        parts = [part.strip() for part in args.split(",")]
        if len(parts) != len(func):
            raise ColorError(f"{func}() takes {len(func)} values: {value}")
        try:
            r, g, b = (int(part) for part in parts[:3])
            alpha = float(parts[3]) if func == "rgba" else OPAQUE
        except ValueError:
            raise ColorError(f"Invalid {func}() values: {value}")
        return r, g, b, alpha

    raise ColorError(f"Unsupported color format: {value}")


BLACK = Color.from_name("black")


def parse_color(value: Optional[Union[Color, ColorValue]], default: Optional[Color] = None) -> Color:
    """
    Parse a color value into a Color object.

    Args:
        value: Color instance, string or tuple; None selects the default
        default: Color returned for None (black when omitted)

    Returns:
        Color object

    Raises:
        ColorError: If the value can't be parsed
    """
    if value is None:
        return default if default is not None else BLACK
    if isinstance(value, Color):
        return value
    return Color(value)
