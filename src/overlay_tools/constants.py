"""
Various constants for overlay_tools
"""

from enum import Enum


class Axis(Enum):
    """Placement axis."""

    X = "x"
    Y = "y"


class HorizontalPosition(Enum):
    """
    Keyword positions on the horizontal axis.

    Keywords are resolved against the canvas, never against the previously
    placed overlay.
    """

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalPosition(Enum):
    """Keyword positions on the vertical axis."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class Baseline(Enum):
    """
    Edge of the previously placed overlay that a relative offset is measured
    from.

    ``LEFT``/``TOP`` are the leading edges, ``RIGHT``/``BOTTOM`` the trailing
    edges and ``CENTER``/``MIDDLE`` the midpoints. Horizontal baselines are
    only valid for ``dx`` and vertical baselines only for ``dy``.
    """

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class BlendMode(Enum):
    """
    Blend modes.

    The set mirrors the compositing operators of the rendering backend
    (libvips ``VipsBlendMode``), so a validated value can be handed to the
    compositor verbatim.
    """

    CLEAR = "clear"
    SOURCE = "source"
    OVER = "over"
    IN = "in"
    OUT = "out"
    ATOP = "atop"
    DEST = "dest"
    DEST_OVER = "dest_over"
    DEST_IN = "dest_in"
    DEST_OUT = "dest_out"
    DEST_ATOP = "dest_atop"
    XOR = "xor"
    ADD = "add"
    SATURATE = "saturate"
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"
    DARKEN = "darken"
    LIGHTEN = "lighten"
    COLOUR_DODGE = "colour_dodge"
    COLOUR_BURN = "colour_burn"
    HARD_LIGHT = "hard_light"
    SOFT_LIGHT = "soft_light"
    DIFFERENCE = "difference"
    EXCLUSION = "exclusion"


class Shape(Enum):
    """Mask shapes."""

    CIRCLE = "circle"
    ROUNDED_RECTANGLE = "rounded_rectangle"


AXIS_KEYWORDS = {
    Axis.X: HorizontalPosition,
    Axis.Y: VerticalPosition,
}

AXIS_BASELINES = {
    Axis.X: (Baseline.LEFT, Baseline.CENTER, Baseline.RIGHT),
    Axis.Y: (Baseline.TOP, Baseline.MIDDLE, Baseline.BOTTOM),
}

DEFAULT_BLEND_MODE = BlendMode.OVER
DEFAULT_X_BASELINE = Baseline.RIGHT
DEFAULT_Y_BASELINE = Baseline.BOTTOM

# Single overlay composition places the image in the middle of the canvas.
DEFAULT_X = HorizontalPosition.CENTER
DEFAULT_Y = VerticalPosition.MIDDLE

DEFAULT_ROUNDED_RADIUS = 50
