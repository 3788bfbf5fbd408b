"""
Error types raised or returned by overlay_tools.

All errors derive from :py:class:`OverlayError`, itself a
:py:class:`ValueError`, and keep the offending value as an attribute so
callers can report or correct the input. The composition planner returns
these as values inside a :py:class:`~overlay_tools.composite.planner.Plan`;
the high level API raises them.
"""

from typing import Any, Optional


class OverlayError(ValueError):
    """Base class for overlay_tools errors."""

    #: Zero-based index of the overlay that failed, set by the planner.
    index: Optional[int] = None

    def __str__(self) -> str:
        message = super().__str__()
        if self.index is not None:
            return "overlay %d: %s" % (self.index, message)
        return message


class InvalidPosition(OverlayError):
    """Unrecognized keyword or baseline value for an axis."""

    def __init__(self, value: Any, axis: Any = None):
        self.value = value
        self.axis = axis
        if axis is None:
            super().__init__("Invalid position %r" % (value,))
        else:
            super().__init__(
                "Invalid position %r for the %s axis" % (value, getattr(axis, "value", axis))
            )


class UnsupportedBlendMode(OverlayError):
    """Blend mode identifier outside the supported set."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__("Unsupported blend mode %r" % (value,))


class InvalidDimensions(OverlayError):
    """Incompatible or non-positive width and height."""

    def __init__(self, width: Any, height: Any, reason: str = "invalid dimensions"):
        self.width = width
        self.height = height
        super().__init__("%s: %r x %r" % (reason, width, height))


class MissingOverlayExtent(OverlayError):
    """The rendering engine cannot report the extent of an image handle."""

    def __init__(self, image_ref: Any):
        self.image_ref = image_ref
        super().__init__("Cannot determine the extent of %r" % (image_ref,))


class UnsupportedShape(OverlayError):
    """Mask shape name outside the supported set."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__("Unsupported mask shape %r" % (value,))
