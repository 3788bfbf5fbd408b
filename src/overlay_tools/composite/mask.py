"""
Mask geometry.

Translates a shape request into a declarative
:py:class:`MaskDescriptor`. Rasterizing the shape and isolating its alpha
band is left to the rendering engine, see :py:func:`render_mask`.
"""

import logging
from typing import TYPE_CHECKING, Any, Tuple, Union

from attrs import define, field

from overlay_tools.constants import DEFAULT_ROUNDED_RADIUS, Shape
from overlay_tools.errors import InvalidDimensions, UnsupportedShape
from overlay_tools.registry import new_registry
from overlay_tools.validators import positive_

if TYPE_CHECKING:
    from overlay_tools.api.protocols import RenderEngine

logger = logging.getLogger(__name__)

BUILDERS, register = new_registry(attribute="shape")

# Names accepted in addition to the Shape values.
_SHAPE_ALIASES = {
    "rounded": Shape.ROUNDED_RECTANGLE,
    "rounded_corners": Shape.ROUNDED_RECTANGLE,
}


def _non_negative(inst, attribute, value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidDimensions(
            inst.width, inst.height, "radius must be a non-negative integer, got %r" % (value,)
        )


class MaskDescriptor:
    """Base class of mask shapes."""

    shape: Shape

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) of the rasterized mask."""
        raise NotImplementedError

    def to_svg(self) -> str:
        """SVG document of the shape, filled black on a transparent ground."""
        raise NotImplementedError


@define(frozen=True)
class Circle(MaskDescriptor):
    """Filled disc inscribed in a ``diameter`` x ``diameter`` square."""

    shape = Shape.CIRCLE

    diameter: int = field(validator=positive_())

    @property
    def width(self) -> int:
        return self.diameter

    @property
    def height(self) -> int:
        return self.diameter

    @property
    def size(self) -> Tuple[int, int]:
        return self.diameter, self.diameter

    @property
    def center(self) -> int:
        """Centre coordinate on both axes, also the radius."""
        return self.diameter // 2

    def to_svg(self) -> str:
        return (
            '<svg viewBox="0 0 {d} {d}">\n'
            '  <circle style="fill: black; stroke: none" cx="{c}" cy="{c}" r="{c}"/>\n'
            "</svg>\n"
        ).format(d=self.diameter, c=self.center)


@define(frozen=True)
class RoundedRectangle(MaskDescriptor):
    """Filled ``width`` x ``height`` rectangle with rounded corners."""

    shape = Shape.ROUNDED_RECTANGLE

    width: int = field(validator=positive_())
    height: int = field(validator=positive_())
    radius: int = field(default=DEFAULT_ROUNDED_RADIUS, validator=_non_negative)

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def to_svg(self) -> str:
        return (
            '<svg viewBox="0 0 {w} {h}">\n'
            '  <rect rx="{r}" ry="{r}" x="0" y="0" width="{w}" height="{h}" fill="black" />\n'
            "</svg>\n"
        ).format(w=self.width, h=self.height, r=self.radius)


@register(Shape.CIRCLE)
def _circle(width: int, height: int, **kwargs: Any) -> Circle:
    if width != height:
        raise InvalidDimensions(width, height, "circle mask must be square")
    return Circle(width)


@register(Shape.ROUNDED_RECTANGLE)
def _rounded_rectangle(
    width: int, height: int, radius: int = DEFAULT_ROUNDED_RADIUS, **kwargs: Any
) -> RoundedRectangle:
    return RoundedRectangle(width, height, radius)


def get_shape(shape: Union[Shape, str]) -> Shape:
    """
    Normalize a shape name.

    :raises UnsupportedShape: for unknown names.
    """
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, str):
        key = shape.strip().lower().replace("-", "_")
        if key in _SHAPE_ALIASES:
            return _SHAPE_ALIASES[key]
        try:
            return Shape(key)
        except ValueError:
            pass
    raise UnsupportedShape(shape)


def generate(shape: Union[Shape, str], width: int, height: int, **params: Any) -> MaskDescriptor:
    """
    Generate a mask descriptor.

    Args:
        shape: ``circle`` or ``rounded_rectangle`` (also ``rounded_corners``).
        width: Mask width in pixels.
        height: Mask height in pixels.
        params: Shape parameters. ``rounded_rectangle`` takes ``radius``
            (default 50).

    Returns:
        :py:class:`Circle` or :py:class:`RoundedRectangle` whose
        :py:attr:`~MaskDescriptor.size` is exactly ``(width, height)``.

    Raises:
        InvalidDimensions: For non-positive sizes, a non-square circle or a
            negative radius.
        UnsupportedShape: For unknown shape names.
    """
    builder = BUILDERS[get_shape(shape)]
    descriptor = builder(width, height, **params)
    logger.debug("Generated mask %r" % (descriptor,))
    return descriptor


def render_mask(descriptor: MaskDescriptor, engine: "RenderEngine") -> Any:
    """
    Rasterize ``descriptor`` with ``engine`` and return its single alpha band.
    """
    raster = engine.rasterize_shape(descriptor)
    band = engine.alpha_band(raster)
    if band is None:
        raise InvalidDimensions(*descriptor.size, reason="rasterized mask has no alpha band")
    return engine.extract_single_band(raster, band)
