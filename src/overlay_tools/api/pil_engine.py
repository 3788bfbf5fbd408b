"""
Pillow rendering engine.

Implements :py:class:`~overlay_tools.api.protocols.RenderEngine` on top of
``PIL.Image``. Shapes are drawn with ``PIL.ImageDraw`` and layers are painted
with ``Image.alpha_composite`` for ``over`` and ``PIL.ImageChops`` for the
separable blend modes Pillow provides. Other blend modes are rejected with
:py:class:`~overlay_tools.errors.UnsupportedBlendMode`.
"""

import logging
from typing import Any, Callable, Optional, Sequence, Tuple

from PIL import Image, ImageChops, ImageDraw

from overlay_tools.composite.mask import Circle, MaskDescriptor, RoundedRectangle
from overlay_tools.constants import BlendMode, Shape
from overlay_tools.errors import InvalidDimensions, MissingOverlayExtent, UnsupportedBlendMode
from overlay_tools.registry import new_registry

logger = logging.getLogger(__name__)

RASTERIZERS, register_rasterizer = new_registry(attribute="shape")

"""Blend function table for modes other than ``over``."""
BLEND_FUNC: dict = {
    BlendMode.MULTIPLY: ImageChops.multiply,
    BlendMode.SCREEN: ImageChops.screen,
    BlendMode.DARKEN: ImageChops.darker,
    BlendMode.LIGHTEN: ImageChops.lighter,
    BlendMode.ADD: ImageChops.add,
    BlendMode.DIFFERENCE: ImageChops.difference,
    BlendMode.OVERLAY: ImageChops.overlay,
    BlendMode.SOFT_LIGHT: ImageChops.soft_light,
    BlendMode.HARD_LIGHT: ImageChops.hard_light,
}


@register_rasterizer(Shape.CIRCLE)
def _draw_circle(descriptor: Circle, draw: ImageDraw.ImageDraw) -> None:
    d = descriptor.diameter
    draw.ellipse((0, 0, d - 1, d - 1), fill=255)


@register_rasterizer(Shape.ROUNDED_RECTANGLE)
def _draw_rounded_rectangle(descriptor: RoundedRectangle, draw: ImageDraw.ImageDraw) -> None:
    box = (0, 0, descriptor.width - 1, descriptor.height - 1)
    if descriptor.radius == 0:
        draw.rectangle(box, fill=255)
    else:
        draw.rounded_rectangle(box, radius=descriptor.radius, fill=255)


class PILEngine(object):
    """Rendering engine backed by Pillow."""

    def image_extent(self, image: Any) -> Tuple[int, int]:
        if not isinstance(image, Image.Image):
            raise MissingOverlayExtent(image)
        width, height = image.size
        if width <= 0 or height <= 0:
            raise MissingOverlayExtent(image)
        return width, height

    def rasterize_shape(self, descriptor: MaskDescriptor) -> Image.Image:
        """Draw the shape in black with coverage in the alpha band (``LA``)."""
        alpha = Image.new("L", descriptor.size, 0)
        RASTERIZERS[descriptor.shape](descriptor, ImageDraw.Draw(alpha))
        return Image.merge("LA", (Image.new("L", descriptor.size, 0), alpha))

    def alpha_band(self, image: Image.Image) -> Optional[int]:
        bands = image.getbands()
        if "A" in bands:
            return bands.index("A")
        return None

    def extract_single_band(self, image: Image.Image, band_index: int) -> Image.Image:
        return image.getchannel(band_index)

    def add_alpha(self, image: Image.Image, mask: Image.Image) -> Image.Image:
        if image.size != mask.size:
            raise InvalidDimensions(
                mask.width, mask.height, "mask does not match %dx%d image" % image.size
            )
        mode = {"1": "LA", "L": "LA", "LA": "LA", "P": "RGBA"}.get(image.mode, "RGBA")
        result = image.convert(mode)
        result.putalpha(mask)
        return result

    def crop(self, image: Image.Image, left: int, top: int, width: int, height: int) -> Image.Image:
        return image.crop((left, top, left + width, top + height))

    def composite_layers(
        self, base: Image.Image, layers: Sequence[Tuple[Any, int, int, BlendMode]]
    ) -> Image.Image:
        canvas = base.convert("RGBA")
        for image, x, y, blend_mode in layers:
            layer = Image.new("RGBA", canvas.size, (0, 0, 0, 0))
            layer.paste(image.convert("RGBA"), (x, y))
            canvas = self._blend(canvas, layer, blend_mode)
        return canvas

    def _blend(self, backdrop: Image.Image, layer: Image.Image, blend_mode: BlendMode) -> Image.Image:
        if blend_mode is BlendMode.OVER:
            return Image.alpha_composite(backdrop, layer)
        func: Optional[Callable] = BLEND_FUNC.get(blend_mode)
        if func is None:
            raise UnsupportedBlendMode(blend_mode)
        blended = func(backdrop.convert("RGB"), layer.convert("RGB")).convert("RGBA")
        blended.putalpha(ImageChops.lighter(backdrop.getchannel("A"), layer.getchannel("A")))
        return Image.composite(blended, backdrop, layer.getchannel("A"))
