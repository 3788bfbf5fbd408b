"""
Protocol definitions for the rendering engine boundary.

overlay_tools never manipulates pixels itself. Decoding, rasterizing shapes,
band extraction and the final compositing are performed by an engine object
implementing :py:class:`RenderEngine`. :py:class:`~overlay_tools.api.pil_engine.PILEngine`
is the bundled implementation.
"""

from typing import Any, Optional, Protocol, Sequence, Tuple, runtime_checkable

from overlay_tools.composite.mask import MaskDescriptor
from overlay_tools.constants import BlendMode


@runtime_checkable
class RenderEngine(Protocol):
    """
    Protocol defining the operations consumed from a rendering engine.

    Raster handles are opaque to overlay_tools; they are only passed back to
    the engine that produced them.
    """

    def image_extent(self, image: Any) -> Tuple[int, int]:
        """
        (width, height) of ``image``.

        Raises:
            MissingOverlayExtent: If the extent cannot be determined.
        """
        ...

    def rasterize_shape(self, descriptor: MaskDescriptor) -> Any:
        """Rasterize a mask descriptor into an image carrying an alpha band."""
        ...

    def alpha_band(self, image: Any) -> Optional[int]:
        """Index of the alpha band of ``image``, or ``None``."""
        ...

    def extract_single_band(self, image: Any, band_index: int) -> Any:
        """Single-band image holding band ``band_index`` of ``image``."""
        ...

    def add_alpha(self, image: Any, mask: Any) -> Any:
        """Join ``mask`` to ``image`` as its alpha band."""
        ...

    def crop(self, image: Any, left: int, top: int, width: int, height: int) -> Any:
        """Region of ``image`` with the given origin and extent."""
        ...

    def composite_layers(
        self, base: Any, layers: Sequence[Tuple[Any, int, int, BlendMode]]
    ) -> Any:
        """
        Paint ``(image, x, y, blend_mode)`` layers over ``base`` in order.

        Raises:
            UnsupportedBlendMode: If the engine cannot render a blend mode.
        """
        ...
