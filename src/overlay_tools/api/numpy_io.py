import logging
from typing import TYPE_CHECKING, Optional

import numpy as np
from PIL import Image

from overlay_tools.composite.mask import MaskDescriptor, render_mask
from overlay_tools.errors import InvalidDimensions

if TYPE_CHECKING:
    from overlay_tools.api.protocols import RenderEngine

logger = logging.getLogger(__name__)


def get_array(image: Image.Image) -> np.ndarray:
    """
    Convert a PIL image to a float32 array of shape (height, width, bands)
    scaled to [0, 1].
    """
    if image.mode in ("1", "P"):
        image = image.convert("RGBA" if "transparency" in image.info else "L")
    array = np.asarray(image, dtype=np.float32) / 255.0
    if array.ndim == 2:
        array = np.expand_dims(array, 2)
    return array


def get_mask_array(
    descriptor: MaskDescriptor, engine: Optional["RenderEngine"] = None
) -> np.ndarray:
    """
    Rasterize a mask descriptor to a float32 array of shape (height, width, 1).

    Uses :py:class:`~overlay_tools.api.pil_engine.PILEngine` unless another
    engine is given.
    """
    if engine is None:
        from overlay_tools.api.pil_engine import PILEngine

        engine = PILEngine()
    mask = render_mask(descriptor, engine)
    array = get_array(mask)
    if array.shape != (descriptor.size[1], descriptor.size[0], 1):
        raise InvalidDimensions(
            array.shape[1], array.shape[0], "mask does not match %dx%d descriptor" % descriptor.size
        )
    return array


def coverage(array: np.ndarray) -> float:
    """Fraction of the mask area that is opaque, in [0, 1]."""
    if array.size == 0:
        return 0.0
    return float(np.mean(array))
