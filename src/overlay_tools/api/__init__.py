"""
User-facing API.

- :py:mod:`overlay_tools.api.image`: compose, mask, circle and rounded
- :py:mod:`overlay_tools.api.pil_engine`: Pillow rendering engine
- :py:mod:`overlay_tools.api.protocols`: rendering engine protocol
- :py:mod:`overlay_tools.api.numpy_io`: NumPy conversion of images and masks
"""

from overlay_tools.api.numpy_io import coverage, get_array, get_mask_array
from overlay_tools.api.pil_engine import PILEngine
from overlay_tools.api.protocols import RenderEngine

__all__ = ["PILEngine", "RenderEngine", "coverage", "get_array", "get_mask_array"]
