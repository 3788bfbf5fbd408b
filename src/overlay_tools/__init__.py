"""
overlay-tools: layout planning and masking for image composition.

Overlay images are placed on a base canvas with absolute offsets, keywords
(``left``, ``center``, ``bottom`` ...) or offsets relative to the previously
placed overlay. The planner resolves every placement to integer coordinates
and a validated blend mode; a rendering engine paints the result.

Basic usage::

    from overlay_tools import image

    base = image.open('background.png')
    composed = image.compose(base, [
        (image.open('title.png'), {'x': 'center', 'y': 'top'}),
        (image.open('subtitle.png'), {'x_baseline': 'left', 'dy': 12}),
    ])
    image.write(composed, 'out.png')

Architecture:

- :py:mod:`overlay_tools.composite`: Backend independent planning and masks
- :py:mod:`overlay_tools.api`: Image-level API and the Pillow engine
"""

from overlay_tools.api import image
from overlay_tools.composite.planner import Canvas, OverlaySpec, Plan, ResolvedLayer, plan
from overlay_tools.version import __version__

__all__ = ["Canvas", "OverlaySpec", "Plan", "ResolvedLayer", "image", "plan", "__version__"]
