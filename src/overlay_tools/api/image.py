"""
High level image API.

Thin functions that measure images, plan with
:py:mod:`overlay_tools.composite` and hand the result to a rendering engine.
Errors are raised as :py:class:`~overlay_tools.errors.OverlayError`
subclasses.

Example::

    from overlay_tools.api import image

    base = image.open('background.png')
    logo = image.open('logo.png')
    badge = image.circle(image.open('avatar.jpg'))

    composed = image.compose(base, [
        (logo, {'x': 'center', 'y': 'top'}),
        (badge, {'x_baseline': 'left', 'dx': 20, 'dy': 10}),
    ])
    image.write(composed, 'out.png')
"""

import logging
from collections import abc
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np
from PIL import Image

from overlay_tools.api.numpy_io import get_mask_array
from overlay_tools.api.pil_engine import PILEngine
from overlay_tools.api.protocols import RenderEngine
from overlay_tools.composite.mask import generate, render_mask
from overlay_tools.composite.planner import (
    Canvas,
    ResolvedLayer,
    build_overlay,
    plan,
    plan_single,
)
from overlay_tools.constants import DEFAULT_ROUNDED_RADIUS, DEFAULT_X, DEFAULT_Y, Shape
from overlay_tools.errors import OverlayError

logger = logging.getLogger(__name__)

Composition = Union[Any, Tuple[Any, Dict[str, Any]]]

_default_engine = PILEngine()


def _engine(engine: Optional[RenderEngine]) -> RenderEngine:
    return _default_engine if engine is None else engine


def open(path: Any, **kwargs: Any) -> Image.Image:
    """
    Open an image file with Pillow and load its pixels.

    :param path: Filename, pathlib.Path or file object.
    """
    image = Image.open(path, **kwargs)
    image.load()
    return image


def write(image: Image.Image, path: Any, **kwargs: Any) -> Image.Image:
    """Save ``image`` with Pillow. Keyword arguments go to ``Image.save``."""
    image.save(path, **kwargs)
    return image


def _split(item: Composition) -> Tuple[Any, Dict[str, Any]]:
    if isinstance(item, tuple):
        image, options = item
        return image, dict(options or {})
    return item, {"x": DEFAULT_X, "y": DEFAULT_Y}


def _is_composition(overlay: Any) -> bool:
    return isinstance(overlay, abc.Sequence) and not isinstance(overlay, (str, bytes))


def _measure(engine: RenderEngine, image: Any, index: int) -> Tuple[int, int]:
    try:
        return engine.image_extent(image)
    except OverlayError as e:
        e.index = index
        raise


def _plan_list(
    engine: RenderEngine, canvas: Canvas, overlays: Sequence[Composition]
) -> Tuple[ResolvedLayer, ...]:
    specs = []
    extent_error: Optional[OverlayError] = None
    for index, item in enumerate(overlays):
        image, item_options = _split(item)
        try:
            width, height = _measure(engine, image, index)
        except OverlayError as e:
            # Earlier entries may still hold the first error.
            extent_error = e
            break
        specs.append(build_overlay(image, width, height, **item_options))

    layers = plan(canvas, specs).unwrap()
    if extent_error is not None:
        raise extent_error
    return layers


def compose(
    base: Any,
    overlay: Union[Any, Sequence[Composition]],
    engine: Optional[RenderEngine] = None,
    **options: Any,
) -> Any:
    """
    Compose one or more overlay images over ``base``.

    With a single overlay image, ``options`` may hold ``x`` (int, ``left``,
    ``center`` or ``right``; default ``center``), ``y`` (int, ``top``,
    ``middle`` or ``bottom``; default ``middle``) and ``blend_mode`` (default
    ``over``).

    With a list, each entry is an image or an ``(image, options)`` pair whose
    options are those of :py:class:`~overlay_tools.composite.planner.OverlaySpec`:
    ``x``, ``y``, ``dx``, ``dy``, ``x_baseline``, ``y_baseline`` and
    ``blend_mode``. A bare image is centred on the canvas. Paired entries
    without ``x``/``y`` are placed relative to the previous entry; the first
    one is measured from the canvas itself. Any sequence other than a string
    is taken as a list of overlays.

    Returns:
        The composed image produced by the engine.

    Raises:
        OverlayError: The first invalid position, blend mode or unmeasurable
            overlay, with ``index`` naming the list entry.
    """
    engine = _engine(engine)
    canvas = Canvas(*engine.image_extent(base))

    if not _is_composition(overlay):
        width, height = engine.image_extent(overlay)
        layers = plan_single(canvas, overlay, width, height, **options).unwrap()
        return engine.composite_layers(base, [layer.astuple() for layer in layers])

    if options:
        logger.warning("Options ignored for a composition list: %s" % ", ".join(sorted(options)))

    layers = _plan_list(engine, canvas, overlay)
    return engine.composite_layers(base, [layer.astuple() for layer in layers])


def mask(
    shape: Union[Shape, str],
    width: int,
    height: int,
    engine: Optional[RenderEngine] = None,
    **params: Any,
) -> Any:
    """
    Single-band alpha mask of ``shape`` with exactly ``width`` x ``height``
    pixels. See :py:func:`overlay_tools.composite.mask.generate`.
    """
    engine = _engine(engine)
    return render_mask(generate(shape, width, height, **params), engine)


def mask_array(
    shape: Union[Shape, str],
    width: int,
    height: int,
    engine: Optional[RenderEngine] = None,
    **params: Any,
) -> np.ndarray:
    """
    Same as :py:func:`mask`, as a float32 NumPy array of shape
    ``(height, width, 1)`` scaled to [0, 1].
    """
    return get_mask_array(generate(shape, width, height, **params), _engine(engine))


def circle(image: Any, engine: Optional[RenderEngine] = None) -> Any:
    """
    Apply a circular mask to an image.

    The result has an alpha band, so save it to a format such as PNG that
    keeps transparency. Non-square images are cropped to the centred square
    of side ``min(width, height)`` first.
    """
    engine = _engine(engine)
    width, height = engine.image_extent(image)
    size = min(width, height)
    if width != height:
        logger.warning("Cropping %dx%d image to %dx%d for circle mask" % (width, height, size, size))
        image = engine.crop(image, (width - size) // 2, (height - size) // 2, size, size)
    alpha = mask(Shape.CIRCLE, size, size, engine=engine)
    return engine.add_alpha(image, alpha)


def rounded(
    image: Any, radius: int = DEFAULT_ROUNDED_RADIUS, engine: Optional[RenderEngine] = None
) -> Any:
    """
    Apply rounded corners to an image.

    :param radius: Corner radius in pixels, default 50.
    """
    engine = _engine(engine)
    width, height = engine.image_extent(image)
    alpha = mask(Shape.ROUNDED_RECTANGLE, width, height, engine=engine, radius=radius)
    return engine.add_alpha(image, alpha)


def composition_layers(
    base: Any, overlays: Sequence[Composition], engine: Optional[RenderEngine] = None
) -> List[Tuple[Any, int, int, Any]]:
    """
    Resolve a composition list without rendering it.

    Returns the ``(image, x, y, blend_mode)`` tuples that
    :py:func:`compose` would hand to the engine.
    """
    engine = _engine(engine)
    canvas = Canvas(*engine.image_extent(base))
    return [layer.astuple() for layer in _plan_list(engine, canvas, overlays)]
