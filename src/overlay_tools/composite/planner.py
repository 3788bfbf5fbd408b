"""
Composition planner.

Turns a canvas extent and an ordered list of overlay specifications into
resolved layers with absolute integer offsets and canonical blend modes.
Layers are resolved strictly in input order and each overlay may be placed
relative to the one placed before it, so planning is a left fold that threads
a :py:class:`PlacementState` through the list. The fold halts on the first
error; no partial layer list is ever produced.

A composition of exactly one overlay that leaves an axis unplaced (no
position, no offset, default baseline) is centred on that axis instead.

Example::

    from overlay_tools.composite.planner import Canvas, OverlaySpec, plan

    result = plan(Canvas(400, 300), [
        OverlaySpec(title, 200, 40, x='center', y='top'),
        OverlaySpec(body, 180, 20, x_baseline='left', dx=10, dy=20),
        OverlaySpec(footer, 180, 20, dy=10, blend_mode='multiply'),
    ])
    if result.ok:
        for layer in result.layers:
            print(layer.x, layer.y, layer.blend_mode)

Planning is pure: it performs no I/O, never touches pixel data, and can run
concurrently from any number of threads.
"""

import logging
from itertools import chain, islice
from typing import Any, Iterable, List, Optional, Tuple, Union

from attrs import define, evolve, field

from overlay_tools.composite.blend import validate_blend_mode
from overlay_tools.composite.position import normalize_baseline, resolve_x, resolve_y
from overlay_tools.constants import (
    DEFAULT_BLEND_MODE,
    DEFAULT_X,
    DEFAULT_X_BASELINE,
    DEFAULT_Y,
    DEFAULT_Y_BASELINE,
    Axis,
    BlendMode,
)
from overlay_tools.errors import OverlayError
from overlay_tools.validators import positive_

logger = logging.getLogger(__name__)

OVERLAY_OPTIONS = frozenset(
    ("x", "y", "dx", "dy", "x_baseline", "y_baseline", "blend_mode")
)


@define(frozen=True)
class Canvas:
    """
    Extent of the base image.

    .. py:attribute:: width
    .. py:attribute:: height
    """

    width: int = field(validator=positive_())
    height: int = field(validator=positive_())

    @classmethod
    def create(cls, value: Union["Canvas", Tuple[int, int]]) -> "Canvas":
        """Accept a :py:class:`Canvas` or a ``(width, height)`` pair."""
        if isinstance(value, cls):
            return value
        width, height = value
        return cls(width, height)

    @property
    def size(self) -> Tuple[int, int]:
        """(width, height) tuple."""
        return self.width, self.height


@define(frozen=True)
class OverlaySpec:
    """
    One entry of a composition list.

    ``image_ref`` is an opaque handle owned by the caller. ``width`` and
    ``height`` are the overlay's own extent as reported by the rendering
    engine.

    ``x`` and ``y`` are an absolute ``int``, a keyword (``left``, ``center``,
    ``right`` / ``top``, ``middle``, ``bottom``) or ``None``. When unset the
    overlay is placed ``dx``/``dy`` pixels from the ``x_baseline`` /
    ``y_baseline`` edge of the previously placed overlay. Values are checked
    when the overlay is planned, not here.
    """

    image_ref: Any
    width: int = field(validator=positive_())
    height: int = field(validator=positive_())
    x: Any = None
    y: Any = None
    dx: int = 0
    dy: int = 0
    x_baseline: Any = DEFAULT_X_BASELINE
    y_baseline: Any = DEFAULT_Y_BASELINE
    blend_mode: Any = DEFAULT_BLEND_MODE


@define(frozen=True)
class PlacementState:
    """
    Fold accumulator: offset and extent of the previously placed overlay.

    The initial state is the canvas itself at ``(0, 0)``, so relative offsets
    of the first overlay are measured against the canvas.
    """

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def initial(cls, canvas: Canvas) -> "PlacementState":
        return cls(0, 0, canvas.width, canvas.height)

    def advance(self, layer: "ResolvedLayer", overlay: OverlaySpec) -> "PlacementState":
        return PlacementState(layer.x, layer.y, overlay.width, overlay.height)


@define(frozen=True)
class ResolvedLayer:
    """Overlay with concrete offsets, ready for the compositor."""

    image_ref: Any
    x: int
    y: int
    blend_mode: BlendMode

    def astuple(self) -> Tuple[Any, int, int, BlendMode]:
        return self.image_ref, self.x, self.y, self.blend_mode


@define(frozen=True)
class Plan:
    """
    Planning result.

    Exactly one of :py:attr:`layers` and :py:attr:`error` is meaningful:
    a successful plan holds every resolved layer in input order, a failed
    plan holds only the first error encountered, with
    :py:attr:`~overlay_tools.errors.OverlayError.index` naming the overlay.
    """

    layers: Tuple[ResolvedLayer, ...] = ()
    error: Optional[OverlayError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Tuple[ResolvedLayer, ...]:
        """Return the layers or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.layers


def build_overlay(image_ref: Any, width: int, height: int, **options: Any) -> OverlaySpec:
    """
    Build an :py:class:`OverlaySpec` from keyword options.

    ``None`` values fall back to the defaults so option dictionaries read
    from JSON may carry explicit nulls.

    :raises TypeError: on unknown option names.
    """
    unknown = set(options) - OVERLAY_OPTIONS
    if unknown:
        raise TypeError("Unknown overlay options: %s" % ", ".join(sorted(unknown)))
    kwargs = {key: value for key, value in options.items() if value is not None}
    return OverlaySpec(image_ref, width, height, **kwargs)


def _step(
    canvas: Canvas, state: PlacementState, overlay: OverlaySpec, index: int
) -> Tuple[PlacementState, Union[ResolvedLayer, OverlayError]]:
    try:
        x = resolve_x(
            canvas.width,
            state.x,
            state.width,
            overlay.width,
            overlay.x,
            overlay.dx,
            overlay.x_baseline,
        )
        y = resolve_y(
            canvas.height,
            state.y,
            state.height,
            overlay.height,
            overlay.y,
            overlay.dy,
            overlay.y_baseline,
        )
        blend_mode = validate_blend_mode(overlay.blend_mode)
    except OverlayError as e:
        e.index = index
        return state, e

    layer = ResolvedLayer(overlay.image_ref, x, y, blend_mode)
    return state.advance(layer, overlay), layer


def _unplaced(axis: Axis, position: Any, delta: Any, baseline: Any) -> bool:
    if position is not None or isinstance(delta, bool) or delta != 0:
        return False
    try:
        return normalize_baseline(baseline, axis) is normalize_baseline(None, axis)
    except OverlayError:
        # Left for the planner to report.
        return False


def _center_unplaced(overlay: OverlaySpec) -> OverlaySpec:
    changes = {}
    if _unplaced(Axis.X, overlay.x, overlay.dx, overlay.x_baseline):
        changes["x"] = DEFAULT_X
    if _unplaced(Axis.Y, overlay.y, overlay.dy, overlay.y_baseline):
        changes["y"] = DEFAULT_Y
    return evolve(overlay, **changes) if changes else overlay


def plan(
    canvas: Union[Canvas, Tuple[int, int]], overlays: Iterable[OverlaySpec]
) -> Plan:
    """
    Resolve an ordered list of overlays against a canvas.

    Args:
        canvas: :py:class:`Canvas` or ``(width, height)`` of the base image.
        overlays: Overlay specifications in paint order.

    Returns:
        :py:class:`Plan` holding every :py:class:`ResolvedLayer` in input
        order, or the first error. Overlays after a failing one are never
        evaluated.

    A lone overlay with an unplaced axis is centred on that axis, so
    ``plan(canvas, [OverlaySpec(logo, w, h)])`` matches :py:func:`plan_single`.
    """
    canvas = Canvas.create(canvas)
    state = PlacementState.initial(canvas)
    layers: List[ResolvedLayer] = []

    overlays = iter(overlays)
    head = list(islice(overlays, 2))
    if len(head) == 1:
        head = [_center_unplaced(head[0])]

    for index, overlay in enumerate(chain(head, overlays)):
        state, outcome = _step(canvas, state, overlay, index)
        if isinstance(outcome, OverlayError):
            logger.debug("Planning stopped at overlay %d: %s" % (index, outcome))
            return Plan(error=outcome)
        layers.append(outcome)

    logger.debug("Planned %d layer(s) on %dx%d canvas" % (len(layers), canvas.width, canvas.height))
    return Plan(layers=tuple(layers))


def plan_single(
    canvas: Union[Canvas, Tuple[int, int]],
    image_ref: Any,
    width: int,
    height: int,
    x: Any = None,
    y: Any = None,
    blend_mode: Any = None,
) -> Plan:
    """
    Plan a single overlay.

    Unset ``x`` and ``y`` default to ``center`` and ``middle`` so the overlay
    is centred on the canvas.
    """
    overlay = OverlaySpec(
        image_ref,
        width,
        height,
        x=DEFAULT_X if x is None else x,
        y=DEFAULT_Y if y is None else y,
        blend_mode=DEFAULT_BLEND_MODE if blend_mode is None else blend_mode,
    )
    return plan(canvas, [overlay])
