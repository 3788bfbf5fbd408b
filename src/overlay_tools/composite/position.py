"""
Position resolution for a single placement axis.

A position is one of three things:

- ``None``: unset, placed relative to the previously placed overlay using a
  delta and a baseline edge.
- an ``int``: absolute pixel offset on the canvas.
- a keyword: :py:class:`~overlay_tools.constants.HorizontalPosition` for the
  x axis or :py:class:`~overlay_tools.constants.VerticalPosition` for the y
  axis, resolved against the canvas.

Keyword and baseline strings such as ``"right"`` are accepted and normalized.
"""

import logging
from typing import Any, Union

from overlay_tools.constants import (
    AXIS_BASELINES,
    AXIS_KEYWORDS,
    DEFAULT_X_BASELINE,
    DEFAULT_Y_BASELINE,
    Axis,
    Baseline,
    HorizontalPosition,
    VerticalPosition,
)
from overlay_tools.errors import InvalidPosition

logger = logging.getLogger(__name__)

Keyword = Union[HorizontalPosition, VerticalPosition]
Position = Union[None, int, Keyword]

_LEADING = (HorizontalPosition.LEFT, VerticalPosition.TOP)
_TRAILING = (HorizontalPosition.RIGHT, VerticalPosition.BOTTOM)
_CENTERED = (HorizontalPosition.CENTER, VerticalPosition.MIDDLE)


def _half(value: int) -> int:
    """Integer halving that truncates toward zero."""
    return value // 2 if value >= 0 else -(-value // 2)


def normalize_position(value: Any, axis: Axis) -> Position:
    """
    Convert a user supplied position into ``None``, an ``int`` or a keyword
    member valid for ``axis``.

    :raises InvalidPosition: on unknown keywords, keywords of the other axis,
        and values that are neither ``None``, ``int`` nor a keyword.
    """
    keywords = AXIS_KEYWORDS[axis]
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidPosition(value, axis)
    if isinstance(value, int):
        return value
    if isinstance(value, keywords):
        return value
    if isinstance(value, str):
        try:
            return keywords(value.strip().lower())
        except ValueError:
            pass
    raise InvalidPosition(value, axis)


def normalize_baseline(value: Any, axis: Axis) -> Baseline:
    """
    Convert a user supplied baseline into a
    :py:class:`~overlay_tools.constants.Baseline` valid for ``axis``.

    ``None`` selects the axis default (``right`` for x, ``bottom`` for y).

    :raises InvalidPosition: on unknown baselines or baselines of the other
        axis.
    """
    if value is None:
        return DEFAULT_X_BASELINE if axis is Axis.X else DEFAULT_Y_BASELINE
    baseline = value
    if isinstance(value, (HorizontalPosition, VerticalPosition)):
        baseline = Baseline(value.value)
    elif isinstance(value, str):
        try:
            baseline = Baseline(value.strip().lower())
        except ValueError:
            raise InvalidPosition(value, axis) from None
    if baseline not in AXIS_BASELINES[axis]:
        raise InvalidPosition(value, axis)
    return baseline


def resolve_keyword(keyword: Keyword, reference_extent: int, overlay_extent: int) -> int:
    """Offset of a keyword position within ``reference_extent``."""
    if keyword in _LEADING:
        return 0
    if keyword in _TRAILING:
        return reference_extent - overlay_extent
    if keyword in _CENTERED:
        return _half(reference_extent - overlay_extent)
    raise InvalidPosition(keyword)


def resolve_relative(
    previous_offset: int, previous_extent: int, delta: int, baseline: Baseline
) -> int:
    """Offset measured from the ``baseline`` edge of the previous placement."""
    if baseline in (Baseline.RIGHT, Baseline.BOTTOM):
        return previous_offset + previous_extent + delta
    if baseline in (Baseline.LEFT, Baseline.TOP):
        return previous_offset + delta
    if baseline in (Baseline.CENTER, Baseline.MIDDLE):
        return previous_offset + _half(previous_extent) + delta
    raise InvalidPosition(baseline)


def resolve_axis(
    axis: Axis,
    reference_extent: int,
    previous_offset: int,
    previous_extent: int,
    overlay_extent: int,
    position: Any = None,
    delta: int = 0,
    baseline: Any = None,
) -> int:
    """
    Resolve one axis of an overlay placement to an absolute pixel offset.

    Rules are evaluated in order:

    1. An integer ``position`` is returned as is. ``delta`` and ``baseline``
       are ignored.
    2. A keyword ``position`` is resolved against ``reference_extent`` (the
       canvas) and ``overlay_extent``: leading edge is ``0``, trailing edge is
       ``reference - overlay`` and the centre is half of that, truncated
       toward zero.
    3. An unset ``position`` is measured from the ``baseline`` edge of the
       previous placement plus ``delta``.

    Args:
        axis: :py:class:`~overlay_tools.constants.Axis` being resolved.
        reference_extent: Canvas width or height.
        previous_offset: Offset of the previously placed overlay.
        previous_extent: Width or height of the previously placed overlay.
        overlay_extent: Width or height of the overlay being placed.
        position: ``None``, absolute ``int`` or keyword.
        delta: Relative offset used when ``position`` is unset.
        baseline: Edge of the previous placement ``delta`` is measured from.

    Returns:
        Absolute offset in pixels.

    Raises:
        InvalidPosition: For unknown keywords or baselines.
    """
    position = normalize_position(position, axis)
    if isinstance(position, int):
        return position
    if position is not None:
        return resolve_keyword(position, reference_extent, overlay_extent)

    baseline = normalize_baseline(baseline, axis)
    if isinstance(delta, bool) or not isinstance(delta, int):
        raise InvalidPosition(delta, axis)
    return resolve_relative(previous_offset, previous_extent, delta, baseline)


def resolve_x(
    reference_width: int,
    previous_x: int,
    previous_width: int,
    overlay_width: int,
    x: Any = None,
    dx: int = 0,
    x_baseline: Any = None,
) -> int:
    """Resolve the horizontal offset. See :py:func:`resolve_axis`."""
    return resolve_axis(
        Axis.X, reference_width, previous_x, previous_width, overlay_width, x, dx, x_baseline
    )


def resolve_y(
    reference_height: int,
    previous_y: int,
    previous_height: int,
    overlay_height: int,
    y: Any = None,
    dy: int = 0,
    y_baseline: Any = None,
) -> int:
    """Resolve the vertical offset. See :py:func:`resolve_axis`."""
    return resolve_axis(
        Axis.Y, reference_height, previous_y, previous_height, overlay_height, y, dy, y_baseline
    )
