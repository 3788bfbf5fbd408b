import logging

import pytest

from overlay_tools.composite.position import (
    normalize_baseline,
    normalize_position,
    resolve_axis,
    resolve_x,
    resolve_y,
)
from overlay_tools.constants import Axis, Baseline, HorizontalPosition, VerticalPosition
from overlay_tools.errors import InvalidPosition

logger = logging.getLogger(__name__)


@pytest.mark.parametrize(
    "keyword, overlay_width, expected",
    [
        ("left", 100, 0),
        ("left", 399, 0),
        ("right", 100, 300),
        ("right", 1, 399),
        ("center", 100, 150),
        ("center", 101, 149),
        (HorizontalPosition.RIGHT, 40, 360),
        ("Center", 0, 200),
    ],
)
def test_resolve_x_keyword(keyword, overlay_width, expected):
    # Keywords resolve against the canvas, not the previous placement.
    assert resolve_x(400, 123, 45, overlay_width, keyword) == expected


@pytest.mark.parametrize(
    "keyword, overlay_height, expected",
    [
        ("top", 50, 0),
        ("bottom", 50, 250),
        ("middle", 50, 125),
        (VerticalPosition.MIDDLE, 51, 124),
    ],
)
def test_resolve_y_keyword(keyword, overlay_height, expected):
    assert resolve_y(300, 7, 9, overlay_height, keyword) == expected


def test_center_truncates_toward_zero():
    # (100 - 151) / 2 == -25.5
    assert resolve_x(100, 0, 100, 151, "center") == -25
    assert resolve_y(100, 0, 100, 103, "middle") == -1


def test_absolute_ignores_delta_and_baseline():
    assert resolve_x(400, 100, 40, 30, 77, dx=10, x_baseline="left") == 77
    assert resolve_y(300, 100, 40, 30, 0, dy=10, y_baseline="top") == 0
    assert resolve_x(400, 0, 400, 30, -15) == -15


@pytest.mark.parametrize(
    "baseline, delta, expected",
    [
        (None, 10, 150),
        ("right", 10, 150),
        ("left", 10, 110),
        ("center", 10, 130),
        ("right", -5, 135),
        (Baseline.LEFT, 0, 100),
        (HorizontalPosition.CENTER, 0, 120),
    ],
)
def test_resolve_x_relative(baseline, delta, expected):
    assert resolve_x(400, 100, 40, 30, None, dx=delta, x_baseline=baseline) == expected


@pytest.mark.parametrize(
    "baseline, delta, expected",
    [
        (None, 0, 80),
        ("bottom", 5, 85),
        ("top", 5, 55),
        ("middle", 0, 65),
    ],
)
def test_resolve_y_relative(baseline, delta, expected):
    assert resolve_y(300, 50, 30, 10, None, dy=delta, y_baseline=baseline) == expected


def test_resolve_relative_odd_extent():
    assert resolve_x(400, 100, 41, 10, None, dx=10, x_baseline="center") == 130


@pytest.mark.parametrize(
    "axis, position",
    [
        (Axis.X, "top"),
        (Axis.X, "middle"),
        (Axis.Y, "left"),
        (Axis.Y, "center"),
        (Axis.X, "bogus"),
        (Axis.X, True),
        (Axis.Y, 1.5),
        (Axis.Y, VerticalPosition.TOP.value.upper() + "x"),
        (Axis.X, VerticalPosition.TOP),
    ],
)
def test_invalid_position(axis, position):
    with pytest.raises(InvalidPosition) as excinfo:
        resolve_axis(axis, 400, 0, 400, 10, position)
    assert excinfo.value.value == position
    assert excinfo.value.axis == axis


@pytest.mark.parametrize(
    "axis, baseline",
    [
        (Axis.X, "bottom"),
        (Axis.X, "top"),
        (Axis.Y, "right"),
        (Axis.Y, Baseline.CENTER),
        (Axis.X, "diagonal"),
    ],
)
def test_invalid_baseline(axis, baseline):
    with pytest.raises(InvalidPosition) as excinfo:
        resolve_axis(axis, 400, 0, 400, 10, None, 0, baseline)
    assert excinfo.value.value == baseline


def test_invalid_baseline_ignored_for_absolute():
    # Rule order: an absolute value is the full answer.
    assert resolve_x(400, 0, 400, 10, 5, x_baseline="diagonal") == 5


def test_invalid_delta():
    with pytest.raises(InvalidPosition):
        resolve_x(400, 0, 400, 10, None, dx="10")


def test_normalize_position():
    assert normalize_position(None, Axis.X) is None
    assert normalize_position(0, Axis.X) == 0
    assert normalize_position(" right ", Axis.X) is HorizontalPosition.RIGHT
    assert normalize_position("BOTTOM", Axis.Y) is VerticalPosition.BOTTOM


def test_normalize_baseline_defaults():
    assert normalize_baseline(None, Axis.X) is Baseline.RIGHT
    assert normalize_baseline(None, Axis.Y) is Baseline.BOTTOM
    assert normalize_baseline(VerticalPosition.MIDDLE, Axis.Y) is Baseline.MIDDLE
