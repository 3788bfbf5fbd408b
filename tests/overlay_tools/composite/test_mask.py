import logging

import pytest

from overlay_tools.api.pil_engine import PILEngine
from overlay_tools.composite.mask import (
    BUILDERS,
    Circle,
    RoundedRectangle,
    generate,
    get_shape,
    render_mask,
)
from overlay_tools.constants import DEFAULT_ROUNDED_RADIUS, Shape
from overlay_tools.errors import InvalidDimensions, UnsupportedShape

logger = logging.getLogger(__name__)


def test_circle_requires_square():
    with pytest.raises(InvalidDimensions) as excinfo:
        generate("circle", 100, 50)
    assert (excinfo.value.width, excinfo.value.height) == (100, 50)


def test_circle():
    mask = generate(Shape.CIRCLE, 64, 64)
    assert mask == Circle(64)
    assert mask.size == (64, 64)
    assert mask.center == 32
    assert 'cx="32" cy="32" r="32"' in mask.to_svg()
    assert 'viewBox="0 0 64 64"' in mask.to_svg()


def test_circle_ignores_radius():
    assert generate("circle", 10, 10, radius=3) == Circle(10)


def test_rounded_rectangle():
    mask = generate("rounded_rectangle", 200, 100, radius=20)
    assert isinstance(mask, RoundedRectangle)
    assert mask.size == (200, 100)
    assert mask.radius == 20
    svg = mask.to_svg()
    assert 'rx="20" ry="20"' in svg
    assert 'width="200" height="100"' in svg


def test_rounded_rectangle_default_radius():
    assert generate("rounded_corners", 30, 40).radius == DEFAULT_ROUNDED_RADIUS == 50


@pytest.mark.parametrize(
    "shape, width, height, params",
    [
        ("circle", 0, 0, {}),
        ("circle", -4, -4, {}),
        ("rounded_rectangle", 0, 10, {}),
        ("rounded_rectangle", 10, 10, {"radius": -1}),
        ("rounded_rectangle", 10, 10, {"radius": 2.5}),
    ],
)
def test_invalid_dimensions(shape, width, height, params):
    with pytest.raises(InvalidDimensions):
        generate(shape, width, height, **params)


@pytest.mark.parametrize("shape", ["triangle", "", 3, None])
def test_unsupported_shape(shape):
    with pytest.raises(UnsupportedShape):
        generate(shape, 10, 10)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("circle", Shape.CIRCLE),
        ("Rounded-Rectangle", Shape.ROUNDED_RECTANGLE),
        ("rounded", Shape.ROUNDED_RECTANGLE),
        (Shape.CIRCLE, Shape.CIRCLE),
    ],
)
def test_get_shape(name, expected):
    assert get_shape(name) is expected


def test_builders_registered():
    assert set(BUILDERS) == set(Shape)
    for shape, builder in BUILDERS.items():
        assert builder.shape is shape


@pytest.mark.parametrize(
    "descriptor",
    [Circle(9), RoundedRectangle(200, 100, 20), RoundedRectangle(3, 7, 0)],
)
def test_render_mask_size(descriptor):
    mask = render_mask(descriptor, PILEngine())
    assert mask.mode == "L"
    assert mask.size == descriptor.size


class _OpaqueEngine(PILEngine):
    def alpha_band(self, image):
        return None


def test_render_mask_without_alpha():
    with pytest.raises(InvalidDimensions):
        render_mask(Circle(4), _OpaqueEngine())
