import logging

import pytest

from overlay_tools.api.pil_engine import BLEND_FUNC, RASTERIZERS, PILEngine
from overlay_tools.api.protocols import RenderEngine
from overlay_tools.composite.mask import Circle, RoundedRectangle
from overlay_tools.constants import BlendMode, Shape
from overlay_tools.errors import InvalidDimensions, MissingOverlayExtent, UnsupportedBlendMode

from ..utils import BLACK, GRAY, RED, WHITE, alpha, rgb, solid

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.render


@pytest.fixture
def engine():
    return PILEngine()


def test_is_render_engine(engine):
    assert isinstance(engine, RenderEngine)
    assert set(RASTERIZERS) == set(Shape)


def test_image_extent(engine):
    assert engine.image_extent(solid((7, 3))) == (7, 3)


@pytest.mark.parametrize("handle", [None, "logo.png", (10, 10)])
def test_image_extent_missing(engine, handle):
    with pytest.raises(MissingOverlayExtent) as excinfo:
        engine.image_extent(handle)
    assert excinfo.value.image_ref == handle


def test_rasterize_circle(engine):
    raster = engine.rasterize_shape(Circle(21))
    assert raster.mode == "LA"
    assert raster.size == (21, 21)
    assert engine.alpha_band(raster) == 1
    assert alpha(raster, (10, 10)) == 255
    assert alpha(raster, (0, 0)) == 0
    assert alpha(raster, (20, 20)) == 0
    assert raster.getchannel("L").getextrema() == (0, 0)


def test_rasterize_rounded_rectangle(engine):
    raster = engine.rasterize_shape(RoundedRectangle(40, 20, 8))
    assert raster.size == (40, 20)
    assert alpha(raster, (0, 0)) == 0
    assert alpha(raster, (39, 19)) == 0
    assert alpha(raster, (20, 10)) == 255
    assert alpha(raster, (20, 0)) == 255


def test_rasterize_square_corners(engine):
    raster = engine.rasterize_shape(RoundedRectangle(10, 10, 0))
    assert raster.getchannel("A").getextrema() == (255, 255)


def test_extract_single_band(engine):
    raster = engine.rasterize_shape(Circle(5))
    band = engine.extract_single_band(raster, 1)
    assert band.mode == "L"
    assert band.size == (5, 5)


def test_alpha_band(engine):
    assert engine.alpha_band(solid((2, 2))) is None
    assert engine.alpha_band(solid((2, 2), (0, 0, 0, 0), "RGBA")) == 3


def test_add_alpha(engine):
    mask = solid((4, 4), 128, "L")
    result = engine.add_alpha(solid((4, 4)), mask)
    assert result.mode == "RGBA"
    assert alpha(result, (1, 1)) == 128

    gray = engine.add_alpha(solid((4, 4), 10, "L"), mask)
    assert gray.mode == "LA"


def test_add_alpha_size_mismatch(engine):
    with pytest.raises(InvalidDimensions):
        engine.add_alpha(solid((4, 4)), solid((3, 4), 255, "L"))


def test_crop(engine):
    assert engine.crop(solid((30, 20)), 5, 0, 20, 20).size == (20, 20)


def test_composite_over(engine):
    base = solid((10, 10), WHITE)
    result = engine.composite_layers(base, [(solid((2, 2), RED), 3, 4, BlendMode.OVER)])
    assert result.size == (10, 10)
    assert rgb(result, (3, 4)) == RED
    assert rgb(result, (4, 5)) == RED
    assert rgb(result, (5, 4)) == WHITE
    assert rgb(result, (0, 0)) == WHITE


def test_composite_clips_outside_canvas(engine):
    base = solid((10, 10), WHITE)
    result = engine.composite_layers(
        base,
        [
            (solid((4, 4), RED), -2, -2, BlendMode.OVER),
            (solid((4, 4), RED), 8, 8, BlendMode.OVER),
        ],
    )
    assert rgb(result, (0, 0)) == RED
    assert rgb(result, (1, 1)) == RED
    assert rgb(result, (2, 2)) == WHITE
    assert rgb(result, (9, 9)) == RED


def test_composite_paints_in_order(engine):
    base = solid((4, 4), WHITE)
    result = engine.composite_layers(
        base,
        [
            (solid((4, 4), RED), 0, 0, BlendMode.OVER),
            (solid((2, 2), BLACK), 0, 0, BlendMode.OVER),
        ],
    )
    assert rgb(result, (0, 0)) == BLACK
    assert rgb(result, (3, 3)) == RED


def test_composite_transparent_overlay(engine):
    base = solid((4, 4), WHITE)
    overlay = solid((4, 4), (255, 0, 0, 0), "RGBA")
    result = engine.composite_layers(base, [(overlay, 0, 0, BlendMode.OVER)])
    assert rgb(result, (1, 1)) == WHITE


@pytest.mark.parametrize(
    "blend_mode, color, expected",
    [
        (BlendMode.MULTIPLY, WHITE, GRAY),
        (BlendMode.MULTIPLY, BLACK, BLACK),
        (BlendMode.SCREEN, WHITE, WHITE),
        (BlendMode.SCREEN, BLACK, GRAY),
        (BlendMode.DARKEN, WHITE, GRAY),
        (BlendMode.DARKEN, BLACK, BLACK),
        (BlendMode.LIGHTEN, WHITE, WHITE),
        (BlendMode.LIGHTEN, BLACK, GRAY),
        (BlendMode.ADD, WHITE, WHITE),
        (BlendMode.ADD, BLACK, GRAY),
        (BlendMode.DIFFERENCE, WHITE, (127, 127, 127)),
        (BlendMode.DIFFERENCE, BLACK, GRAY),
    ],
)
def test_composite_separable_modes(engine, blend_mode, color, expected):
    base = solid((4, 4), GRAY)
    result = engine.composite_layers(base, [(solid((2, 2), color), 0, 0, blend_mode)])
    assert rgb(result, (0, 0)) == expected
    assert rgb(result, (3, 3)) == GRAY


def test_composite_unsupported_mode(engine):
    assert BlendMode.XOR not in BLEND_FUNC
    with pytest.raises(UnsupportedBlendMode):
        engine.composite_layers(solid((4, 4)), [(solid((2, 2)), 0, 0, BlendMode.XOR)])
