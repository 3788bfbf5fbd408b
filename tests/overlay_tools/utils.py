import logging
from typing import Tuple

from PIL import Image

logging.basicConfig(level=logging.DEBUG)

WHITE = (255, 255, 255)
RED = (255, 0, 0)
GRAY = (128, 128, 128)
BLACK = (0, 0, 0)


def solid(size: Tuple[int, int], color=WHITE, mode: str = "RGB") -> Image.Image:
    """In-memory image filled with a single colour."""
    return Image.new(mode, size, color)


def rgb(image: Image.Image, xy: Tuple[int, int]) -> Tuple[int, int, int]:
    return image.convert("RGB").getpixel(xy)


def alpha(image: Image.Image, xy: Tuple[int, int]) -> int:
    return image.getchannel("A").getpixel(xy)
