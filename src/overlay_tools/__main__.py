import argparse
import json
import logging
import os
from typing import Any, Dict, List, Optional

from overlay_tools.api import image
from overlay_tools.api.numpy_io import coverage, get_array
from overlay_tools.constants import DEFAULT_ROUNDED_RADIUS
from overlay_tools.errors import OverlayError
from overlay_tools.version import __version__

logger = logging.getLogger("overlay_tools")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="overlay-tools command line utility.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be more verbose.")
    parser.add_argument("--version", action="version", version=__version__)

    subparsers = parser.add_subparsers(dest="command", required=True)

    compose_parser = subparsers.add_parser(
        "compose", help="Compose overlays described by a JSON layout over a base image"
    )
    compose_parser.add_argument("base_file", help="Base image file")
    compose_parser.add_argument("layout_file", help="JSON layout file")
    compose_parser.add_argument("output_file", help="Output image file")

    plan_parser = subparsers.add_parser(
        "plan", help="Print resolved placements of a JSON layout without rendering"
    )
    plan_parser.add_argument("base_file", help="Base image file")
    plan_parser.add_argument("layout_file", help="JSON layout file")

    mask_parser = subparsers.add_parser("mask", help="Write a single band mask image")
    mask_parser.add_argument("shape", help="circle or rounded_rectangle")
    mask_parser.add_argument("width", type=int)
    mask_parser.add_argument("height", type=int)
    mask_parser.add_argument("output_file", help="Output image file")
    mask_parser.add_argument("--radius", type=int, default=None, help="Corner radius.")

    circle_parser = subparsers.add_parser("circle", help="Apply a circular mask")
    circle_parser.add_argument("input_file", help="Input image file")
    circle_parser.add_argument("output_file", help="Output image file")

    rounded_parser = subparsers.add_parser("rounded", help="Apply rounded corners")
    rounded_parser.add_argument("input_file", help="Input image file")
    rounded_parser.add_argument("output_file", help="Output image file")
    rounded_parser.add_argument(
        "--radius", type=int, default=DEFAULT_ROUNDED_RADIUS, help="Corner radius."
    )

    return parser.parse_args(argv)


def load_layout(layout_file: str) -> List[Any]:
    """
    Read a JSON layout.

    The layout is a list of entries. Each is either an image path, centred
    on the base image, or an object with an ``image`` path and any of the
    overlay options (``x``, ``y``, ``dx``, ``dy``, ``x_baseline``,
    ``y_baseline``, ``blend_mode``). Relative paths are resolved against the
    layout file's directory.
    """
    with open(layout_file, "r") as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError("Layout must be a JSON list, got %s" % type(entries).__name__)

    root = os.path.dirname(os.path.abspath(layout_file))
    composition: List[Any] = []
    for entry in entries:
        if isinstance(entry, str):
            composition.append(image.open(os.path.join(root, entry)))
            continue
        options: Dict[str, Any] = dict(entry)
        path = os.path.join(root, options.pop("image"))
        composition.append((image.open(path), options))
    return composition


def main(argv: Optional[List[str]] = None) -> Optional[int]:
    args = parse_args(argv)

    logging.basicConfig(level=logging.WARNING)
    if args.verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    try:
        if args.command == "compose":
            base = image.open(args.base_file)
            composed = image.compose(base, load_layout(args.layout_file))
            image.write(composed, args.output_file)

        elif args.command == "plan":
            base = image.open(args.base_file)
            layers = image.composition_layers(base, load_layout(args.layout_file))
            for index, (_, x, y, blend_mode) in enumerate(layers):
                print("%d\t%d\t%d\t%s" % (index, x, y, blend_mode.value))

        elif args.command == "mask":
            params = {} if args.radius is None else {"radius": args.radius}
            alpha = image.mask(args.shape, args.width, args.height, **params)
            logger.debug("Mask coverage: %.3f" % coverage(get_array(alpha)))
            image.write(alpha, args.output_file)

        elif args.command == "circle":
            image.write(image.circle(image.open(args.input_file)), args.output_file)

        elif args.command == "rounded":
            rounded = image.rounded(image.open(args.input_file), radius=args.radius)
            image.write(rounded, args.output_file)

    except OverlayError as e:
        logger.error(str(e))
        return 1

    return None


if __name__ == "__main__":
    main()
