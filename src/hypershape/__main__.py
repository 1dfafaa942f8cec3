"""Command-line interface."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

from hypershape import config
from hypershape.logging_config import setup_logging
from hypershape.model.geometry_utils import deg2rad
from hypershape.model.io import IOManager
from hypershape.model.projection import ProjectionType
from hypershape.model.state import ViewerState
from hypershape.shapes import list_keys

logger = logging.getLogger(__name__)


def parse_param(text: str) -> tuple[str, Any]:
    """NAME=VALUE; VALUE is read as JSON when possible (numbers, null), else kept as a string."""
    name, sep, raw = text.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"Expected NAME=VALUE, got '{text}'")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return name, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hypershape",
        description="Generate a 4D shape, rotate it and project it to 3D.",
    )
    parser.add_argument("shape", nargs="?", help="Shape key (see --list)")
    parser.add_argument("--list", action="store_true", help="List the available shape keys and exit")
    parser.add_argument("--rotation", nargs=4, type=float, metavar=("X", "Y", "Z", "W"),
                        default=[0.0, 0.0, 0.0, 0.0], help="Rotation angles (radians unless --degrees)")
    parser.add_argument("--degrees", action="store_true", help="Read --rotation in degrees")
    parser.add_argument("--projection", choices=[t.value for t in ProjectionType],
                        default=ProjectionType.PERSPECTIVE.value)
    parser.add_argument("--distance", type=float, default=config.DEFAULT_PROJECTION_DISTANCE)
    parser.add_argument("--param", type=parse_param, action="append", default=[], metavar="NAME=VALUE",
                        help="Override a generator parameter (repeatable)")
    parser.add_argument("--output", "-o", type=str, help="Write the 4D geometry (.json, .h5)")
    parser.add_argument("--frame-output", type=str, help="Write the projected frame (.json)")
    parser.add_argument("--plot", action="store_true", help="Show a matplotlib preview")
    parser.add_argument("--log-level", default=config.LOG_LEVEL)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level)
    except ValueError as e:
        parser.error(str(e))
    logger.debug(f"Arguments: {vars(args)}")

    if args.list:
        for key in list_keys():
            print(key)
        return 0

    if not args.shape:
        parser.error("a shape key is required (see --list)")

    params = dict(args.param)
    state = ViewerState()
    try:
        state.load_shape(args.shape, **params)
    except KeyError:
        parser.error(f"unknown shape '{args.shape}' (see --list)")
    except (TypeError, ValueError) as e:
        parser.error(f"invalid parameters for '{args.shape}': {e}")

    angles = [deg2rad(a) for a in args.rotation] if args.degrees else args.rotation
    state.update_rotation(*angles)
    try:
        state.update_projection(args.projection, args.distance)
    except ValueError as e:
        parser.error(str(e))

    frame = state.frame()

    if args.output:
        IOManager.save_geometry(state.geometry, args.output, shape=state.shape_key, parameters=state.parameters)
    if args.frame_output:
        IOManager.save_frame(frame, args.frame_output, shape=state.shape_key)
    if not (args.output or args.frame_output):
        print(
            f"{state.shape_key}: {state.geometry.vertex_count} vertices, "
            f"{len(state.geometry.edges)} edges, {len(state.geometry.faces)} faces"
        )

    if args.plot:
        from hypershape.preview import plot_frame
        plot_frame(frame, title=state.shape_key)

    return 0


if __name__ == "__main__":
    sys.exit(main())
