from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from curvekit.core import BezierPath, CurvekitError, OutOfRange, ease, easing_registry
from curvekit.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def load_json(path: str | Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def _write_json(payload: dict[str, Any], out_path: Optional[str]) -> None:
    if out_path is None:
        json.dump(payload, sys.stdout, indent=2)
        sys.stdout.write("\n")
        return
    path = Path(out_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
        handle.write("\n")
    logger.info("wrote %s", path)


def _cmd_new(args: argparse.Namespace) -> None:
    path = BezierPath.create(tuple(args.center), auto_set_control_points=args.auto)
    _write_json(path.to_dict(), args.out)


def _cmd_resample(args: argparse.Namespace) -> None:
    path = BezierPath.from_dict(load_json(args.path))
    points = path.calculate_evenly_spaced_points(args.spacing, args.resolution)
    logger.info("resampled %d segment(s) into %d points", path.segment_count, len(points))
    _write_json({"spacing": args.spacing, "points": [list(p) for p in points]}, args.out)


def _cmd_ease(args: argparse.Namespace) -> None:
    policy = OutOfRange.STRICT if args.strict else OutOfRange.CLAMP
    steps = max(1, args.steps)
    for i in range(steps + 1):
        t = i / steps
        print(f"{t:.4f} {ease(args.name, t, policy=policy):.6f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="curvekit", description="Bezier path tools")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    subparsers = parser.add_subparsers(dest="command", required=True)

    new_parser = subparsers.add_parser("new", help="Write a new one-segment path")
    new_parser.add_argument("--center", nargs=2, type=float, default=[0.0, 0.0], metavar=("X", "Y"))
    new_parser.add_argument("--auto", action="store_true", help="auto-set control points")
    new_parser.add_argument("--out", dest="out")
    new_parser.set_defaults(func=_cmd_new)

    resample_parser = subparsers.add_parser("resample", help="Evenly resample a path file")
    resample_parser.add_argument("path")
    resample_parser.add_argument("--spacing", type=float, required=True)
    resample_parser.add_argument("--resolution", type=float, default=1.0)
    resample_parser.add_argument("--out", dest="out")
    resample_parser.set_defaults(func=_cmd_resample)

    ease_parser = subparsers.add_parser("ease", help="Tabulate an easing function")
    ease_parser.add_argument("name", choices=sorted(easing_registry))
    ease_parser.add_argument("--steps", type=int, default=10)
    ease_parser.add_argument("--strict", action="store_true")
    ease_parser.set_defaults(func=_cmd_ease)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    try:
        args.func(args)
    except (CurvekitError, ValueError, KeyError, OSError) as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
