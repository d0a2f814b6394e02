#!/usr/bin/env python3
"""Intersect a single ray with a sphere from the command line.

Usage:
    python examples/intersect_sphere.py [options]

Options:
    --origin X Y Z      Ray origin (default: 0 0 -5)
    --direction X Y Z   Ray direction, any non-zero length (default: 0 0 1)
    --center X Y Z      Sphere center (default: 0 0 0)
    --radius R          Sphere radius (default: 1)
    --verbose           Enable debug logging

Example:
    python examples/intersect_sphere.py --origin 0 0 0 --direction 0 0 1
"""

from __future__ import annotations

import argparse
import logging
import sys

from raysphere import InvalidDirectionError, Ray, Sphere, Vector3, hit_sphere
from raysphere.logging_config import setup_logging


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Intersect a ray with a sphere.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--origin", type=float, nargs=3, default=[0.0, 0.0, -5.0])
    parser.add_argument("--direction", type=float, nargs=3, default=[0.0, 0.0, 1.0])
    parser.add_argument("--center", type=float, nargs=3, default=[0.0, 0.0, 0.0])
    parser.add_argument("--radius", type=float, default=1.0)
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        ray = Ray(Vector3(*args.origin), Vector3(*args.direction))
        sphere = Sphere(Vector3(*args.center), args.radius)
        record = hit_sphere(ray, sphere)
    except InvalidDirectionError as e:
        print(f"Invalid ray: {e}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if record is None:
        print("miss")
        return 0

    print(f"t = {record.t}")
    print(f"point = {tuple(record.point)}")
    print(f"normal = {tuple(record.normal)}")
    print(f"front_face = {record.front_face}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
