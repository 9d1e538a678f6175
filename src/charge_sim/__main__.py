# MIT License (see LICENSE)
"""
Command-line driver.

Builds a charge system (from a JSON file or the built-in four-charge demo),
prints the charge listing and the force on every charge, and writes an image
of the configuration.

Usage:
    python -m charge_sim [system.json] [--image PATH | --no-image] [--log-level LEVEL]
"""
from __future__ import annotations
import argparse
import logging
import sys

from .errors import ChargeSystemError
from .io import load_system
from .system import ChargeSystem

logger = logging.getLogger("charge_sim")


def four_charge_demo() -> ChargeSystem:
    """Two pairs of opposite charges; total charge is exactly zero."""
    system = ChargeSystem(4)
    system.set_charge(0, 0.0, -1.0, 0.0, 2e-6)   # 2 uC at (0, -1, 0) m
    system.set_charge(1, 0.0, 2.0, 0.0, -2e-6)   # -2 uC at (0, 2, 0) m
    system.set_charge(2, 1.0, -1.0, 0.0, 1e-6)   # 1 uC at (1, -1, 0) m
    system.set_charge(3, 1.0, 1.0, 0.0, -1e-6)   # -1 uC at (1, 1, 0) m
    return system


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="charge_sim",
        description="Coulomb forces and fields for a static set of point charges.",
    )
    parser.add_argument("system", nargs="?", default=None,
                        help="JSON charge system file (default: built-in four-charge demo)")
    parser.add_argument("--image", default="charge_distribution.png",
                        help="Output PNG path (default: %(default)s)")
    parser.add_argument("--no-image", action="store_true", help="Skip writing the image")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: %(default)s)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        system = load_system(args.system) if args.system else four_charge_demo()
        for line in system.report():
            print(line)
        for index, f in system.forces_report():
            print(f"Force on Charge {index}: ({f.x}, {f.y}, {f.z})")
    except (ChargeSystemError, ValueError, OSError) as e:
        logger.error(f"Cannot evaluate charge system: {e}")
        return 1

    if not args.no_image:
        if system.render(args.image):
            print(f"PNG file created: {args.image}")
        else:
            logger.warning(f"Image was not written to {args.image}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
