"""Command line entry point: build a block, drive it along a timeline, print its state."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from typing import Sequence

from .integrator import Integrator
from .logging_config import setup_logging
from .sim_config import SimConfig


logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--density", type=float, default=None, help="Mass density of the block.")
    parser.add_argument(
        "--lengths", type=float, nargs=3, metavar=("LX", "LY", "LZ"), default=None,
        help="Edge lengths of the block along x, y and z.",
    )
    parser.add_argument(
        "--position", type=float, nargs=3, metavar=("PX", "PY", "PZ"), default=None,
        help="Initial center of mass position.",
    )
    parser.add_argument(
        "--velocity", type=float, nargs=3, metavar=("VX", "VY", "VZ"), default=None,
        help="Initial center of mass velocity.",
    )
    parser.add_argument("--t-min", type=float, default=None, help="Start time of the timeline.")
    parser.add_argument("--t-max", type=float, default=None, help="End time of the timeline (excluded).")
    parser.add_argument("--nstep", type=int, default=None, help="Number of time steps.")
    parser.add_argument(
        "--select", default=None,
        help="Channels to print, e.g. '_' (all), 'p', 'v', 'px vy' (case-insensitive).",
    )
    parser.add_argument("--decimal", type=int, default=None, help="Number of printed decimals.")
    parser.add_argument(
        "--show-time", action="store_true", help="Prefix each line with the time it describes."
    )
    parser.add_argument("--log-level", choices=_LOG_LEVELS, default="WARNING")

    args = parser.parse_args(argv)
    t_min = SimConfig.t_min if args.t_min is None else args.t_min
    t_max = SimConfig.t_max if args.t_max is None else args.t_max
    if args.nstep is not None and args.nstep < 1 and t_min < t_max:
        parser.error("--nstep must be at least 1")
    if args.decimal is not None and args.decimal < 0:
        parser.error("--decimal must be non-negative")
    return args


def config_from_args(args: argparse.Namespace) -> SimConfig:
    overrides = {
        "mass_density": args.density,
        "lengths": tuple(args.lengths) if args.lengths is not None else None,
        "initial_position": tuple(args.position) if args.position is not None else None,
        "initial_velocity": tuple(args.velocity) if args.velocity is not None else None,
        "t_min": args.t_min,
        "t_max": args.t_max,
        "nstep": args.nstep,
        "selector": args.select,
        "decimal": args.decimal,
    }
    cfg = replace(SimConfig(), **{k: v for k, v in overrides.items() if v is not None})
    if args.show_time:
        cfg.show_time = True
    return cfg


def run(cfg: SimConfig) -> int:
    """Run one simulation and print one line per timeline sample; return the line count."""
    block = cfg.build_block()
    timeline = cfg.build_timeline()
    logger.info("block %r, time step %s", block, timeline.time_step)

    integrator = Integrator(block)
    formatter = block.format(cfg.selector, cfg.decimal)
    lines = 0
    for time, _ in integrator.run(timeline):
        if cfg.show_time:
            print(f"{time:.{cfg.decimal}f}{formatter}")
        else:
            print(formatter)
        lines += 1

    if lines == 0:
        logger.warning("empty timeline [%s, %s), nothing printed", cfg.t_min, cfg.t_max)
    return lines


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    setup_logging(getattr(logging, args.log_level))
    run(config_from_args(args))


if __name__ == "__main__":  # pragma: no cover - CLI entry
    main()
