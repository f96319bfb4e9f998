"""Command-line front end: ``gametime show|seconds|run``."""

import argparse
import logging
from collections.abc import Sequence

from gametime.clock import MAX_SCALE, MIN_SCALE, ClockConfig, GameClock
from gametime.errors import GameTimeError
from gametime.logging import configure_logging
from gametime.timedata import TimeData

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gametime", description="Convert and simulate in-game calendar time"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser(
        "show", help="Print the calendar form of an absolute time"
    )
    show.add_argument("absolute_time", type=float, help="Seconds since start")

    seconds = subparsers.add_parser(
        "seconds", help="Print the absolute time of a calendar value"
    )
    seconds.add_argument("second", type=float)
    seconds.add_argument("minute", type=int)
    seconds.add_argument("hour", type=int)
    seconds.add_argument("day", type=int)
    seconds.add_argument("month", type=int)
    seconds.add_argument("year", type=int)

    run = subparsers.add_parser("run", help="Drive a clock for a number of ticks")
    run.add_argument(
        "--scale",
        type=float,
        default=1.0,
        help=f"Time scale between {MIN_SCALE:g} and {MAX_SCALE:g} (default 1)",
    )
    run.add_argument("--ticks", type=int, default=60, help="Number of ticks")
    run.add_argument(
        "--dt", type=float, default=1 / 60, help="Real seconds per tick"
    )
    run.add_argument("--start", type=float, default=0.0, help="Initial absolute time")
    run.add_argument("--paused", action="store_true", help="Start paused")

    return parser.parse_args(argv)


def _run(args: argparse.Namespace) -> str:
    if args.command == "show":
        return str(TimeData.from_absolute_time(args.absolute_time))
    if args.command == "seconds":
        value = TimeData(
            args.second, args.minute, args.hour, args.day, args.month, args.year
        )
        return f"{value.absolute_time:.3f}"

    clock = GameClock(ClockConfig(scale=args.scale, paused=args.paused), args.start)
    for _ in range(args.ticks):
        clock.tick(args.dt)
    log.debug("Ran %d ticks, absolute time %g", args.ticks, clock.absolute_time)
    return str(clock.formatted_time)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(level=logging.DEBUG if args.debug else logging.INFO)
    try:
        output = _run(args)
    except (GameTimeError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    print(output)
    return 0
