import argparse
import logging
import sys
from pathlib import Path

from humanize_time.config import CONFIG_ENV_VAR, ConfigError, build_converter, load_config, resolve_config_path
from humanize_time.point import TimePoint
from humanize_time.utils.time import Timeval

logger = logging.getLogger("humanize_time")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="humanize-time",
        description="Describe an epoch timestamp relative to now",
    )
    parser.add_argument("seconds", type=int, help="Past instant, seconds since the epoch")
    parser.add_argument("--micros", type=int, default=0, help="Microseconds part of the past instant")
    parser.add_argument("--now", type=int, help="Reference instant in epoch seconds (default: current time)")
    parser.add_argument("--now-micros", type=int, default=0, help="Microseconds part of the reference instant")
    parser.add_argument(
        "--precise",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use second-level phrasing (default: from config)",
    )
    parser.add_argument(
        "--local",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Convert the reference instant to local time before comparing",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        help=f"Path to config file (env: {CONFIG_ENV_VAR}, default: ~/.config/humanize-time/config.toml)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not 0 <= args.micros < 1_000_000:
        parser.error("--micros must be in [0, 1000000)")
    if not 0 <= args.now_micros < 1_000_000:
        parser.error("--now-micros must be in [0, 1000000)")
    if args.now is None and args.now_micros:
        parser.error("--now-micros requires --now")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(resolve_config_path(args.config))
    except ConfigError as exc:
        print(f"humanize-time: {exc}", file=sys.stderr)
        return 2

    settings = config.settings
    precise = settings.precise if args.precise is None else args.precise
    convert_to_local = settings.convert_to_local if args.local is None else args.local

    point = TimePoint(
        Timeval(args.seconds, args.micros),
        recent=Timeval(args.now, args.now_micros) if args.now is not None else None,
        convert_to_local=convert_to_local,
        converter=build_converter(settings),
    )
    logger.debug("Rendering %r (precise=%s)", point, precise)
    print(point.precise_phrase() if precise else point.coarse_phrase())
    return 0


if __name__ == "__main__":
    sys.exit(main())
