"""Entry point for python -m pomogauge."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .errors import ConfigError, TerminalError
from .scheduler import TimerSession
from .settings import Settings
from .ui import run_ui

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="pomogauge",
        description="Terminal Pomodoro timer drawn as a full-screen gauge",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  s    Start a new set (restarts from the first work cycle)
  p    Pause/Resume
  q    Quit

Examples:
  pomogauge                   # Default settings (25/5/20, 4 cycles)
  pomogauge --work 50         # 50-minute work intervals
  pomogauge -c 2 --dark-mode  # Long break after every 2nd work interval
""",
    )

    parser.add_argument(
        "-w",
        "--work",
        type=int,
        default=25,
        metavar="MINS",
        help="Work interval in minutes (default: 25)",
    )
    parser.add_argument(
        "-s",
        "--short",
        type=int,
        default=5,
        metavar="MINS",
        help="Short break in minutes (default: 5)",
    )
    parser.add_argument(
        "-l",
        "--long",
        type=int,
        default=20,
        metavar="MINS",
        help="Long break in minutes (default: 20)",
    )
    parser.add_argument(
        "-c",
        "--cycles",
        type=int,
        default=4,
        metavar="N",
        help="Work intervals per set, the last one followed by a long break (default: 4)",
    )
    parser.add_argument(
        "--dark-mode",
        action="store_true",
        help="Draw the gauge on a black background",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        metavar="PATH",
        help="Append log messages to this file",
    )

    return parser


def setup_logging(log_file: Optional[Path]) -> None:
    """Configure logging; the terminal is owned by the UI so only files are written."""
    if log_file is None:
        handlers: list[logging.Handler] = [logging.NullHandler()]
    else:
        handlers = [logging.FileHandler(log_file, encoding="utf-8")]
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        handlers=handlers,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_minutes(
            work=args.work,
            short_break=args.short,
            long_break=args.long,
            cycles=args.cycles,
            dark_mode=args.dark_mode,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    try:
        setup_logging(args.log_file)
    except OSError as exc:
        parser.error(f"cannot open log file: {exc}")
    logger.info("Starting with %s", settings)

    session = TimerSession(settings)

    try:
        return run_ui(session)
    except KeyboardInterrupt:
        return 0
    except TerminalError as exc:
        logger.error("%s", exc)
        print(f"pomogauge: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
