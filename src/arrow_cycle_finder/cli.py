"""Command-line interface for arrow cycle finder."""

import argparse
import logging
import sys
from typing import NoReturn

from arrow_cycle_finder.errors import ArgumentError, ParseError
from arrow_cycle_finder.solver.solve import main_solve

logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting on bad usage."""

    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> ArgumentParser:
    """Create and configure the argument parser."""
    parser = ArgumentParser(
        prog="arrow-cycle-finder",
        description="Find the longest cycle in a wrapping grid of arrows.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the input file (first line: WIDTH HEIGHT, then rows of ^ v < >)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level (default: INFO)",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for CLI."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except ArgumentError as exc:
        # Bad usage is reported but not treated as a failure.
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 0

    # Configure logging based on --log-level
    log_level = getattr(logging, args.log_level)
    configure_logging(log_level)

    try:
        main_solve(input_path=args.input_file)
    except ParseError as exc:
        logger.error("Malformed grid in %s: %s", args.input_file, exc)
        return 1
    except OSError as exc:
        logger.error("Cannot read %s: %s", args.input_file, exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
