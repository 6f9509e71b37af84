"""Command line entry point for schema-interfaces."""

import argparse
import sys

from . import __version__
from .codegen.cli_integration import (
    create_generate_subparser,
    create_manifest_subparser,
    create_options_subparser,
)
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="schema-interfaces",
        description="Generate dependency-free TypeScript declarations from a Prisma DMMF document",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    create_generate_subparser(subparsers)
    create_options_subparser(subparsers)
    create_manifest_subparser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, configure logging and run the selected command.

    Returns:
        Process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    logger.debug("Running command: %s", args.command)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
