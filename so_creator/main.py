"""Command-line entry point for so-creator."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from . import __version__
from .codegen.cli_integration import (
    CLIError,
    build_resolver,
    create_generate_subparser,
    create_languages_subparser,
)
from .codegen.core.config import PRESETS, ConfigError, load_config
from .codegen.interactive import ClassBuilderInteractiveHandler
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="so-creator",
        description="Generate C# class declarations from class specs",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log records to this file")

    subparsers = parser.add_subparsers(dest="command")
    create_generate_subparser(subparsers)
    create_languages_subparser(subparsers)

    interactive = subparsers.add_parser(
        "interactive", help="Build a class step by step and save it"
    )
    interactive.add_argument(
        "--types",
        metavar="CATALOG",
        action="append",
        default=[],
        help="Type catalog file or URL (repeatable)",
    )
    interactive.add_argument("--config", help="Configuration file path (JSON)")
    interactive.add_argument(
        "--preset", choices=sorted(PRESETS), help="Named configuration preset"
    )
    interactive.set_defaults(func=_handle_interactive_command)

    return parser


def _handle_interactive_command(args: argparse.Namespace) -> int:
    console = Console()
    try:
        resolver = build_resolver(args.types)
        config = load_config("csharp", config_file=args.config, preset=args.preset)
    except (CLIError, ConfigError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    handler = ClassBuilderInteractiveHandler(resolver, config, console)
    return 0 if handler.run_interactive() else 1


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return an exit code."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    logger.debug("Running command: %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
