"""Command-line interface for plugspec."""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console

from plugspec.cli.display import render_notifications, render_plan
from plugspec.config import load_options
from plugspec.errors import ConfigError
from plugspec.logger import setup_logging
from plugspec.runtime import resolve

LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR")
logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="plugspec",
        description=(
            "Resolve the component spec and show what would be installed, "
            "kept, or cleaned. Nothing on disk is changed."
        ),
    )
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        help="Options file (default: ~/.config/plugspec/options.toml).",
    )
    parser.add_argument(
        "-i",
        "--import",
        dest="imports",
        action="append",
        default=[],
        metavar="MODULE",
        help="Also import spec modules from MODULE. May be repeated.",
    )
    parser.add_argument(
        "--level",
        choices=LEVEL_CHOICES,
        default="WARNING",
        help="Minimum notification level to print (default: WARNING).",
    )
    parser.add_argument(
        "--log-level",
        choices=LEVEL_CHOICES,
        default="INFO",
        help="Log level for --log-file (default: INFO).",
    )
    parser.add_argument("--log-file", metavar="PATH", help="Write logs to PATH.")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point; returns 1 when error notifications were recorded."""
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    console = Console()

    try:
        options = load_options(args.config)
    except ConfigError as exc:
        console.print(f"Error: {exc}", style="bold red", markup=False)
        return 2

    spec = [options.spec, [{"import": modname} for modname in args.imports]]
    resolution = resolve(options, spec)

    render_plan(resolution, console)
    render_notifications(
        resolution.registry.report(getattr(logging, args.level)), console
    )
    return 1 if resolution.registry.has_errors() else 0


def run() -> None:
    sys.exit(main())
