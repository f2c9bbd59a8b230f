"""Command-line front end for plugspec."""

from plugspec.cli.main import main, parse_args

__all__ = ["main", "parse_args"]
