"""Small CLI helpers."""

import sys
from typing import NoReturn

import typer

from .output import print_plain


def fatal(message: str, code: int = 1) -> NoReturn:
    """Print an error message to stderr and exit."""
    print_plain(f"Error: {message}", file=sys.stderr)
    raise typer.Exit(code)
