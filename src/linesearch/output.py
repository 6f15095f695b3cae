"""Plain and syntax-highlighted print helpers."""

# ruff: noqa: T201 -- output layer

import sys
from typing import Any, TextIO

import tomlkit
from rich.console import Console
from rich.syntax import Syntax


def print_plain(*messages: object, file: TextIO | None = None) -> None:
    """Print messages as-is, without Rich markup or highlighting."""
    print(*messages, file=file or sys.stdout)


def print_toml(data: str | dict[str, Any], *, line_numbers: bool = False, theme: str = "monokai") -> None:
    """Print TOML with syntax highlighting. Dicts are serialized first."""
    text = data if isinstance(data, str) else tomlkit.dumps(data)
    Console().print(Syntax(text, "toml", theme=theme, line_numbers=line_numbers))
