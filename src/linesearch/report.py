"""Match reporting in plain (grep-like) or JSON mode."""

import json
import sys
from typing import BinaryIO, NoReturn

import typer

from .output import print_plain
from .search import Match


class MatchReport:
    """Writes matches to a sink as they are found.

    Plain mode writes each matching line as raw bytes, optionally prefixed with
    ``LINE <n>, POS <column>: ``. A line with several matches is written once per
    match. JSON mode collects matches and writes a single envelope
    (``{"ok": true, "data": ...}``) on ``finish``.
    """

    def __init__(self, *, json_mode: bool, show_lines: bool = False, sink: BinaryIO | None = None) -> None:
        """Initialize report.

        Args:
            json_mode: If True, output a JSON envelope; otherwise the matching lines.
            show_lines: Prefix plain output with line number and position.
            sink: Binary stream to write to. Defaults to stdout.

        """
        self.json_mode = json_mode
        self.show_lines = show_lines
        self.sink = sink
        self.matches: list[Match] = []
        self.count = 0

    def _write(self, data: bytes) -> None:
        typer.echo(data, nl=False, file=self.sink)  # type: ignore[arg-type]

    def add(self, match: Match) -> None:
        """Report a single match."""
        self.count += 1
        if self.json_mode:
            self.matches.append(match)
            return
        prefix = f"LINE {match.line_number}, POS {match.column}: ".encode() if self.show_lines else b""
        self._write(prefix + match.line)

    def finish(self, term: str) -> None:
        """Write the JSON envelope. Nothing to do in plain mode."""
        if not self.json_mode:
            return
        data = {
            "term": term,
            "count": self.count,
            "matches": [{"line": m.line_number, "position": m.column, "text": m.text} for m in self.matches],
        }
        self._write(json.dumps({"ok": True, "data": data}).encode() + b"\n")

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or plain format and exit with code 1."""
        if self.json_mode:
            print_plain(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print_plain(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(1)
