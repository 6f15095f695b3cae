"""Line-processing driver: range filtering and match enumeration over a whole input."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from mm_result import Result
from pydantic import BaseModel, ConfigDict

from .matcher import iter_matches
from .options import SearchOptions

DEFAULT_MAX_LINE_LENGTH = 2048
DEFAULT_MAX_TERM_LENGTH = 128


class LineTooLongError(ValueError):
    """Raised when an input line exceeds the line buffer capacity."""

    def __init__(self, line_number: int, length: int, max_length: int) -> None:
        super().__init__(f"line {line_number} is {length} bytes long, maximum is {max_length}")
        self.line_number = line_number
        self.length = length
        self.max_length = max_length


class Match(BaseModel):
    """One reported occurrence of the term."""

    model_config = ConfigDict(frozen=True)

    line_number: int
    position: int
    line: bytes

    @property
    def column(self) -> int:
        """1-based position, as shown to the user."""
        return self.position + 1

    @property
    def text(self) -> str:
        """Line content without its terminator, decoded for display."""
        return self.line.rstrip(b"\r\n").decode(errors="replace")


def validate_term(term: str, max_length: int = DEFAULT_MAX_TERM_LENGTH) -> Result[bytes]:
    """Encode the search term, rejecting empty or oversized terms.

    Error codes: ``empty_term``, ``term_too_long`` (when the encoded term is ``max_length`` bytes or more).
    """
    encoded = term.encode()
    if not encoded:
        return Result.err("empty_term")
    if len(encoded) >= max_length:
        return Result.err("term_too_long", context={"length": len(encoded), "max_length": max_length})
    return Result.ok(encoded)


def search_lines(
    lines: Iterable[bytes], term: bytes, options: SearchOptions, *, max_line_length: int = DEFAULT_MAX_LINE_LENGTH
) -> Iterator[Match]:
    """Yield every reported match in ``lines``, numbering lines from 1.

    Lines outside ``options.line_range`` are skipped without being searched.

    Raises:
        LineTooLongError: A line (terminator included) is longer than ``max_line_length``.

    """
    line_range = options.line_range
    for line_number, line in enumerate(lines, start=1):
        if line_range is not None:
            if line_number > line_range.high:
                break
            if line_number not in line_range:
                continue
        if len(line) > max_line_length:
            raise LineTooLongError(line_number, len(line), max_line_length)
        for position in iter_matches(line, term, options):
            yield Match(line_number=line_number, position=position, line=line)


def search_file(
    path: Path, term: bytes, options: SearchOptions, *, max_line_length: int = DEFAULT_MAX_LINE_LENGTH
) -> Iterator[Match]:
    """Search a file line by line. ``OSError`` from opening or reading propagates."""
    with path.open("rb") as f:
        yield from search_lines(f, term, options, max_line_length=max_line_length)
