"""Count whole-word occurrences of a term per line, using the library API directly."""

from pathlib import Path
from typing import Annotated

import typer

from linesearch import LineRange, SearchOptions, search_file, validate_term
from linesearch.output import print_plain
from linesearch.utils import fatal

app = typer.Typer(add_completion=False)


@app.command()
def main(
    term: Annotated[str, typer.Argument(help="Word to count.")],
    path: Annotated[Path, typer.Argument(help="File to search.")],
    line_range: Annotated[str | None, typer.Option("--range", "-r", help="Only count lines in a range.")] = None,
) -> None:
    """Print a per-line count of whole-word matches."""
    encoded = validate_term(term)
    if encoded.is_err():
        fatal(f"bad term: {encoded.error}")

    options = SearchOptions(isolate_word=True, ignore_case=True)
    if line_range is not None:
        parsed = LineRange.from_text(line_range)
        if parsed.is_err():
            fatal(f"bad range: {line_range}")
        options = options.model_copy(update={"line_range": parsed.unwrap()})

    counts: dict[int, int] = {}
    for match in search_file(path, encoded.unwrap(), options):
        counts[match.line_number] = counts.get(match.line_number, 0) + 1

    for line_number, count in counts.items():
        print_plain(f"{line_number}: {count}")


if __name__ == "__main__":
    app()
