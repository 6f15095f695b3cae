"""Command-line interface: ``linesearch [OPTION]... TERM FILE``."""

import contextlib
import importlib.metadata
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Annotated, BinaryIO

import typer

from .config import SearchConfig
from .options import SearchOptions
from .output import print_plain
from .ranges import LineRange
from .report import MatchReport
from .search import LineTooLongError, search_lines, validate_term

PACKAGE_NAME = "linesearch"

USAGE = "usage: linesearch [OPTION]... TERM FILE"


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback for a Typer CLI app."""

    def version_callback(value: bool) -> None:
        """Print the version and exit when --version is passed."""
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


def _flag_once(count: int, flag: str, errors: MatchReport) -> bool:
    """Turn a counted flag into a bool, rejecting repeats."""
    if count > 1:
        errors.print_error_and_exit("repeated_flag", f"you can only employ a flag once ({flag})")
    return count == 1


def _value_once[T](values: list[T] | None, flag: str, errors: MatchReport) -> T | None:
    """Return the single value of an option, rejecting repeats."""
    if not values:
        return None
    if len(values) > 1:
        errors.print_error_and_exit("repeated_flag", f"you can only employ a flag once ({flag})")
    return values[0]


def _print_status(term: str, file: Path, options: SearchOptions) -> None:
    def status(message: str) -> None:
        print_plain(message, file=sys.stderr)

    status(f'Searching for "{term}" in {file}')
    if options.isolate_word:
        status("Isolating matches...")
    if options.ignore_case:
        status("Ignoring cases...")
    if options.show_lines:
        status("Including line numbers/positions...")
    if options.remove_duplicate_lines:
        status("Removing duplicate lines...")
    if options.line_range is not None:
        status(f"Showing results in a range: {options.line_range}...")
    if options.save_path is not None:
        status(f"Saving results to {options.save_path}...")
    status("")


_TERM_ERRORS = {
    "empty_term": "search term is empty",
    "term_too_long": "search term is too long",
}

app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def main(  # noqa: PLR0913, PLR0917 -- one parameter per CLI option
    term: Annotated[str | None, typer.Argument(help="Literal text to search for.", show_default=False)] = None,
    file: Annotated[Path | None, typer.Argument(help="File to search.", show_default=False)] = None,
    ignore_case: Annotated[int, typer.Option("--ignore-case", "-i", count=True, help="Search is not case sensitive.")] = 0,
    isolate: Annotated[
        int, typer.Option("--isolate", "-I", count=True, help="Only match whole words, not parts of compound words.")
    ] = 0,
    lines: Annotated[
        int, typer.Option("--lines", "-l", count=True, help="Show line numbers and the starting position of each match.")
    ] = 0,
    line_range: Annotated[
        list[str] | None,
        typer.Option("--range", "-r", metavar="NUM-NUM", help="Only search lines in a range (e.g. 50-75, or 42).", show_default=False),
    ] = None,
    remove_dupes: Annotated[
        int, typer.Option("--remove-dupes", "-R", count=True, help="Show a line once, however many matches it has.")
    ] = 0,
    save: Annotated[
        list[Path] | None, typer.Option("--save", "-s", metavar="FILE", help="Save results to a file.", show_default=False)
    ] = None,
    config: Annotated[
        list[Path] | None, typer.Option("--config", "-c", metavar="FILE", help="Path to a TOML config file.", show_default=False)
    ] = None,
    json_mode: Annotated[int, typer.Option("--json", count=True, help="Output results as a JSON envelope.")] = 0,
    quiet: Annotated[int, typer.Option("--quiet", "-q", count=True, help="Don't print status and summary to stderr.")] = 0,
    print_config: Annotated[int, typer.Option("--print-config", count=True, help="Print the effective config and exit.")] = 0,
    _version: Annotated[
        bool | None,
        typer.Option(
            "--version", "-V", callback=create_version_callback(PACKAGE_NAME), is_eager=True, help="Show version and exit."
        ),
    ] = None,
) -> None:
    """Search a file line by line for a literal term.

    EG: linesearch Port /etc/ssh/sshd_config | grep 22
    """
    # Errors before the report exists still honour --json
    errors = MatchReport(json_mode=json_mode > 0)
    json_output = _flag_once(json_mode, "--json", errors)
    silent = _flag_once(quiet, "--quiet", errors)

    loaded = SearchConfig.resolve(_value_once(config, "--config", errors))
    if loaded.is_err():
        errors.print_error_and_exit("invalid_config", SearchConfig.describe_error(loaded))
    cfg = loaded.unwrap()
    if _flag_once(print_config, "--print-config", errors):
        cfg.print_and_exit()

    options = SearchOptions(
        ignore_case=_flag_once(ignore_case, "--ignore-case", errors) or cfg.ignore_case,
        isolate_word=_flag_once(isolate, "--isolate", errors) or cfg.isolate_word,
        show_lines=_flag_once(lines, "--lines", errors) or cfg.show_lines,
        remove_duplicate_lines=_flag_once(remove_dupes, "--remove-dupes", errors),
        save_path=_value_once(save, "--save", errors),
    )
    range_text = _value_once(line_range, "--range", errors)

    if term is None:
        print_plain(USAGE, file=sys.stderr)
        print_plain("Try 'linesearch --help' for more information", file=sys.stderr)
        raise typer.Exit(1)
    if file is None:
        errors.print_error_and_exit("missing_file", "missing search file path")

    encoded = validate_term(term, cfg.max_term_length)
    if encoded.is_err():
        code = encoded.error or "invalid_term"
        errors.print_error_and_exit(code, _TERM_ERRORS.get(code, "invalid term"))

    if range_text is not None:
        parsed = LineRange.from_text(range_text)
        if parsed.is_err():
            errors.print_error_and_exit("invalid_range", "invalid range format. Please use NUM-NUM or a non-negative number")
        options = options.model_copy(update={"line_range": parsed.unwrap()})

    with contextlib.ExitStack() as stack:
        try:
            source = stack.enter_context(file.open("rb"))
        except OSError:
            errors.print_error_and_exit("open_failed", f"could not open search file: {file}")
        sink: BinaryIO | None = None
        if options.save_path is not None:
            try:
                sink = stack.enter_context(options.save_path.open("wb"))
            except OSError:
                errors.print_error_and_exit("save_failed", f"could not open save file: {options.save_path}")

        report = MatchReport(json_mode=json_output, show_lines=options.show_lines, sink=sink)
        if not silent:
            _print_status(term, file, options)

        try:
            for match in search_lines(source, encoded.unwrap(), options, max_line_length=cfg.max_line_length):
                report.add(match)
        except LineTooLongError as e:
            report.print_error_and_exit("line_too_long", str(e))
        except OSError as e:
            report.print_error_and_exit("read_failed", f"could not read search file: {e}")
        report.finish(term)

    if not silent:
        destination = options.save_path if options.save_path is not None else "stdout"
        print_plain(f"\n{report.count} results written to {destination}.", file=sys.stderr)


if __name__ == "__main__":
    app()
