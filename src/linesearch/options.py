"""Search flags shared by the matcher, the driver and the CLI."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from .ranges import LineRange


class SearchOptions(BaseModel):
    """Independent search flags. Any combination is valid.

    The matcher only looks at ``ignore_case`` and ``isolate_word``; the rest
    drive line selection and output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_case: bool = False
    isolate_word: bool = False
    show_lines: bool = False
    remove_duplicate_lines: bool = False
    line_range: LineRange | None = None
    save_path: Path | None = None

    @property
    def range_filter(self) -> bool:
        """Whether lines outside ``line_range`` are skipped."""
        return self.line_range is not None

    @property
    def save_to_file(self) -> bool:
        """Whether results go to ``save_path`` instead of stdout."""
        return self.save_path is not None
