"""TOML-based configuration with Pydantic validation."""

import tomllib
from pathlib import Path
from typing import Any, NoReturn, Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .output import print_toml
from .search import DEFAULT_MAX_LINE_LENGTH, DEFAULT_MAX_TERM_LENGTH
from .utils import fatal

DEFAULT_CONFIG_PATH = Path("~/.config/linesearch/config.toml")


class SearchConfig(BaseModel):
    """Buffer limits and default flags, read from a TOML file."""

    model_config = ConfigDict(extra="forbid")

    max_line_length: int = Field(default=DEFAULT_MAX_LINE_LENGTH, gt=0)
    max_term_length: int = Field(default=DEFAULT_MAX_TERM_LENGTH, gt=1)
    ignore_case: bool = False
    isolate_word: bool = False
    show_lines: bool = False

    @classmethod
    def load(cls, path: Path) -> Result[Self]:
        """Load and validate config from a TOML file."""
        try:
            with path.expanduser().open("rb") as f:
                data = tomllib.load(f)
            return Result.ok(cls(**data))
        except ValidationError as e:
            return Result.err(("validation_error", e), context={"errors": e.errors()})
        except Exception as e:
            return Result.err(e)

    @staticmethod
    def describe_error(result: Result[Any]) -> str:
        """Render a failed ``load`` result as a user-facing message."""
        # ValidationError: one line per field error
        if result.error == "validation_error" and result.context:
            lines = ["config validation errors"]
            for e in result.context["errors"]:
                loc = e["loc"]
                field = ".".join(str(part) for part in loc) if loc else ""
                lines.append(f"  {field}: {e['msg']}")
            return "\n".join(lines)
        # Other errors (file not found, TOML parse error, etc.)
        return f"can't load config: {result.error}"

    @classmethod
    def load_or_exit(cls, path: Path) -> Self:
        """Load and validate config. Print error and exit(1) on failure."""
        result = cls.load(path)
        if result.is_ok():
            return result.unwrap()
        fatal(cls.describe_error(result))

    @classmethod
    def resolve(cls, path: Path | None) -> Result[Self]:
        """Load ``path`` if given, else the default location if it exists, else built-in defaults."""
        if path is not None:
            return cls.load(path)
        if DEFAULT_CONFIG_PATH.expanduser().is_file():
            return cls.load(DEFAULT_CONFIG_PATH)
        return Result.ok(cls())

    def print_and_exit(self) -> NoReturn:
        """Print config as formatted TOML and exit(0)."""
        print_toml(self.model_dump())
        raise SystemExit(0)
