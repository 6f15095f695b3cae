"""Tests for the example scripts."""

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest
from typer.testing import CliRunner

EXAMPLES_DIR = Path(__file__).parents[2] / "examples"

runner = CliRunner()


def _load_example(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, EXAMPLES_DIR / f"{name}.py")
    assert spec is not None
    assert spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(scope="module")
def word_count() -> ModuleType:
    """The word_count example module."""
    return _load_example("word_count")


@pytest.fixture()
def input_file(tmp_path: Path) -> Path:
    """A small input file."""
    path = tmp_path / "input.txt"
    path.write_bytes(b"cat Cat catalog\nno match\nthe cat\n")
    return path


class TestWordCount:
    """Tests for examples/word_count.py."""

    def test_counts_per_line(self, word_count: ModuleType, input_file: Path) -> None:
        """Whole-word, case-insensitive counts per line."""
        result = runner.invoke(word_count.app, ["cat", str(input_file)])
        assert result.exit_code == 0
        assert result.stdout == "1: 2\n3: 1\n"

    def test_range(self, word_count: ModuleType, input_file: Path) -> None:
        """--range limits the counted lines."""
        result = runner.invoke(word_count.app, ["cat", str(input_file), "--range", "2-3"])
        assert result.stdout == "3: 1\n"

    @pytest.mark.parametrize("range_text", ["abc", "1-x", "99999999999"])
    def test_invalid_range(self, word_count: ModuleType, input_file: Path, range_text: str) -> None:
        """A malformed range exits with an error message instead of a traceback."""
        result = runner.invoke(word_count.app, ["cat", str(input_file), "--range", range_text])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert f"bad range: {range_text}" in result.stderr
