"""Tests for range expression parsing."""

import pydantic
import pytest

from linesearch.ranges import MAX_BOUND, LineRange, parse_bound, parse_range


class TestParseBound:
    """Tests for parse_bound."""

    @pytest.mark.parametrize(("text", "expected"), [("0", 0), ("7", 7), ("0042", 42), (str(MAX_BOUND), MAX_BOUND)])
    def test_valid(self, text: str, expected: int) -> None:
        """Digit strings convert to their value."""
        assert parse_bound(text).unwrap() == expected

    @pytest.mark.parametrize(
        ("text", "error"),
        [
            ("", "empty_bound"),
            ("12345678901", "bound_too_long"),
            ("abc", "not_a_number"),
            ("12a", "not_a_number"),
            ("+5", "not_a_number"),
            (" 5", "not_a_number"),
            ("٣", "not_a_number"),
            ("2147483648", "out_of_range"),
            ("9999999999", "out_of_range"),
        ],
    )
    def test_invalid(self, text: str, error: str) -> None:
        """Malformed bounds report a specific error code and the offending text."""
        result = parse_bound(text)
        assert result.is_err()
        assert result.error == error
        assert result.context == {"text": text}


class TestParseRange:
    """Tests for parse_range."""

    def test_low_high(self) -> None:
        """Both sides of the delimiter are parsed."""
        low, high = parse_range("50-75")
        assert (low.unwrap(), high.unwrap()) == (50, 75)

    def test_reversed_is_not_normalized(self) -> None:
        """Bounds come back in the order written."""
        low, high = parse_range("75-50")
        assert (low.unwrap(), high.unwrap()) == (75, 50)

    def test_single_number(self) -> None:
        """A bare number is used for both sides."""
        low, high = parse_range("42")
        assert (low.unwrap(), high.unwrap()) == (42, 42)

    @pytest.mark.parametrize("text", ["abc", "-5", "99999999999", "5-", "1-2-3", "", "1 - 2"])
    def test_failure_on_at_least_one_side(self, text: str) -> None:
        """Malformed expressions fail on at least one side."""
        low, high = parse_range(text)
        assert low.is_err() or high.is_err()

    def test_sides_fail_independently(self) -> None:
        """A bad low side doesn't affect the high side."""
        low, high = parse_range("-5")
        assert low.error == "empty_bound"
        assert high.unwrap() == 5

    def test_second_delimiter_belongs_to_high_side(self) -> None:
        """Only the first delimiter splits; the rest stays in the high side."""
        low, high = parse_range("1-2-3")
        assert low.unwrap() == 1
        assert high.error == "not_a_number"
        assert high.context == {"text": "2-3"}


class TestLineRange:
    """Tests for LineRange."""

    def test_from_text(self) -> None:
        """Valid text builds a range."""
        line_range = LineRange.from_text("50-75").unwrap()
        assert (line_range.low, line_range.high) == (50, 75)

    def test_from_text_swaps_reversed_bounds(self) -> None:
        """Reversed bounds are swapped."""
        line_range = LineRange.from_text("75-50").unwrap()
        assert (line_range.low, line_range.high) == (50, 75)

    def test_from_text_single_line(self) -> None:
        """A bare number is a one-line range."""
        line_range = LineRange.from_text("42").unwrap()
        assert 42 in line_range
        assert 41 not in line_range
        assert 43 not in line_range

    def test_from_text_invalid(self) -> None:
        """Any failed side makes the whole range invalid, keeping per-side errors."""
        result = LineRange.from_text("abc-7")
        assert result.is_err()
        assert result.error == "invalid_range"
        assert result.context == {"text": "abc-7", "low": "not_a_number", "high": None}

    def test_membership_is_inclusive(self) -> None:
        """Both bounds are part of the range."""
        line_range = LineRange(low=2, high=4)
        assert [n for n in range(7) if n in line_range] == [2, 3, 4]

    def test_non_int_not_contained(self) -> None:
        """Non-integers are never members."""
        assert "3" not in LineRange(low=1, high=5)

    def test_reversed_construction_rejected(self) -> None:
        """Direct construction requires low <= high."""
        with pytest.raises(pydantic.ValidationError):
            LineRange(low=5, high=1)

    def test_negative_rejected(self) -> None:
        """Bounds are non-negative."""
        with pytest.raises(pydantic.ValidationError):
            LineRange(low=-1, high=1)

    def test_str(self) -> None:
        """Renders as low-high."""
        assert str(LineRange(low=3, high=9)) == "3-9"

    def test_immutable(self) -> None:
        """Ranges are frozen."""
        line_range = LineRange(low=1, high=2)
        with pytest.raises(pydantic.ValidationError):
            line_range.low = 0  # type: ignore[misc]
