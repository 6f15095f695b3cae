"""Line range parsing: ``"A-B"`` or a bare number into validated bounds."""

from typing import Self

from mm_result import Result
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Largest value a bound may take (32-bit signed int)
MAX_BOUND = 2**31 - 1

# A bound longer than this is rejected before conversion
MAX_BOUND_DIGITS = 10

RANGE_DELIMITER = "-"


def parse_bound(text: str) -> Result[int]:
    """Parse one side of a range expression.

    Only ASCII base-10 digits are accepted, no sign and no surrounding whitespace.

    Error codes: ``empty_bound``, ``bound_too_long``, ``not_a_number``, ``out_of_range``.
    The offending text is available as ``context["text"]``.
    """
    context = {"text": text}
    if not text:
        return Result.err("empty_bound", context=context)
    if len(text) > MAX_BOUND_DIGITS:
        return Result.err("bound_too_long", context=context)
    if not (text.isascii() and text.isdigit()):
        return Result.err("not_a_number", context=context)
    value = int(text)
    if value > MAX_BOUND:
        return Result.err("out_of_range", context=context)
    return Result.ok(value)


def parse_range(text: str) -> tuple[Result[int], Result[int]]:
    """Split a range expression on its first ``-`` and parse both sides independently.

    Without a delimiter both sides are parsed from the whole text, so ``"42"`` means line 42 only.
    The bounds are returned in the order written; ``"75-50"`` gives ``(75, 50)``.
    """
    low_text, delimiter, high_text = text.partition(RANGE_DELIMITER)
    if not delimiter:
        return parse_bound(text), parse_bound(text)
    return parse_bound(low_text), parse_bound(high_text)


class LineRange(BaseModel):
    """Inclusive range of 1-based line numbers."""

    model_config = ConfigDict(frozen=True)

    low: int = Field(ge=0)
    high: int = Field(ge=0)

    @model_validator(mode="after")
    def check_order(self) -> Self:
        if self.high < self.low:
            raise ValueError(f"range is reversed: {self.low}-{self.high}")
        return self

    @classmethod
    def from_text(cls, text: str) -> Result[Self]:
        """Build a range from user input, swapping reversed bounds.

        Fails with ``invalid_range`` if either side can't be parsed; the per-side
        error codes are kept in ``context["low"]`` and ``context["high"]``.
        """
        low, high = parse_range(text)
        if low.is_err() or high.is_err():
            return Result.err("invalid_range", context={"text": text, "low": low.error, "high": high.error})
        low_value, high_value = sorted((low.unwrap(), high.unwrap()))
        return Result.ok(cls(low=low_value, high=high_value))

    def __contains__(self, line_number: object) -> bool:
        return isinstance(line_number, int) and self.low <= line_number <= self.high

    def __str__(self) -> str:
        return f"{self.low}-{self.high}"
