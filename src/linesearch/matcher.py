"""Substring matching within a single line buffer.

Lines and terms are ``bytes``. Case folding and word classification are
ASCII-only, so positions are byte offsets and folding never changes a length.
"""

from collections.abc import Iterator
from string import ascii_letters, digits

from .options import SearchOptions

_WORD_BYTES = frozenset((ascii_letters + digits + "_").encode())


def is_word_char(byte: int) -> bool:
    """Check whether a byte is an ASCII letter, digit, or underscore."""
    return byte in _WORD_BYTES


def _is_isolated(line: bytes, position: int, term_length: int) -> bool:
    """Check that the occurrence at ``position`` has no word character on either side."""
    if position > 0 and is_word_char(line[position - 1]):
        return False
    end = position + term_length
    # End of line counts as a boundary
    return end >= len(line) or not is_word_char(line[end])


def find_match(line: bytes, term: bytes, options: SearchOptions, start: int = 0) -> int | None:
    """Find the leftmost occurrence of ``term`` in ``line`` at or after ``start``.

    Args:
        line: The line buffer, terminator included.
        term: The literal bytes to look for. An empty term never matches.
        options: ``ignore_case`` folds both sides; ``isolate_word`` rejects
            occurrences adjacent to a word character.
        start: Offset where the search window begins. Isolation still looks at
            the byte before the window.

    Returns:
        Byte offset of the match within ``line``, or None.

    """
    if not term:
        return None
    if options.ignore_case:
        line_cmp, term_cmp = line.upper(), term.upper()
    else:
        line_cmp, term_cmp = line, term

    position = line_cmp.find(term_cmp, start)
    while position != -1:
        if not options.isolate_word or _is_isolated(line, position, len(term)):
            return position
        # Rejected candidate: retry one byte further, not a whole term further
        position = line_cmp.find(term_cmp, position + 1)
    return None


def iter_matches(line: bytes, term: bytes, options: SearchOptions) -> Iterator[int]:
    """Yield the positions of all non-overlapping matches in ``line``.

    After each match the window moves past the whole term, so ``b"aaa"`` holds a
    single ``b"aa"``. With ``remove_duplicate_lines`` only the first match is
    yielded; repeated lines elsewhere in the input are not affected.
    """
    start = 0
    while (position := find_match(line, term, options, start)) is not None:
        yield position
        if options.remove_duplicate_lines:
            return
        start = position + len(term)
