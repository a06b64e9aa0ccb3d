"""Unicode scalar value boundaries."""

from __future__ import annotations

from typing import Callable, Iterator, Union

from substring.utils.text import is_lead_byte

Text = Union[str, memoryview]

# A unit enumerator: yields, from the start on every call, the offset at which
# each unit of the text begins.
BoundaryFinder = Callable[[Text], Iterator[int]]


def char_boundaries(text: Text) -> Iterator[int]:
    """Yield the offset of every scalar value in `text`.

    For `str` these are code point indices. For a UTF-8 buffer they are the
    byte offsets of every byte that is not a continuation byte, so a letter
    followed by a combining mark counts as two units.
    """
    if isinstance(text, str):
        yield from range(len(text))
        return
    for offset, value in enumerate(text):
        if is_lead_byte(value):
            yield offset


def count_units(text: Text, boundaries: BoundaryFinder = char_boundaries) -> int:
    """Count the units of `text` by walking it once."""
    return sum(1 for _ in boundaries(text))
