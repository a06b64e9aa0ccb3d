"""Translate unit positions into byte offsets and slice the source.

Units are not fixed width, so the only way to find where the n-th unit starts
is to walk the boundaries from the beginning. `translate` does this in a
single forward pass: the end offset is found by continuing the same iterator
that located the start, never by restarting it.
"""

from __future__ import annotations

from itertools import islice
from typing import Iterable, Iterator, Optional, Union

from substring.models import EMPTY_RANGE, ByteRange, TextSlice


def _advance(offsets: Iterator[int], skip: int, default: int) -> int:
    """Discard `skip` offsets and return the next one, or `default` once exhausted."""
    return next(islice(offsets, skip, None), default)


def translate(
    boundaries: Iterable[int], start: int, end: Optional[int], length: int
) -> ByteRange:
    """Map canonical unit positions onto the byte range they cover.

    `boundaries` are the unit start offsets of a text `length` long and `end`
    is None for a range running to the end. Positions past the last unit
    resolve to `length`, and empty or inverted ranges return without walking.
    """
    if end is not None and end <= start:
        return EMPTY_RANGE

    offsets = iter(boundaries)
    start_offset = _advance(offsets, start, length)
    if end is None:
        return ByteRange(start_offset, length)
    end_offset = _advance(offsets, end - start - 1, length)
    return ByteRange(start_offset, end_offset)


def slice_text(text: Union[str, TextSlice], span: ByteRange) -> Union[str, TextSlice]:
    """Cut `span` out of `text` without revalidating the offsets."""
    if isinstance(text, str):
        return text[span.start : span.stop]
    return text.subslice(span)
