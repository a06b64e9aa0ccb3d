"""Public entry points.

Each function is a thin adapter over one of the stock `UnitIndexer`s.
"""

from __future__ import annotations

from typing import Optional, Union

from substring.bounds import RangeLike, normalize_pair
from substring.index.indexer import CHARACTERS, GRAPHEMES, Result, Source, as_source
from substring.index.translator import slice_text
from substring.models import ByteRange


def substring(text: Source, index: Union[RangeLike, int], end: Optional[int] = None) -> Result:
    """Slice `text` by Unicode scalar value positions.

    Called as `substring(text, start, end)` the start is inclusive and the end
    exclusive. Called as `substring(text, index)` any range form is accepted:
    a `UnitRange`, a `slice`, a `range`, or None for the whole text.

    Out-of-range, equal and inverted positions never raise; they select as
    much of the text as exists, possibly nothing.

    Example:
        >>> substring("foobar", 2, 5)
        'oba'
    """
    if end is not None:
        if not isinstance(index, int):
            raise TypeError("an explicit end requires an integer start position")
        source = as_source(text)
        start, stop = normalize_pair(index, end)
        return slice_text(source, CHARACTERS.span(source, start, stop))
    if isinstance(index, int):
        raise TypeError("an integer start position requires an end position")
    return CHARACTERS.substring(text, index)


def char_substring(text: Source, index: RangeLike) -> Result:
    """Slice `text` by Unicode scalar value positions using a range."""
    return CHARACTERS.substring(text, index)


def grapheme_substring(text: Source, index: RangeLike) -> Result:
    """Slice `text` by user-perceived character positions using a range.

    Requires the ``grapheme`` extra.
    """
    return GRAPHEMES.substring(text, index)


def char_byte_range(text: Source, index: RangeLike) -> ByteRange:
    return CHARACTERS.byte_range(text, index)


def grapheme_byte_range(text: Source, index: RangeLike) -> ByteRange:
    return GRAPHEMES.byte_range(text, index)
