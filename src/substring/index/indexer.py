"""Unit-indexed access to text, parameterized by a unit enumerator."""

from __future__ import annotations

import logging
from typing import Callable, Iterator, Optional, Union

from substring.bounds import RangeLike, normalize
from substring.index.translator import slice_text, translate
from substring.models import ByteRange, TextSlice
from substring.units.chars import BoundaryFinder, Text, char_boundaries, count_units
from substring.units.graphemes import cluster_pattern, grapheme_boundaries
from substring.utils.text import BytesLike, as_buffer

logger = logging.getLogger(__name__)

Source = Union[str, BytesLike, TextSlice]
Result = Union[str, TextSlice]


def as_source(text: Source) -> Union[str, TextSlice]:
    """Return `text` as a `str` or as a view over validated UTF-8 storage."""
    if isinstance(text, (str, TextSlice)):
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        return TextSlice.whole(as_buffer(text))
    raise TypeError(f"expected str or a UTF-8 bytes-like object, got {type(text).__name__}")


def _walkable(source: Union[str, TextSlice]) -> Text:
    return source if isinstance(source, str) else source.view


class UnitIndexer:
    """Slices text by unit position, where `boundaries` decides what a unit is.

    Each call walks a fresh enumeration of the text; nothing is memoized
    between calls, so one indexer can be shared freely.
    """

    def __init__(
        self,
        boundaries: BoundaryFinder,
        *,
        name: str,
        require: Optional[Callable[[], object]] = None,
    ) -> None:
        self.boundaries = boundaries
        self.name = name
        self._require = require

    def __repr__(self) -> str:
        return f"UnitIndexer({self.name!r})"

    def _check(self) -> None:
        if self._require is not None:
            self._require()

    def span(self, source: Union[str, TextSlice], start: int, end: Optional[int]) -> ByteRange:
        """Translate canonical positions against an already wrapped source."""
        self._check()
        walkable = _walkable(source)
        span = translate(self.boundaries(walkable), start, end, len(walkable))
        logger.debug(f"{self.name} units {start}..{end} -> bytes {span.start}..{span.stop}")
        return span

    def byte_range(self, text: Source, index: RangeLike) -> ByteRange:
        """Offsets covered by the unit range `index`, relative to the start of `text`."""
        start, end = normalize(index)
        return self.span(as_source(text), start, end)

    def substring(self, text: Source, index: RangeLike) -> Result:
        """The units of `text` within `index`.

        A `str` yields a `str`; bytes-like input yields a `TextSlice` sharing
        the caller's buffer.
        """
        source = as_source(text)
        start, end = normalize(index)
        return slice_text(source, self.span(source, start, end))

    def count(self, text: Source) -> int:
        self._check()
        return count_units(_walkable(as_source(text)), self.boundaries)

    def units(self, text: Source) -> Iterator[Result]:
        """Yield each unit of `text` as its own slice."""
        self._check()
        source = as_source(text)
        walkable = _walkable(source)
        previous: Optional[int] = None
        for offset in self.boundaries(walkable):
            if previous is not None:
                yield slice_text(source, ByteRange(previous, offset))
            previous = offset
        if previous is not None:
            yield slice_text(source, ByteRange(previous, len(walkable)))


CHARACTERS = UnitIndexer(char_boundaries, name="char")
GRAPHEMES = UnitIndexer(grapheme_boundaries, name="grapheme", require=cluster_pattern)

INDEXERS = {indexer.name: indexer for indexer in (CHARACTERS, GRAPHEMES)}
