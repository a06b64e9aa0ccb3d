"""Core substring data models."""

from __future__ import annotations

from dataclasses import dataclass

from substring.utils.text import decode


@dataclass(frozen=True, slots=True)
class ByteRange:
    """Half-open `[start, stop)` offsets into a source, both on unit boundaries."""

    start: int
    stop: int

    def __len__(self) -> int:
        return self.stop - self.start

    @property
    def is_empty(self) -> bool:
        return self.stop <= self.start

    def shift(self, offset: int) -> ByteRange:
        return ByteRange(self.start + offset, self.stop + offset)


EMPTY_RANGE = ByteRange(0, 0)


@dataclass(frozen=True, slots=True, eq=False)
class TextSlice:
    """Borrowed view over part of a UTF-8 buffer.

    The slice holds a reference to the caller's storage and never copies it;
    `str()`, `bytes()` and `tobytes()` are the only operations that allocate.
    Equality is by content, against `str`, bytes-like objects or other slices.
    """

    source: memoryview
    span: ByteRange

    __hash__ = None  # type: ignore[assignment]

    @classmethod
    def whole(cls, source: memoryview) -> TextSlice:
        return cls(source, ByteRange(0, len(source)))

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def stop(self) -> int:
        return self.span.stop

    @property
    def view(self) -> memoryview:
        """Zero-copy view of the selected bytes."""
        return self.source[self.span.start : self.span.stop]

    def subslice(self, span: ByteRange) -> TextSlice:
        """Narrow this slice by a range relative to its own start."""
        return TextSlice(self.source, span.shift(self.span.start))

    def tobytes(self) -> bytes:
        return self.view.tobytes()

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __str__(self) -> str:
        return decode(self.view)

    def __len__(self) -> int:
        return len(self.span)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return str(self) == other
        if isinstance(other, TextSlice):
            return self.view == other.view
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.view == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"TextSlice({str(self)!r}, bytes={self.span.start}..{self.span.stop})"
