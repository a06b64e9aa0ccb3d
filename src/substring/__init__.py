"""Slice UTF-8 text by character or grapheme cluster position."""

from substring.api import (
    char_byte_range,
    char_substring,
    grapheme_byte_range,
    grapheme_substring,
    substring,
)
from substring.bounds import MAX_INDEX, UNBOUNDED, Excluded, Included, Unbounded, UnitRange
from substring.errors import CapabilityUnavailableError, InvalidEncodingError, SubstringError
from substring.index.indexer import CHARACTERS, GRAPHEMES, UnitIndexer
from substring.models import ByteRange, TextSlice

__all__ = [
    "CHARACTERS",
    "GRAPHEMES",
    "MAX_INDEX",
    "UNBOUNDED",
    "ByteRange",
    "CapabilityUnavailableError",
    "Excluded",
    "Included",
    "InvalidEncodingError",
    "SubstringError",
    "TextSlice",
    "Unbounded",
    "UnitIndexer",
    "UnitRange",
    "char_byte_range",
    "char_substring",
    "grapheme_byte_range",
    "grapheme_substring",
    "substring",
]
