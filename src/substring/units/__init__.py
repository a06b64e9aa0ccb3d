"""Unit enumerators: where each character or grapheme cluster begins."""

from substring.units.chars import char_boundaries, count_units
from substring.units.graphemes import grapheme_boundaries

__all__ = ["char_boundaries", "count_units", "grapheme_boundaries"]
