"""Range bounds and their normalization into canonical unit positions.

Every accepted range form collapses to a `(start, end)` pair of unit counts,
with `end` left as `None` when the range runs to the end of the text. The
adjustments for exclusive starts and inclusive ends saturate at `MAX_INDEX`
instead of growing past it.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from types import EllipsisType
from typing import Optional, Tuple, Union

MAX_INDEX = sys.maxsize


def _position(value: object) -> int:
    number = operator.index(value)  # type: ignore[arg-type]
    if number < 0:
        raise ValueError(f"unit positions must be non-negative, got {number}")
    return min(number, MAX_INDEX)


def saturating_increment(value: int) -> int:
    """Return `value + 1`, clamped to `MAX_INDEX`."""
    return min(value, MAX_INDEX - 1) + 1


@dataclass(frozen=True, slots=True)
class Included:
    value: int

    def __post_init__(self) -> None:
        _position(self.value)


@dataclass(frozen=True, slots=True)
class Excluded:
    value: int

    def __post_init__(self) -> None:
        _position(self.value)


@dataclass(frozen=True, slots=True)
class Unbounded:
    def __repr__(self) -> str:
        return "UNBOUNDED"


UNBOUNDED = Unbounded()

Bound = Union[Included, Excluded, Unbounded]


@dataclass(frozen=True, slots=True)
class UnitRange:
    """A range of unit positions with independent start and end bounds."""

    start: Bound = UNBOUNDED
    end: Bound = UNBOUNDED

    @classmethod
    def full(cls) -> UnitRange:
        return cls()

    @classmethod
    def closed(cls, start: int, end: int) -> UnitRange:
        """Both ends included, like `start..=end`."""
        return cls(Included(start), Included(end))

    @classmethod
    def after(cls, start: int) -> UnitRange:
        """Everything past `start`, which itself is excluded."""
        return cls(Excluded(start), UNBOUNDED)

    @classmethod
    def from_slice(cls, index: slice) -> UnitRange:
        if index.step not in (None, 1):
            raise ValueError(f"unit ranges do not support a step, got {index.step!r}")
        start = UNBOUNDED if index.start is None else Included(index.start)
        end = UNBOUNDED if index.stop is None else Excluded(index.stop)
        return cls(start, end)


RangeLike = Union[UnitRange, slice, range, EllipsisType, None]


def coerce_range(index: RangeLike) -> UnitRange:
    """Turn any accepted range representation into a `UnitRange`."""
    if isinstance(index, UnitRange):
        return index
    if index is None or index is Ellipsis:
        return UnitRange.full()
    if isinstance(index, slice):
        return UnitRange.from_slice(index)
    if isinstance(index, range):
        if index.step != 1:
            raise ValueError(f"unit ranges do not support a step, got {index.step}")
        return UnitRange(Included(index.start), Excluded(index.stop))
    raise TypeError(f"cannot use {type(index).__name__} as a unit range")


def normalize_start(bound: Bound) -> int:
    if isinstance(bound, Included):
        return _position(bound.value)
    if isinstance(bound, Excluded):
        return saturating_increment(_position(bound.value))
    return 0


def normalize_end(bound: Bound) -> Optional[int]:
    if isinstance(bound, Excluded):
        return _position(bound.value)
    if isinstance(bound, Included):
        return saturating_increment(_position(bound.value))
    return None


def normalize(index: RangeLike) -> Tuple[int, Optional[int]]:
    """Return canonical `(start, end)` unit positions; `end` is None when unbounded."""
    unit_range = coerce_range(index)
    return normalize_start(unit_range.start), normalize_end(unit_range.end)


def normalize_pair(start: int, end: int) -> Tuple[int, int]:
    """Canonical positions for the two-integer form: start inclusive, end exclusive."""
    return _position(start), _position(end)
