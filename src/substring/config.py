"""Command line defaults."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from substring.index.indexer import INDEXERS, UnitIndexer

Unit = Literal["char", "grapheme"]


@dataclass(slots=True)
class AppConfig:
    unit: Unit = "char"
    show_offsets: bool = False

    def resolve_indexer(self) -> UnitIndexer:
        try:
            return INDEXERS[self.unit]
        except KeyError:
            raise ValueError(
                f"unknown unit {self.unit!r}, expected one of: {', '.join(sorted(INDEXERS))}"
            ) from None
