"""Extended grapheme cluster boundaries.

Segmentation is delegated to the `regex` package (`\\X`), installed with the
``grapheme`` extra.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Iterable, Iterator

from substring.errors import CapabilityUnavailableError
from substring.units.chars import Text
from substring.utils.text import decode, encoded_length

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def cluster_pattern() -> Any:
    """Return the compiled `\\X` pattern, or fail if `regex` is not installed."""
    try:
        import regex
    except ImportError as exc:
        raise CapabilityUnavailableError(
            "grapheme segmentation needs the 'regex' package. "
            "Install the grapheme extras with \"python -m pip install 'substring[grapheme]'\""
        ) from exc
    logger.debug(f"Grapheme segmentation backed by regex {regex.__version__}")
    return regex.compile(r"\X")


def grapheme_available() -> bool:
    """Return True when grapheme segmentation can be used."""
    try:
        cluster_pattern()
    except CapabilityUnavailableError:
        return False
    return True


def _byte_offsets(clusters: Iterable[str]) -> Iterator[int]:
    offset = 0
    for cluster in clusters:
        yield offset
        offset += encoded_length(cluster)


def grapheme_boundaries(text: Text) -> Iterator[int]:
    """Return an iterator over the offsets where each user-perceived character begins.

    The pattern is resolved eagerly so a missing `regex` install fails here,
    not on the first step of the walk. `regex` only segments `str`, so a
    buffer is decoded once and each cluster re-encoded to measure it: this
    walk holds a decoded copy of the text, unlike the character walk.
    """
    pattern = cluster_pattern()
    if isinstance(text, str):
        return (match.start() for match in pattern.finditer(text))
    return _byte_offsets(match.group() for match in pattern.finditer(decode(text)))
