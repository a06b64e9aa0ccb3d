"""Helpers for validating and inspecting UTF-8 buffers."""

from __future__ import annotations

import codecs
from typing import Union

from substring.errors import InvalidEncodingError

BytesLike = Union[bytes, bytearray, memoryview]

_CONTINUATION_MASK = 0xC0
_CONTINUATION_TAG = 0x80


def is_lead_byte(value: int) -> bool:
    """Return True when `value` starts a UTF-8 sequence (is not a continuation byte)."""
    return value & _CONTINUATION_MASK != _CONTINUATION_TAG


def as_buffer(data: BytesLike) -> memoryview:
    """Wrap UTF-8 `data` in a flat byte view after validating it once.

    The returned view shares storage with `data`; nothing is copied except the
    transient decode used for validation.
    """
    view = data if isinstance(data, memoryview) else memoryview(data)
    if not view.c_contiguous:
        raise TypeError("UTF-8 sources must be contiguous buffers; copy the view with bytes() first")
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    try:
        codecs.utf_8_decode(view, "strict", True)
    except UnicodeDecodeError as exc:
        raise InvalidEncodingError(
            f"invalid UTF-8 at byte {exc.start}: {exc.reason}", offset=exc.start
        ) from exc
    return view


def decode(view: memoryview) -> str:
    """Decode an already validated view."""
    return str(view, "utf-8")


def encoded_length(text: str) -> int:
    """Number of bytes `text` occupies in UTF-8."""
    return len(text.encode("utf-8"))
