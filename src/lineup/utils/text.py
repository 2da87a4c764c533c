"""UTF-8 helpers shared by the tokenizer and formatter."""

from __future__ import annotations


def is_char_boundary(data: bytes, index: int) -> bool:
    """Return ``True`` when *index* does not fall inside a UTF-8 sequence.

    *data* is assumed to be valid UTF-8.  Both ends of the buffer are
    boundaries; any other offset is one unless it points at a
    continuation byte (``0b10xxxxxx``).
    """
    if index <= 0 or index >= len(data):
        return True
    return (data[index] & 0xC0) != 0x80


def char_count(text: str) -> int:
    """Number of Unicode scalar values in *text* (not bytes, not cells)."""
    return len(text)
