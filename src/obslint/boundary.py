from __future__ import annotations

from typing import Optional

import regex


_MAX_UTF8_WIDTH = 4

_WORD_CHAR_RE = regex.compile(r"[\p{Alphabetic}\p{N}]")


def _is_continuation(b: int) -> bool:
    return (b & 0b1100_0000) == 0b1000_0000


def _utf8_width(lead: int) -> int:
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    return 4


def char_before(data: bytes, i: int) -> Optional[str]:
    """Return the character that ends at byte offset ``i`` of a UTF-8 buffer.

    Walks backwards over continuation bytes until the lead byte of the
    character is found. ``i`` must sit on a character boundary. Returns None
    at the start of the buffer or past its end.
    """
    if i == 0 or i > len(data):
        return None

    start = i
    while start > 0 and i - start < _MAX_UTF8_WIDTH:
        start -= 1
        if not _is_continuation(data[start]):
            break
    return data[start:i].decode("utf-8")


def char_after(data: bytes, i: int) -> Optional[str]:
    """Return the character that starts at byte offset ``i``, or None at the end."""
    if i < 0 or i >= len(data):
        return None
    width = _utf8_width(data[i])
    return data[i : i + width].decode("utf-8")


def is_word_char(ch: str) -> bool:
    """Unicode Alphabetic or Numeric, so combining vowel signs count as letters."""
    return _WORD_CHAR_RE.match(ch) is not None


def is_isolated(data: bytes, start: int, end: int) -> bool:
    """True when ``data[start:end]`` is not glued to alphanumeric neighbours."""
    before = char_before(data, start)
    if before is not None and is_word_char(before):
        return False
    after = char_after(data, end)
    if after is not None and is_word_char(after):
        return False
    return True
