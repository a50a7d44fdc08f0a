"""Byte-level helpers for walking UTF-8 encoded data.

Positions are indices into a ``bytes`` object; a zero byte ends the text,
as does the end of the data.
"""

from __future__ import annotations

__all__ = [
    "utf8_is_lead",
    "utf8_is_cont",
    "utf8_symbol_len",
    "utf8_inc",
    "utf8_dec",
    "utf8_chr",
    "utf8_pbrk",
    "utf8_length",
]


def utf8_is_lead(c: int) -> bool:
    """Whether byte ``c`` can start a UTF-8 sequence."""
    c &= 0xFF
    return (
        (c & 0x80) == 0
        or ((c & 0xC0) == 0xC0 and (c & 0x20) == 0)
        or ((c & 0xE0) == 0xE0 and (c & 0x10) == 0)
        or ((c & 0xF0) == 0xF0 and (c & 0x08) == 0)
        or ((c & 0xF8) == 0xF8 and (c & 0x04) == 0)
        or ((c & 0xFC) == 0xFC and (c & 0x02) == 0)
    )


def utf8_is_cont(c: int) -> bool:
    """Whether byte ``c`` is a continuation byte (10xxxxxx)."""
    c &= 0xFF
    return (c & 0x80) == 0x80 and (c & 0x40) == 0


def utf8_symbol_len(c: int) -> int:
    """Length in bytes of the sequence that byte ``c`` starts; 1 for bad bytes."""
    c &= 0xFF
    if (c & 0x80) == 0:
        return 1
    if (c & 0xC0) > 0 and (c & 0x20) == 0:
        return 2
    if (c & 0xE0) > 0 and (c & 0x10) == 0:
        return 3
    if (c & 0xF0) > 0 and (c & 0x08) == 0:
        return 4
    if (c & 0xF8) > 0 and (c & 0x04) == 0:
        return 5
    if (c & 0xFC) > 0 and (c & 0x02) == 0:
        return 6
    return 1


def utf8_inc(data: bytes, pos: int) -> int:
    """Position of the character following the one at ``pos``."""
    return pos + utf8_symbol_len(data[pos])


def utf8_dec(data: bytes, pos: int) -> int | None:
    """Position of the character preceding ``pos``, or None at the start."""
    if pos <= 0:
        return None
    index = pos - 1
    while index >= 0 and not utf8_is_lead(data[index]):
        index -= 1
    return index if index >= 0 else None


def _char_positions(data: bytes):
    pos = 0
    while pos < len(data) and data[pos] != 0:
        yield pos
        pos = utf8_inc(data, pos)


def _first_chars_equal(a: bytes, a_pos: int, b: bytes, b_pos: int) -> bool:
    size = utf8_symbol_len(a[a_pos])
    if size != utf8_symbol_len(b[b_pos]):
        return False
    return a[a_pos:a_pos + size] == b[b_pos:b_pos + size]


def utf8_chr(s: bytes, sfc: bytes) -> int | None:
    """Position in ``s`` of the first occurrence of the first character of ``sfc``."""
    if not sfc or sfc[0] == 0:
        return None
    return next((pos for pos in _char_positions(s) if _first_chars_equal(s, pos, sfc, 0)), None)


def utf8_pbrk(s: bytes, charset: bytes) -> int | None:
    """Position in ``s`` of the first character that also occurs in ``charset``."""
    candidates = list(_char_positions(charset))
    for pos in _char_positions(s):
        if any(_first_chars_equal(s, pos, charset, cpos) for cpos in candidates):
            return pos
    return None


def utf8_length(s: bytes) -> int:
    """Number of characters in ``s`` up to the end or the first zero byte."""
    return sum(1 for _ in _char_positions(s))