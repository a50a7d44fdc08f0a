"""Encoding conversions, escape-sequence parsing and small file helpers."""

from __future__ import annotations

import locale
import os
from pathlib import Path
from typing import BinaryIO

__all__ = [
    "MAX_UTF8_CHAR_LENGTH",
    "to_wstring",
    "to_string",
    "to_utf8_string",
    "utf8_to_wstring",
    "utf8_to_string",
    "parse_string",
    "ensure_directory",
    "write_unicode_bom",
]

MAX_UTF8_CHAR_LENGTH = 6

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "t": "\t",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "v": "\v",
    "\\": "\\",
    "0": "\0",
}
_HEX_ESCAPE_LENGTHS = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _ansi_encoding() -> str:
    return locale.getpreferredencoding(False) or "ascii"


def _until_nul_text(text: str) -> str:
    return text.split("\0", 1)[0]


def _until_nul_bytes(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def to_wstring(source: bytes) -> str:
    """Decode bytes in the locale's encoding, dropping what cannot be decoded."""
    return _until_nul_text(bytes(source).decode(_ansi_encoding(), errors="ignore"))


def to_string(source: str) -> bytes:
    """Encode text in the locale's encoding, dropping what cannot be encoded."""
    return _until_nul_bytes(source.encode(_ansi_encoding(), errors="ignore"))


def to_utf8_string(source: str | bytes) -> bytes:
    """Encode text as UTF-8; bytes are first decoded from the locale's encoding."""
    if isinstance(source, (bytes, bytearray)):
        source = bytes(source).decode(_ansi_encoding(), errors="ignore")
    return _until_nul_bytes(source.encode("utf-8", errors="ignore"))


def utf8_to_wstring(source: bytes) -> str:
    """Decode UTF-8 up to the first zero byte, dropping invalid sequences."""
    return _until_nul_bytes(bytes(source)).decode("utf-8", errors="ignore")


def utf8_to_string(source: bytes) -> bytes:
    """Re-encode UTF-8 bytes into the locale's encoding."""
    return to_string(utf8_to_wstring(source))


def _match_escape(source: str, pos: int) -> tuple[str, int] | None:
    """Decode the escape whose code starts at ``pos``; return it and the next position."""
    if pos >= len(source):
        return None
    code = source[pos]
    if code in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[code], pos + 1
    length = _HEX_ESCAPE_LENGTHS.get(code)
    if length is None:
        return None
    digits = source[pos + 1:pos + 1 + length]
    if len(digits) < length or not all(d in _HEX_DIGITS for d in digits):
        return None
    # Wide characters are 16 bits wide; longer values keep their low bits.
    return chr(int(digits, 16) & 0xFFFF), pos + 1 + length


def parse_string(source: str) -> str:
    r"""Expand backslash escapes such as ``\n``, ``\t``, ``\xHH`` and ``\uHHHH``.

    Unknown or malformed escapes are kept as written. The result ends at the
    first NUL character, whether written literally or produced by an escape.
    """
    source = _until_nul_text(source)
    out: list[str] = []
    pos = 0
    while pos < len(source):
        ch = source[pos]
        if ch == "\\":
            matched = _match_escape(source, pos + 1)
            if matched is not None:
                decoded, pos = matched
                out.append(decoded)
                continue
        out.append(ch)
        pos += 1
    return _until_nul_text("".join(out))


def ensure_directory(path: str | os.PathLike[str]) -> bool:
    """Create ``path`` and any missing parents; return whether it now exists."""
    target = Path(path)
    try:
        target.mkdir(parents=True, exist_ok=True)
    except OSError:
        return False
    return target.is_dir()


def write_unicode_bom(stream: BinaryIO) -> None:
    """Write the UTF-16 little-endian byte order mark to a binary stream."""
    stream.write((0xFEFF).to_bytes(2, "little"))