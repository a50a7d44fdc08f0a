import io

import pytest

from dspellutils.utility import (
    MAX_UTF8_CHAR_LENGTH,
    ensure_directory,
    parse_string,
    to_string,
    to_utf8_string,
    to_wstring,
    utf8_to_string,
    utf8_to_wstring,
    write_unicode_bom,
)


@pytest.mark.parametrize("text", ["", "hello", "Hello, World 123"])
def test_ascii_round_trip_through_locale_encoding(text):
    assert to_wstring(to_string(text)) == text


@pytest.mark.parametrize("text", ["", "plain", "Grüße", "Привет", "日本語"])
def test_utf8_round_trip(text):
    assert utf8_to_wstring(to_utf8_string(text)) == text


def test_to_utf8_string_matches_standard_encoding():
    text = "Привет"
    assert to_utf8_string(text) == text.encode("utf-8")


def test_to_utf8_string_from_ascii_bytes_is_unchanged():
    assert to_utf8_string(b"abc") == b"abc"


def test_utf8_to_wstring_stops_at_zero_byte():
    assert utf8_to_wstring(b"abc\x00def") == "abc"


def test_utf8_to_wstring_drops_invalid_bytes():
    assert utf8_to_wstring(b"a\xffb") == "ab"


def test_utf8_to_string_ascii_round_trip():
    assert utf8_to_string(b"words") == b"words"


def test_utf8_length_bound_holds():
    text = "日本語 text"
    assert len(to_utf8_string(text)) <= MAX_UTF8_CHAR_LENGTH * len(text)


@pytest.mark.parametrize(
    "escaped, expected",
    [
        ("a\\tb", "a\tb"),
        ("line\\nnext", "line\nnext"),
        ("back\\\\slash", "back\\slash"),
        ("\\a\\b\\f\\r\\v", "\a\b\f\r\v"),
    ],
)
def test_parse_string_simple_escapes(escaped, expected):
    assert parse_string(escaped) == expected


def test_parse_string_hex_escapes():
    assert parse_string("\\x41") == "A"
    assert parse_string("\\u0416") == "\u0416"


def test_parse_string_long_hex_escape_keeps_low_bits():
    assert parse_string("\\U00000416") == parse_string("\\u0416")


def test_parse_string_unknown_escape_kept():
    assert parse_string("\\q") == "\\q"


def test_parse_string_malformed_hex_kept():
    assert parse_string("\\xZZ") == "\\xZZ"
    assert parse_string("\\u12") == "\\u12"


def test_parse_string_trailing_backslash_kept():
    assert parse_string("end\\") == "end\\"


def test_parse_string_nul_escape_truncates():
    assert parse_string("ab\\0cd") == "ab"


def test_parse_string_without_escapes_is_identity():
    text = "nothing special here"
    assert parse_string(text) == text


def test_ensure_directory_creates_nested(tmp_path):
    target = tmp_path / "one" / "two" / "three"
    assert ensure_directory(target) is True
    assert target.is_dir()


def test_ensure_directory_existing(tmp_path):
    assert ensure_directory(tmp_path) is True


def test_ensure_directory_under_file_fails(tmp_path):
    blocker = tmp_path / "file.txt"
    blocker.write_text("x")
    assert ensure_directory(blocker / "sub") is False


def test_write_unicode_bom():
    stream = io.BytesIO()
    write_unicode_bom(stream)
    assert stream.getvalue() == b"\xff\xfe"
    assert stream.getvalue().decode("utf-16") == ""