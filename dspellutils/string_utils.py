"""String helpers: case handling, trimming, searching and word tokenizing."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

__all__ = [
    "StringCaseType",
    "Tokenizer",
    "make_delimiter_tokenizer",
    "make_upper",
    "make_lower",
    "is_upper",
    "is_lower",
    "remove_prefix_equals",
    "trim",
    "ltrim",
    "rtrim",
    "replace_all",
    "find_case_insensitive",
    "get_string_case_type",
    "apply_case_type",
]


class StringCaseType(Enum):
    """Capitalisation pattern of a word."""

    LOWER = "lower"
    UPPER = "upper"
    TITLE = "title"
    MIXED = "mixed"


def make_upper(c: str) -> str:
    """Upper-case a single character, keeping it a single character."""
    upper = c.upper()
    return upper if len(upper) == 1 else c


def make_lower(c: str) -> str:
    """Lower-case a single character, keeping it a single character."""
    lower = c.lower()
    return lower if len(lower) == 1 else c


def is_upper(c: str) -> bool:
    return c.isupper()


def is_lower(c: str) -> bool:
    return c.islower()


class Tokenizer:
    """Splits text into words separated by delimiter characters.

    With ``split_camel_case`` set, a word is also split before an upper-case
    letter that follows a lower-case one or precedes one.
    """

    def __init__(self, target: str, is_delimiter: Callable[[str], bool], split_camel_case: bool = False):
        self.target = target
        self.is_delimiter = is_delimiter
        self.split_camel_case = split_camel_case

    def _camel_break_before(self, i: int) -> bool:
        t = self.target
        return is_upper(t[i]) and (is_lower(t[i - 1]) or (i < len(t) - 1 and is_lower(t[i + 1])))

    def token_spans(self) -> list[tuple[int, int]]:
        """Return ``(start, end)`` index pairs of every token, in order."""
        spans: list[tuple[int, int]] = []
        token_begin = 0
        token_end = -1

        def finalize() -> None:
            nonlocal token_end
            if token_begin < token_end:
                spans.append((token_begin, token_end))
                token_end += 1

        for i, ch in enumerate(self.target):
            if self.is_delimiter(ch):
                finalize()
                token_begin = i + 1
            elif self.split_camel_case and i > token_begin and self._camel_break_before(i):
                token_end = i
                finalize()
                token_begin = i
            else:
                token_end = i + 1
        finalize()
        return spans

    def get_all_tokens(self) -> list[str]:
        """Return every token as a string, in order."""
        return [self.target[start:end] for start, end in self.token_spans()]

    def prev_token_begin(self, index: int) -> int:
        """Return the start of the token containing or preceding ``index``."""
        if index <= 0:
            return 0
        t = self.target
        if self.is_delimiter(t[index]):
            if self.is_delimiter(t[index - 1]):
                return index
            index -= 1
        while index >= 0 and not self.is_delimiter(t[index]):
            if (
                self.split_camel_case
                and index > 0
                and is_upper(t[index])
                and (index == len(t) - 1 or is_lower(t[index + 1]) or is_lower(t[index - 1]))
            ):
                return index
            index -= 1
        return index + 1

    def next_token_end(self, index: int) -> int:
        """Return the end of the token containing or following ``index``."""
        t = self.target
        length = len(t)
        if index >= length:
            return length
        if index < 0:
            raise IndexError("index must not be negative")
        while index < length and not self.is_delimiter(t[index]):
            if (
                self.split_camel_case
                and index < length - 1
                and is_upper(t[index + 1])
                and (is_lower(t[index]) or (index < length - 2 and is_lower(t[index + 2])))
            ):
                return index + 1
            index += 1
        return index


def make_delimiter_tokenizer(target: str, delimiters: str, split_camel_case: bool = False) -> Tokenizer:
    """Build a tokenizer that treats every character of ``delimiters`` as a separator."""
    return Tokenizer(target, lambda c: c in delimiters, split_camel_case)


def remove_prefix_equals(target: str, prefix: str) -> str:
    """Strip ``prefix`` from ``target`` if it starts with it."""
    return target.removeprefix(prefix)


def trim(s: str) -> str:
    return s.strip()


def ltrim(s: str) -> str:
    return s.lstrip()


def rtrim(s: str) -> str:
    return s.rstrip()


def replace_all(s: str, old: str, new: str) -> str:
    """Replace every occurrence of ``old``; an empty ``old`` leaves ``s`` unchanged."""
    if not old:
        return s
    return s.replace(old, new)


def find_case_insensitive(haystack: str, needle: str) -> int:
    """Return the index of ``needle`` in ``haystack`` ignoring case, or -1."""
    upper_haystack = "".join(map(make_upper, haystack))
    upper_needle = "".join(map(make_upper, needle))
    pos = upper_haystack.find(upper_needle)
    if pos == len(haystack):
        return -1
    return pos


def get_string_case_type(s: str) -> StringCaseType:
    """Classify the capitalisation of ``s``."""
    if not s:
        return StringCaseType.MIXED
    lower_count = sum(1 for c in s if is_lower(c))
    if lower_count == 0:
        return StringCaseType.UPPER
    if lower_count == len(s):
        return StringCaseType.LOWER
    if lower_count == len(s) - 1 and is_upper(s[0]):
        return StringCaseType.TITLE
    return StringCaseType.MIXED


def apply_case_type(s: str, case_type: StringCaseType) -> str:
    """Return ``s`` recapitalised to ``case_type``; mixed case cannot be applied."""
    if not s:
        return s
    if case_type in (StringCaseType.LOWER, StringCaseType.TITLE):
        result = "".join(map(make_lower, s))
    elif case_type is StringCaseType.UPPER:
        result = "".join(map(make_upper, s))
    elif case_type is StringCaseType.MIXED:
        raise ValueError("apply_case_type: inapplicable for mixed case")
    else:
        raise ValueError("apply_case_type: corrupted enum value for type")
    if case_type is StringCaseType.TITLE:
        result = make_upper(result[0]) + result[1:]
    return result