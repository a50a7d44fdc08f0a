"""Loading and saving of typed settings in an INI file section."""

from __future__ import annotations

import configparser
import os
import re
from enum import Enum
from pathlib import Path
from typing import TypeVar

__all__ = ["Action", "IniWorker", "MAX_VALUE_LENGTH"]

# Longest value that is read back; longer ones fall back to the default.
MAX_VALUE_LENGTH = 128 * 1024 - 2

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

E = TypeVar("E", bound=Enum)


class Action(Enum):
    """Whether an :class:`IniWorker` writes settings or reads them."""

    SAVE = "save"
    LOAD = "load"


def _parse_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    if match is None:
        return None
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        return None
    return value


class IniWorker:
    """Reads or writes values of one section of an INI file.

    Each ``process_*`` call returns the value the setting should have
    afterwards: in save mode the given value, in load mode the stored one or
    the default. Saved values reach the file on :meth:`flush`, which also runs
    when the worker is used as a context manager.
    """

    def __init__(self, app_name: str, file_name: str | os.PathLike[str], action: Action):
        self.app_name = app_name
        self.file_name = Path(file_name)
        self.action = action
        self._dirty = False
        self._parser = configparser.ConfigParser(
            interpolation=None, delimiters=("=",), strict=False, empty_lines_in_values=False
        )
        if self.file_name.is_file():
            self._parser.read(self.file_name, encoding="utf-8-sig")

    def __enter__(self) -> IniWorker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.flush()

    def flush(self) -> None:
        """Write saved values to the file, if any were changed."""
        if self.action is not Action.SAVE or not self._dirty:
            return
        if self.file_name.parent != Path():
            self.file_name.parent.mkdir(parents=True, exist_ok=True)
        with self.file_name.open("w", encoding="utf-8") as stream:
            self._parser.write(stream, space_around_delimiters=False)
        self._dirty = False

    def _write(self, name: str, text: str) -> None:
        if not self._parser.has_section(self.app_name):
            self._parser.add_section(self.app_name)
        self._parser.set(self.app_name, name, text)
        self._dirty = True

    def _read(self, name: str, default_value: str) -> str:
        if not self._parser.has_option(self.app_name, name):
            return default_value
        text = self._parser.get(self.app_name, name)
        if not text or len(text) > MAX_VALUE_LENGTH:
            return default_value
        return text

    def process_string(self, name: str, value: str, default_value: str = "", in_quotes: bool = False) -> str:
        """Save or load a string; ``in_quotes`` stores it wrapped in double quotes."""
        if self.action is Action.SAVE:
            if value != default_value:
                self._write(name, f'"{value}"' if in_quotes else value)
            return value

        text = self._read(name, default_value)
        if in_quotes:
            if not text or text[0] != '"' or text[-1] != '"':
                return default_value
            text = text[1:-1]
        return text

    def process_int(self, name: str, value: int, default_value: int) -> int:
        """Save or load an integer; unreadable stored values give the default."""
        if self.action is Action.SAVE:
            self.process_string(name, str(value), str(default_value))
            return value
        parsed = _parse_int(self.process_string(name, str(value), str(default_value)))
        return default_value if parsed is None else parsed

    def process_bool(self, name: str, value: bool, default_value: bool) -> bool:
        """Save or load a flag, stored as 1 or 0."""
        return self.process_int(name, int(bool(value)), int(bool(default_value))) != 0

    def process_enum(self, name: str, value: E, default_value: E) -> E:
        """Save or load an integer-valued enum member by its value.

        A stored number that names no member loads as the default.
        """
        number = self.process_int(name, value.value, default_value.value)
        if self.action is Action.SAVE:
            return value
        try:
            return type(default_value)(number)
        except ValueError:
            return default_value