# dspellutils

Helpers for spell checking text. The package has no dependencies beyond the
standard library.

## Modules

- `dspellutils.string_utils`
  - `Tokenizer` splits text into words at delimiter characters and can also split
    camel case (`helloWorld` → `hello`, `World`). `get_all_tokens()` returns the
    words, `token_spans()` their `(start, end)` positions, and `prev_token_begin(index)`
    / `next_token_end(index)` find word boundaries around a position.
  - `make_delimiter_tokenizer(target, delimiters, split_camel_case=False)` builds a
    `Tokenizer` that treats every character of `delimiters` as a separator.
  - `StringCaseType` (`LOWER`, `UPPER`, `TITLE`, `MIXED`), `get_string_case_type(s)`
    to classify a word and `apply_case_type(s, case_type)` to recapitalise one
    (`MIXED` raises `ValueError`).
  - `make_upper`, `make_lower`, `is_upper`, `is_lower`, `trim`, `ltrim`, `rtrim`,
    `remove_prefix_equals`, `replace_all` and `find_case_insensitive` (returns `-1`
    when not found).
- `dspellutils.utf8`: walking UTF-8 `bytes` one symbol at a time, where a zero byte
  or the end of the data ends the text: `utf8_is_lead`, `utf8_is_cont`,
  `utf8_symbol_len`, `utf8_inc`, `utf8_dec`, `utf8_chr`, `utf8_pbrk`, `utf8_length`.
- `dspellutils.mapped_wstring`: `MappedWstring`, a decoded `text` with a `mapping` from
  each character to its offset in the raw buffer (empty means identity), with
  `to_original_index`, `from_original_index`, `original_length` and `append`.
- `dspellutils.utility`: conversions between text and bytes in the locale's encoding
  or UTF-8 (`to_wstring`, `to_string`, `to_utf8_string`, `utf8_to_wstring`,
  `utf8_to_string`), backslash-escape expansion (`parse_string`, handling `\n`, `\t`,
  `\xHH`, `\uHHHH` and the like), `ensure_directory` and `write_unicode_bom`.
- `dspellutils.url_helpers`: `is_ftp_url`, `is_github_url`,
  `github_url_to_api_recursive_tree_url` and `github_file_url_to_download_url`.
- `dspellutils.ini_worker`: `IniWorker` reads or writes one section of an INI file,
  depending on its `Action` (`SAVE` or `LOAD`). `process_string`, `process_int`,
  `process_bool` and `process_enum` each return the value the setting should have
  afterwards; saved values are written by `flush()`, which also runs when the worker
  is left as a context manager without an error.
- `dspellutils.progress_data`: `ProgressData`, a progress value, status text and
  marquee flag that are safe to share between threads (`set`, the `progress`,
  `status` and `marquee` properties, and `snapshot`).

## Examples

```python
from dspellutils.string_utils import make_delimiter_tokenizer

tokens = make_delimiter_tokenizer("helloWorld foo", " ", True).get_all_tokens()
# ['hello', 'World', 'foo']
```

```python
from dspellutils.ini_worker import Action, IniWorker

with IniWorker("Settings", "settings.ini", Action.SAVE) as ini:
    ini.process_int("FontSize", 12, 10)

loader = IniWorker("Settings", "settings.ini", Action.LOAD)
size = loader.process_int("FontSize", 10, 10)  # 12
```

## What it does not do

The package checks no spelling itself: it has no dictionaries and no speller, and
it does not download anything; `url_helpers` only builds addresses. It also does
not turn dictionary codes such as `en_US` into readable language names.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```