"""Text, encoding, URL and settings helpers for spell checking."""

__version__ = "0.1.0"

__all__ = [
    "string_utils",
    "utf8",
    "mapped_wstring",
    "utility",
    "url_helpers",
    "ini_worker",
    "progress_data",
]