"""Helpers for recognising and rewriting dictionary repository URLs."""

from __future__ import annotations

from .string_utils import make_lower, remove_prefix_equals, trim

__all__ = [
    "is_ftp_url",
    "is_github_url",
    "github_url_to_api_recursive_tree_url",
    "github_file_url_to_download_url",
]

_GITHUB_HOST = "github.com"


def _normalized(url: str) -> str:
    return "".join(map(make_lower, trim(url)))


def _strip_scheme_and_www(url: str) -> str:
    url = remove_prefix_equals(url, "https://")
    return remove_prefix_equals(url, "www.")


def is_ftp_url(s: str) -> bool:
    """Whether ``s`` is an FTP address, ignoring case and surrounding space."""
    return _normalized(s).startswith("ftp://")


def is_github_url(url: str) -> bool:
    """Whether ``url`` points at GitHub, ignoring case and surrounding space."""
    return _strip_scheme_and_www(_normalized(url)).startswith(_GITHUB_HOST)


def _to_github_base_url(github_url: str) -> str:
    rest = _strip_scheme_and_www(github_url)
    split_at = len(_GITHUB_HOST + "/")
    if len(rest) < split_at:
        raise ValueError(f"not a GitHub repository URL: {github_url!r}")
    return "https://api." + rest[:split_at] + "repos/" + rest[split_at:]


def github_url_to_api_recursive_tree_url(github_url: str, branch_name: str) -> str:
    """API URL listing the whole file tree of ``branch_name`` in a repository."""
    return f"{_to_github_base_url(github_url)}/git/trees/{branch_name}?recursive=1"


def github_file_url_to_download_url(github_url: str, branch_name: str) -> str:
    """Raw-content URL prefix for files of ``branch_name`` in a repository."""
    rest = remove_prefix_equals(_strip_scheme_and_www(github_url), _GITHUB_HOST)
    return f"https://raw.githubusercontent.com{rest}/{branch_name}/"