import pytest

from dspellutils.url_helpers import (
    github_file_url_to_download_url,
    github_url_to_api_recursive_tree_url,
    is_ftp_url,
    is_github_url,
)


@pytest.mark.parametrize(
    "url, expected",
    [
        ("ftp://example.com/dicts", True),
        ("  FTP://EXAMPLE.COM  ", True),
        ("https://example.com", False),
        ("ftp:/broken", False),
        ("", False),
    ],
)
def test_is_ftp_url(url, expected):
    assert is_ftp_url(url) is expected


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://github.com/owner/repo", True),
        ("https://www.github.com/owner/repo", True),
        ("github.com/owner/repo", True),
        ("  HTTPS://GitHub.com/owner/repo ", True),
        ("http://github.com/owner/repo", False),
        ("https://example.com/owner/repo", False),
    ],
)
def test_is_github_url(url, expected):
    assert is_github_url(url) is expected


def test_api_tree_url_pinned():
    result = github_url_to_api_recursive_tree_url("https://github.com/owner/repo", "master")
    assert result == "https://api.github.com/repos/owner/repo/git/trees/master?recursive=1"


@pytest.mark.parametrize(
    "url",
    ["https://github.com/owner/repo", "https://www.github.com/owner/repo", "github.com/owner/repo"],
)
def test_api_tree_url_prefix_forms_agree(url):
    result = github_url_to_api_recursive_tree_url(url, "main")
    assert result.startswith("https://api.github.com/repos/")
    assert result.endswith("/git/trees/main?recursive=1")
    assert result == github_url_to_api_recursive_tree_url("https://github.com/owner/repo", "main")


def test_api_tree_url_rejects_short_url():
    with pytest.raises(ValueError):
        github_url_to_api_recursive_tree_url("https://github", "main")


def test_download_url_pinned():
    result = github_file_url_to_download_url("https://github.com/owner/repo", "master")
    assert result == "https://raw.githubusercontent.com/owner/repo/master/"


@pytest.mark.parametrize(
    "url",
    ["https://github.com/owner/repo", "https://www.github.com/owner/repo", "github.com/owner/repo"],
)
def test_download_url_prefix_forms_agree(url):
    result = github_file_url_to_download_url(url, "main")
    assert result.startswith("https://raw.githubusercontent.com")
    assert result.endswith("/main/")
    assert result == github_file_url_to_download_url("https://github.com/owner/repo", "main")