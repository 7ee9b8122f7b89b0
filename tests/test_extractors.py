"""Tests for src.issue_scraper.extractors covering URL matching and filtering.

Run with:
    pytest tests/test_extractors.py --maxfail=1 -v --cov=src.issue_scraper.extractors --cov-report=term-missing
"""

import pytest

from src.issue_scraper import extractors


@pytest.mark.parametrize("text", [None, "", "no links here", "ftp://example.com/file", "mailto:a@b.c"])
def test_parse_comment_without_url_returns_none(text):
    assert extractors.parse_comment_for_url(text) is None


def test_parse_comment_returns_first_match_only():
    text = "see https://example.com/foo?x=1 and https://example.com/bar"
    assert extractors.parse_comment_for_url(text) == "https://example.com/foo?x=1"


def test_parse_comment_normalizes_bare_www():
    assert extractors.parse_comment_for_url("visit www.example.com/page") == "http://www.example.com/page"


@pytest.mark.parametrize("text", [
    "repro at http://localhost:8080/index.html",
    "see https://github.com/GoogleChrome/lighthouse/issues/1",
    "api https://api.github.com/repos",
    "gist www.github.com/foo",
])
def test_parse_comment_filters_local_and_platform_hosts(text):
    assert extractors.parse_comment_for_url(text) is None


def test_parse_comment_keeps_hosts_that_only_resemble_platform():
    assert extractors.parse_comment_for_url("raw https://raw.githubusercontent.com/a/b") == \
        "https://raw.githubusercontent.com/a/b"


def test_excluded_first_match_hides_later_urls():
    text = "https://github.com/x/y/issues/2 and https://example.com/"
    assert extractors.parse_comment_for_url(text) is None


def test_exclusion_checks_host_not_query():
    assert extractors.parse_comment_for_url("https://example.com/?ref=localhost") == \
        "https://example.com/?ref=localhost"


def test_trailing_punctuation_and_parentheses():
    assert extractors.parse_comment_for_url("Look: https://example.com.") == "https://example.com/"
    assert extractors.parse_comment_for_url("(https://en.wikipedia.org/wiki/Foo_(bar))") == \
        "https://en.wikipedia.org/wiki/Foo_(bar)"


def test_match_spans_lines_case_insensitively():
    text = "first line\nHTTPS://Example.COM/Path?Q=1#frag\n"
    assert extractors.parse_comment_for_url(text) == "https://example.com/Path?Q=1"


def test_invalid_url_is_swallowed():
    assert extractors.parse_comment_for_url("http://example.com:99999/x") is None
    assert extractors.parse_comment_for_url("https:///nohost") is None


@pytest.mark.parametrize("text", [
    "| link |http://example.com|foo| cell |",
    "see http://exa%20mple.com/x",
    "odd http://./",
    "dots http://example..com/",
])
def test_invalid_host_is_swallowed(text):
    assert extractors.parse_comment_for_url(text) is None


def test_invalid_first_match_hides_later_urls():
    text = "http://example.com:99999/ then https://example.org/"
    assert extractors.parse_comment_for_url(text) is None


def test_normalize_url_rejects_bad_hosts():
    with pytest.raises(ValueError):
        extractors.normalize_url("http://example.com|foo|")
    assert extractors.normalize_url("http://my-host_1.example.com./") == "http://my-host_1.example.com./"


def test_normalize_url_ports_and_userinfo():
    assert extractors.normalize_url("https://example.com:443") == "https://example.com/"
    assert extractors.normalize_url("http://user:pw@example.com:8080/a") == "http://user:pw@example.com:8080/a"
    assert extractors.normalize_url("file:///tmp/trace.json") == "file:///tmp/trace.json"


def test_collect_urls_deduplicates_in_insertion_order():
    comments = [
        "https://b.example/one",
        "nothing",
        "https://a.example/two",
        "again https://b.example/one",
        "",
    ]
    urls = extractors.collect_urls(comments)
    assert list(urls) == ["https://b.example/one", "https://a.example/two"]

    extractors.collect_urls(["https://c.example/"], urls)
    assert list(urls)[-1] == "https://c.example/"
