from __future__ import annotations

import pytest

from blurhasher import classify as classify_module
from blurhasher.classify import (
    LOCAL_PATH_RULES,
    URL_RULES,
    SourceMode,
    apply_rules,
    classify_source,
    looks_like_local_path,
    looks_like_url,
    normalize_url,
    parse_host,
)


@pytest.mark.parametrize(
    "value",
    [
        "http://example.com",
        "https://example.com/image.jpg",
        "https://localhost/img.png",
        "http://C:/not/a/drive",
        "https:///usr/local/file.jpg",
    ],
)
def test_http_scheme_always_looks_like_url(value: str) -> None:
    assert looks_like_url(value) is True


@pytest.mark.parametrize(
    "value",
    ["www.example.com", "example.com/path", "subdomain.example.com", "example.com/image.jpg"],
)
def test_bare_domains_look_like_urls(value: str) -> None:
    assert looks_like_url(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "C:\\path\\to\\file.jpg",
        "/usr/local/file.jpg",
        "just-text",
        "",
        "example",
        "example.",
        ".example",
        "example.com\\images",
        "example.com:notaport/img.png",
    ],
)
def test_non_urls(value: str) -> None:
    assert looks_like_url(value) is False


@pytest.mark.parametrize(
    "value",
    [
        "C:\\Users\\test\\image.jpg",
        "/usr/local/images/test.jpg",
        "image.jpg",
        "my.complex.file.name.jpg",
        "images/photo.png",
        "images\\photo.png",
        "d:relative\\photo.png",
        "\\\\server\\share\\photo.png",
    ],
)
def test_local_paths(value: str) -> None:
    assert looks_like_local_path(value) is True


@pytest.mark.parametrize(
    "value",
    ["https://example.com/image.jpg", "", "noextension", ".hidden", ".", "..", "www.example.com"],
)
def test_non_local_paths(value: str) -> None:
    assert looks_like_local_path(value) is False


def test_url_rules_are_ordered_and_first_match_wins() -> None:
    assert [name for name, _ in URL_RULES] == [
        "http_scheme",
        "www_prefix",
        "leading_dot",
        "dotted_host",
    ]
    # ".example.com" parses with a dotted host, but the leading-dot rule runs first.
    assert parse_host(".example.com") == ".example.com"
    assert apply_rules(URL_RULES, ".example.com") == (False, "leading_dot")
    assert apply_rules(URL_RULES, "www.") == (True, "www_prefix")


def test_local_rules_are_ordered_and_report_deciding_rule() -> None:
    assert [name for name, _ in LOCAL_PATH_RULES] == [
        "absolute_path",
        "path_separator",
        "file_extension",
    ]
    assert apply_rules(LOCAL_PATH_RULES, "/tmp/x") == (True, "absolute_path")
    assert apply_rules(LOCAL_PATH_RULES, "a/b") == (True, "path_separator")
    assert apply_rules(LOCAL_PATH_RULES, "a.png") == (True, "file_extension")
    assert apply_rules(LOCAL_PATH_RULES, "plain") == (False, None)


def test_each_rule_defers_when_not_applicable() -> None:
    assert classify_module._has_http_scheme("example.com") is None
    assert classify_module._has_www_prefix("example.com") is None
    assert classify_module._has_leading_dot("example.com") is None
    assert classify_module._has_dotted_host("example") is None
    assert classify_module._is_absolute("relative.png") is None
    assert classify_module._has_separator("file.png") is None
    assert classify_module._has_separator("https://example.com/a.png") is None
    assert classify_module._has_file_extension("https://example.com/a.png") is None


def test_normalize_url_adds_https_only_without_scheme() -> None:
    assert normalize_url("example.com/a.png") == "https://example.com/a.png"
    assert normalize_url("www.example.com") == "https://www.example.com"
    assert normalize_url("http://example.com") == "http://example.com"
    assert normalize_url("ftp://example.com/a.png") == "ftp://example.com/a.png"


@pytest.mark.parametrize(
    "value, mode",
    [
        ("https://host.example/img.png", SourceMode.REMOTE),
        ("www.example.com", SourceMode.REMOTE),
        ("subdomain.example.com", SourceMode.LOCAL),
        ("photo.jpg", SourceMode.LOCAL),
        ("example.com/image.jpg", SourceMode.LOCAL),
        ("C:\\Users\\test\\image.jpg", SourceMode.LOCAL),
        ("just-text", SourceMode.LOCAL),
    ],
)
def test_classification_mode(value: str, mode: SourceMode) -> None:
    assert classify_source(value).mode is mode


def test_host_name_ambiguity_prefers_local() -> None:
    result = classify_source("host.name")
    assert result.looks_like_url is True
    assert result.looks_like_local_path is True
    assert result.mode is SourceMode.LOCAL


def test_package_exposes_classify_module() -> None:
    assert classify_module.URL_RULES is URL_RULES
    assert classify_module.classify_source("photo.jpg").mode is SourceMode.LOCAL
