"""Testes da normalização de headers do envelope."""

from __future__ import annotations

import pytest

from app.domain.relay import HeaderLines, HeaderMapping
from app.services.relay_headers import normalize_headers, parse_header_line

DEFAULTS = {"Accept": "application/json", "Content-Type": "application/json"}


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("Content-Type: text/plain", ("Content-Type", "text/plain")),
        ("  X-Key :  abc  ", ("X-Key", "abc")),
        ("X-Time: 12:30:00", ("X-Time", "12:30:00")),
        ("X-Empty:", ("X-Empty", "")),
        ("no colon here", None),
        (": value-without-name", None),
        ("", None),
    ],
)
def test_parse_header_line(line: str, expected: tuple[str, str] | None) -> None:
    assert parse_header_line(line) == expected


def test_lines_are_split_on_first_colon() -> None:
    headers = normalize_headers(HeaderLines(lines=("Authorization: Bearer a:b", "X-Id: 7")))
    assert headers == {"Authorization": "Bearer a:b", "X-Id": "7"}


def test_malformed_lines_are_skipped() -> None:
    headers = normalize_headers(HeaderLines(lines=("garbage", "X-Ok: 1")))
    assert headers == {"X-Ok": "1"}


def test_empty_spec_gets_json_defaults() -> None:
    assert normalize_headers(HeaderLines()) == DEFAULTS
    assert normalize_headers(HeaderMapping()) == DEFAULTS


def test_only_malformed_lines_gets_json_defaults() -> None:
    assert normalize_headers(HeaderLines(lines=("garbage", "also garbage"))) == DEFAULTS


def test_defaults_are_a_fresh_copy() -> None:
    headers = normalize_headers(HeaderLines())
    headers["X-Mutated"] = "1"
    assert "X-Mutated" not in normalize_headers(HeaderLines())


def test_custom_headers_replace_defaults_entirely() -> None:
    headers = normalize_headers(HeaderLines(lines=("Content-Type: text/plain",)))
    assert headers == {"Content-Type": "text/plain"}


def test_duplicate_names_last_wins_case_insensitively() -> None:
    headers = normalize_headers(HeaderLines(lines=("x-token: first", "X-Token: second")))
    assert headers == {"X-Token": "second"}


def test_mapping_entries_pass_through() -> None:
    spec = HeaderMapping(entries=(("Authorization", "Bearer t"), (" ", "ignored"), ("X-Empty", "")))
    assert normalize_headers(spec) == {"Authorization": "Bearer t", "X-Empty": ""}
