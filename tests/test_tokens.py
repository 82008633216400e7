"""Tests for the shared line/token helpers."""

import pytest

from bbox_engine.tokens import (
    is_digits,
    is_normalized,
    majority_match,
    parse_number,
    parse_numbers,
    split_lines,
)


def test_split_lines_handles_crlf_and_blank_lines():
    assert split_lines("a b\r\n\r\n  c d  \n\n") == ["a b", "c d"]


def test_split_lines_empty():
    assert split_lines("   \n\n") == []


@pytest.mark.parametrize("token,expected", [
    ("10", 10.0),
    ("-2.5", -2.5),
    ("1e3", 1000.0),
    ("abc", None),
    ("inf", None),
    ("nan", None),
    ("1_000", None),
])
def test_parse_number(token, expected):
    assert parse_number(token) == expected


def test_parse_numbers_rejects_any_bad_token():
    assert parse_numbers(["1", "2", "x"]) is None
    assert parse_numbers(["1", "2"]) == [1.0, 2.0]


@pytest.mark.parametrize("token,expected", [
    ("42", True),
    ("0", True),
    ("4.2", False),
    ("-4", False),
    ("", False),
])
def test_is_digits(token, expected):
    assert is_digits(token) is expected


@pytest.mark.parametrize("token,expected", [
    ("0", True),
    ("1", True),
    ("0.5", True),
    ("1.01", False),
    ("-0.1", False),
    ("x", False),
])
def test_is_normalized(token, expected):
    assert is_normalized(token) is expected


class TestMajorityMatch:
    def test_half_rounded_up_is_enough(self):
        lines = ["yes", "no", "yes"]
        assert majority_match(lines, lambda line: line == "yes")

    def test_exactly_half_of_even_count(self):
        assert majority_match(["yes", "no"], lambda line: line == "yes")

    def test_below_half(self):
        assert not majority_match(["yes", "no", "no"], lambda line: line == "yes")

    def test_no_lines_never_match(self):
        assert not majority_match([], lambda line: True)
