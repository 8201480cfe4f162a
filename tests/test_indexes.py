from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the jokes_api package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jokes_api.domain.indexes import in_bounds, is_valid_index_token, parse_index  # noqa: E402


@pytest.mark.parametrize("value,expected", [("0", 0), ("10", 10), ("007", 7), ("19", 19), ("-0", 0), ("-000", 0)])
def test_parse_index_in_bounds(value, expected):
    assert parse_index(value, 20) == expected


@pytest.mark.parametrize("value", ["20", "999", "-1", "-3", "0020", "9" * 5000, "-" + "9" * 5000])
def test_parse_index_out_of_bounds(value):
    assert parse_index(value, 20) is None


def test_parse_index_on_empty_sequence():
    assert parse_index("0", 0) is None


def test_parse_index_long_zero_padded_token():
    assert parse_index("0" * 5000 + "5", 20) == 5


@pytest.mark.parametrize("value", [None, "", "-", "abc", "1e3", "²", "12a"])
def test_invalid_tokens(value):
    assert not is_valid_index_token(value)
    with pytest.raises(ValueError):
        parse_index(value, 20)


def test_in_bounds():
    assert in_bounds(0, 1)
    assert not in_bounds(1, 1)
    assert not in_bounds(-1, 5)
    assert not in_bounds(0, 0)
