"""
Tests for value cleaning helpers.
"""

import math

import pytest

from jp_prefecture.utils import normalize_prefecture_value, safe_int_conversion, safe_string_conversion


@pytest.mark.parametrize("value, expected", [
    ("13", 13),
    (" 13 ", 13),
    ("13.0", 13),
    (13.0, 13),
    (7, 7),
    ("13.00", 13),
    ("13.5", None),
    ("1e1", None),
    ("-3", None),
    ("tokyo", None),
    ("", None),
    (None, None),
    (math.nan, None),
    (True, None),
])
def test_safe_int_conversion(value, expected):
    assert safe_int_conversion(value) == expected


def test_safe_string_conversion():
    assert safe_string_conversion("  東京都 ") == "東京都"
    assert safe_string_conversion(None) == ""
    assert safe_string_conversion(math.nan) == ""
    assert safe_string_conversion(47) == "47"


@pytest.mark.parametrize("value, expected", [
    ("ＴＯＫＹＯ", "TOKYO"),
    ("１３", "13"),
    ("ﾄｳｷｮｳﾄ", "トウキョウト"),
    ("東京 都", "東京都"),
    ("　大阪府　", "大阪府"),
    (None, ""),
])
def test_normalize_prefecture_value(value, expected):
    assert normalize_prefecture_value(value) == expected
