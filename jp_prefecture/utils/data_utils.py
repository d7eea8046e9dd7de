"""
Data utility functions for type conversions and null handling.

This module provides utility functions for cleaning raw cell values before
they are matched against the prefecture table.
"""

import re
import unicodedata
from typing import Any, Optional

import pandas as pd


INTEGER_PATTERN = re.compile(r"([0-9]+)(?:\.0+)?")


def safe_int_conversion(value: Any) -> Optional[int]:
    """
    Safely convert a value to integer, handling nulls and invalid values.

    Strings must be plain digits, optionally followed by a zero fraction
    ("13", "13.0"). Signs, exponents ("1e1") and other fractions give None.

    Args:
        value: Value to convert to integer

    Returns:
        Integer value or None if conversion fails
    """
    if value is None or isinstance(value, bool):
        return None
    if pd.isna(value) or value == '':
        return None

    if isinstance(value, str):
        match = INTEGER_PATTERN.fullmatch(value.strip())
        return int(match.group(1)) if match else None

    try:
        number = float(value)
    except (ValueError, TypeError):
        return None

    if not number.is_integer():
        return None
    return int(number)


def safe_string_conversion(value: Any) -> str:
    """
    Safely convert a value to string, handling nulls and cleaning whitespace.

    Args:
        value: Value to convert to string

    Returns:
        Cleaned string value or empty string if null
    """
    if value is None or pd.isna(value):
        return ""

    return str(value).strip()


def normalize_prefecture_value(value: Any) -> str:
    """
    Normalize a raw prefecture value for matching.

    NFKC folds full-width latin letters and digits ('ＴＯＫＹＯ', '１３') and
    half-width katakana to their canonical forms. Whitespace, including the
    ideographic space, is removed.

    Args:
        value: Raw cell value

    Returns:
        Normalized string, empty if the value is null
    """
    text = safe_string_conversion(value)
    if not text:
        return ""

    text = unicodedata.normalize('NFKC', text)
    return ''.join(text.split())
