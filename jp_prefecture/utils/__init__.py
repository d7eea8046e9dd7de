"""
Utility functions and helpers.
"""

from .data_utils import (
    safe_int_conversion,
    safe_string_conversion,
    normalize_prefecture_value
)

__all__ = [
    'safe_int_conversion',
    'safe_string_conversion',
    'normalize_prefecture_value'
]
