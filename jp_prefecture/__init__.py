"""
jp_prefecture - lookup utilities for Japanese prefectures.

This package maps the 47 prefectures between their codes and their kanji,
kana and english names, and provides tooling for mapping a CSV column of
free-form prefecture values to canonical codes.
"""

from .exceptions import InvalidPrefectureCode, InvalidPrefectureName, PrefectureError
from .prefectures import (
    Prefecture,
    find,
    find_by_code,
    find_by_english,
    find_by_hiragana,
    find_by_hiragana_short,
    find_by_kanji,
    find_by_kanji_short,
    find_by_katakana,
    find_by_katakana_short,
    suggest,
)

__version__ = "1.0.0"
__author__ = "Data Analytics Team"

__all__ = [
    'Prefecture',
    'PrefectureError',
    'InvalidPrefectureCode',
    'InvalidPrefectureName',
    'find',
    'find_by_code',
    'find_by_english',
    'find_by_hiragana',
    'find_by_hiragana_short',
    'find_by_kanji',
    'find_by_kanji_short',
    'find_by_katakana',
    'find_by_katakana_short',
    'suggest',
]
