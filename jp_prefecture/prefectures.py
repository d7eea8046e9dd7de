"""
Japanese prefectures.

The Prefecture enum has one member per prefecture, valued by its JIS X 0401
code. The find_by_* functions resolve a single representation back to a
member and raise InvalidPrefectureName / InvalidPrefectureCode when nothing
matches.

Example:
    >>> tokyo = find_by_kanji("東京都")
    >>> tokyo
    <Prefecture.TOKYO: 13>
    >>> tokyo.kanji_short()
    '東京'
    >>> tokyo.english()
    'tokyo'
"""

from enum import Enum
from typing import Any, Dict, List, Tuple

from .data import RECORDS_BY_CODE, PrefectureRecord
from .exceptions import InvalidPrefectureCode, InvalidPrefectureName
from .matching import ExactMatcher, FuzzyMatcher


class Prefecture(Enum):
    """A Japanese prefecture."""

    HOKKAIDO = 1
    AOMORI = 2
    IWATE = 3
    MIYAGI = 4
    AKITA = 5
    YAMAGATA = 6
    FUKUSHIMA = 7
    IBARAKI = 8
    TOCHIGI = 9
    GUNMA = 10
    SAITAMA = 11
    CHIBA = 12
    TOKYO = 13
    KANAGAWA = 14
    NIIGATA = 15
    TOYAMA = 16
    ISHIKAWA = 17
    FUKUI = 18
    YAMANASHI = 19
    NAGANO = 20
    GIFU = 21
    SHIZUOKA = 22
    AICHI = 23
    MIE = 24
    SHIGA = 25
    KYOTO = 26
    OSAKA = 27
    HYOGO = 28
    NARA = 29
    WAKAYAMA = 30
    TOTTORI = 31
    SHIMANE = 32
    OKAYAMA = 33
    HIROSHIMA = 34
    YAMAGUCHI = 35
    TOKUSHIMA = 36
    KAGAWA = 37
    EHIME = 38
    KOCHI = 39
    FUKUOKA = 40
    SAGA = 41
    NAGASAKI = 42
    KUMAMOTO = 43
    OITA = 44
    MIYAZAKI = 45
    KAGOSHIMA = 46
    OKINAWA = 47

    @property
    def record(self) -> PrefectureRecord:
        return RECORDS_BY_CODE[self.value]

    def code(self) -> int:
        """JIS X 0401 code, e.g. 13 for Tokyo."""
        return self.value

    def kanji(self) -> str:
        """Full name in kanji, e.g. '東京都'."""
        return self.record.kanji

    def kanji_short(self) -> str:
        """Kanji name without 都/府/県, e.g. '東京'."""
        return self.record.kanji_short

    def hiragana(self) -> str:
        """Full name in hiragana, e.g. 'とうきょうと'."""
        return self.record.hiragana

    def hiragana_short(self) -> str:
        """Hiragana name without the suffix reading, e.g. 'とうきょう'."""
        return self.record.hiragana_short

    def katakana(self) -> str:
        """Full name in katakana, e.g. 'トウキョウト'."""
        return self.record.katakana

    def katakana_short(self) -> str:
        """Katakana name without the suffix reading, e.g. 'トウキョウ'."""
        return self.record.katakana_short

    def english(self) -> str:
        """Lowercase romanized name, e.g. 'tokyo'."""
        return self.record.english

    def to_dict(self) -> Dict[str, Any]:
        """Convert prefecture to dictionary for serialization."""
        return {
            'code': self.code(),
            'kanji': self.kanji(),
            'kanji_short': self.kanji_short(),
            'hiragana': self.hiragana(),
            'hiragana_short': self.hiragana_short(),
            'katakana': self.katakana(),
            'katakana_short': self.katakana_short(),
            'english': self.english(),
        }


_exact_matcher = ExactMatcher()
_fuzzy_matcher = FuzzyMatcher()


def _find_by_field(field_name: str, value: Any) -> Prefecture:
    if not isinstance(value, str):
        raise InvalidPrefectureName(value)

    code = _exact_matcher.match_field(field_name, value)
    if code is None:
        raise InvalidPrefectureName(value)
    return Prefecture(code)


def find_by_code(code: int) -> Prefecture:
    """
    Find a prefecture by JIS X 0401 code.

    Raises:
        InvalidPrefectureCode: If code is not an integer in 1..47
    """
    # bool is an int subclass but never a valid code
    if not isinstance(code, int) or isinstance(code, bool):
        raise InvalidPrefectureCode(code)

    if _exact_matcher.match_code(code) is None:
        raise InvalidPrefectureCode(code)
    return Prefecture(code)


def find_by_kanji(kanji: str) -> Prefecture:
    """
    Find a prefecture by its full kanji name ('東京都').

    Raises:
        InvalidPrefectureName: If no prefecture has this name
    """
    return _find_by_field('kanji', kanji)


def find_by_kanji_short(kanji_short: str) -> Prefecture:
    """Find a prefecture by its short kanji name ('東京')."""
    return _find_by_field('kanji_short', kanji_short)


def find_by_hiragana(hiragana: str) -> Prefecture:
    """Find a prefecture by its full hiragana name ('とうきょうと')."""
    return _find_by_field('hiragana', hiragana)


def find_by_hiragana_short(hiragana_short: str) -> Prefecture:
    """Find a prefecture by its short hiragana name ('とうきょう')."""
    return _find_by_field('hiragana_short', hiragana_short)


def find_by_katakana(katakana: str) -> Prefecture:
    """Find a prefecture by its full katakana name ('トウキョウト')."""
    return _find_by_field('katakana', katakana)


def find_by_katakana_short(katakana_short: str) -> Prefecture:
    """Find a prefecture by its short katakana name ('トウキョウ')."""
    return _find_by_field('katakana_short', katakana_short)


def find_by_english(english: str) -> Prefecture:
    """
    Find a prefecture by its romanized name.

    The comparison ignores case: 'tokyo', 'Tokyo' and 'TOKYO' all resolve
    to Prefecture.TOKYO.

    Raises:
        InvalidPrefectureName: If no prefecture has this name
    """
    if not isinstance(english, str):
        raise InvalidPrefectureName(english)

    code = _exact_matcher.match_field('english', english.lower())
    if code is None:
        raise InvalidPrefectureName(english)
    return Prefecture(code)


def find(value: str) -> Prefecture:
    """
    Find a prefecture by any of its names.

    Accepts full or short kanji, hiragana or katakana, or the english name
    in any case.

    Raises:
        InvalidPrefectureName: If the value matches no representation
    """
    if not isinstance(value, str):
        raise InvalidPrefectureName(value)

    code = _exact_matcher.match_any(value)
    if code is None:
        raise InvalidPrefectureName(value)
    return Prefecture(code)


def suggest(value: str, limit: int = 3, threshold: int = 60) -> List[Tuple[Prefecture, float]]:
    """
    Suggest prefectures whose names are close to value.

    Args:
        value: Free-form name, typically one that failed an exact lookup
        limit: Maximum number of suggestions
        threshold: Minimum similarity score (0-100)

    Returns:
        List of (Prefecture, score) tuples, best first
    """
    return [
        (Prefecture(code), score)
        for code, score in _fuzzy_matcher.suggest(value, limit=limit, threshold=threshold)
    ]
