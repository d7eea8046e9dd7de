"""
Tests for the exact and fuzzy matchers.
"""

import pytest

from jp_prefecture.data import PREFECTURE_RECORDS, PrefectureRecord
from jp_prefecture.matching import ExactMatcher, FuzzyMatcher


class TestExactMatcher:

    @pytest.fixture
    def matcher(self):
        return ExactMatcher()

    def test_match_field(self, matcher):
        assert matcher.match_field('kanji', "沖縄県") == 47
        assert matcher.match_field('hiragana_short', "おきなわ") == 47
        assert matcher.match_field('kanji', "沖縄") is None

    def test_unknown_field(self, matcher):
        with pytest.raises(ValueError):
            matcher.match_field('romaji', "okinawa")

    def test_match_code(self, matcher):
        assert matcher.match_code(1) == 1
        assert matcher.match_code(0) is None

    def test_match_any(self, matcher):
        assert matcher.match_any("京都") == 26
        assert matcher.match_any("キョウトフ") == 26
        assert matcher.match_any("KYOTO") == 26
        assert matcher.match_any("きょうとけん") is None

    def test_duplicate_field_value_rejected(self):
        records = [
            PrefectureRecord(1, "甲県", "こうけん", "コウケン", "ko"),
            PrefectureRecord(2, "甲県", "おつけん", "オツケン", "otsu"),
        ]
        with pytest.raises(ValueError, match="Duplicate kanji"):
            ExactMatcher(records)

    def test_cross_field_collision_rejected(self):
        records = [
            PrefectureRecord(1, "甲県", "こうけん", "コウケン", "ko"),
            PrefectureRecord(2, "乙県", "ko", "オツケン", "otsu"),
        ]
        with pytest.raises(ValueError, match="shared by prefecture codes"):
            ExactMatcher(records)

    def test_same_prefecture_may_repeat_across_fields(self):
        # 北海道 has identical full and short names
        matcher = ExactMatcher(PREFECTURE_RECORDS[:1])
        assert matcher.match_any("北海道") == 1


class TestFuzzyMatcher:

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            FuzzyMatcher(threshold=101)

    def test_match(self):
        matcher = FuzzyMatcher(threshold=70)
        code, score = matcher.match("hokaido")
        assert code == 1
        assert 70 <= score < 100

    def test_exact_value_scores_100(self):
        code, score = FuzzyMatcher().match("愛知県")
        assert code == 23
        assert score == 100

    def test_threshold_override(self):
        matcher = FuzzyMatcher(threshold=0)
        assert matcher.match("hokaido", threshold=100) is None

    def test_case_insensitive_for_ascii(self):
        code, score = FuzzyMatcher().match("NAGANO")
        assert code == 20
        assert score == 100

    def test_zero_limit(self):
        assert FuzzyMatcher().suggest("nagano", limit=0) == []

    @pytest.mark.parametrize("value", ["a", "県", "沖"])
    def test_single_character_never_matches(self, value):
        assert FuzzyMatcher(threshold=0).match(value) is None

    @pytest.mark.parametrize("value", ["ka", "to"])
    def test_tied_best_score_is_ambiguous(self, value):
        matcher = FuzzyMatcher()
        top = matcher.suggest(value, limit=2)
        assert len(top) == 2 and top[0][1] == top[1][1]
        assert matcher.match(value) is None
