"""
Fuzzy matching strategy for prefecture names.

This module provides the FuzzyMatcher class that scores a free-form value
against every name representation of every prefecture and returns the
closest prefectures as suggestions.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from rapidfuzz import fuzz, process

from ..data import NAME_FIELDS, PREFECTURE_RECORDS, PrefectureRecord


MIN_QUERY_LENGTH = 2

class FuzzyMatcher:
    """
    Performs fuzzy matching using a configurable similarity threshold.

    Choices are every name representation (kanji, kana and english, full and
    short) of every prefecture. English names are scored case-insensitively.
    """

    def __init__(self, threshold: int = 60,
                 records: Iterable[PrefectureRecord] = PREFECTURE_RECORDS,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the FuzzyMatcher.

        Args:
            threshold: Default minimum similarity score for matches (0-100)
            records: Prefecture rows to match against
            logger: Optional logger instance for logging operations
        """
        if not 0 <= threshold <= 100:
            raise ValueError("Threshold must be between 0 and 100")

        self.threshold = threshold
        self.logger = logger or logging.getLogger(__name__)

        self._choices: List[str] = []
        self._choice_codes: List[int] = []
        for record in records:
            for field_name in NAME_FIELDS:
                self._choices.append(getattr(record, field_name))
                self._choice_codes.append(record.code)

    def suggest(self, value: str, limit: int = 3,
                threshold: Optional[int] = None) -> List[Tuple[int, float]]:
        """
        Find the prefectures closest to a value.

        Args:
            value: Free-form prefecture name
            limit: Maximum number of prefectures to return
            threshold: Minimum score, defaults to the matcher threshold

        Returns:
            List of (prefecture code, score) tuples, best first, one entry
            per prefecture
        """
        if not isinstance(value, str) or not value.strip() or limit <= 0:
            return []

        query = value.strip()
        if query.isascii():
            query = query.lower()

        cutoff = self.threshold if threshold is None else threshold

        # Several representations of one prefecture can score; ask for all of
        # them and keep the best per code.
        candidates = process.extract(
            query,
            self._choices,
            scorer=fuzz.WRatio,
            score_cutoff=cutoff,
            limit=None
        )

        best_scores = {}
        for _, score, index in candidates:
            code = self._choice_codes[index]
            if score > best_scores.get(code, -1):
                best_scores[code] = score

        ranked = sorted(best_scores.items(), key=lambda item: (-item[1], item[0]))
        self.logger.debug(f"Fuzzy suggestions for '{value}': {ranked[:limit]}")
        return ranked[:limit]

    def match(self, value: str, threshold: Optional[int] = None) -> Optional[Tuple[int, float]]:
        """
        Return the single best (code, score) at or above the threshold.

        Returns None for queries shorter than MIN_QUERY_LENGTH and when the
        best score is shared by more than one prefecture.
        """
        if not isinstance(value, str) or len(value.strip()) < MIN_QUERY_LENGTH:
            return None

        suggestions = self.suggest(value, limit=2, threshold=threshold)
        if not suggestions:
            return None

        if len(suggestions) > 1 and suggestions[1][1] == suggestions[0][1]:
            self.logger.debug(f"Ambiguous fuzzy match for '{value}': {suggestions}")
            return None
        return suggestions[0]
