"""
Exact matching strategy for prefecture lookups.

This module provides the ExactMatcher class that resolves a value to a
prefecture code through read-only indexes built once over the static table.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from ..data import NAME_FIELDS, PREFECTURE_RECORDS, PrefectureRecord


class ExactMatcher:
    """
    Performs exact matching against each identifying field of the table.

    One index is kept per field (kanji, hiragana, english, ...) plus a
    combined index over every name representation. Building an index fails
    if two prefectures share a value, so a bad table never loads.
    """

    def __init__(self, records: Iterable[PrefectureRecord] = PREFECTURE_RECORDS,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the ExactMatcher and build its indexes.

        Args:
            records: Prefecture rows to index
            logger: Optional logger instance for logging operations
        """
        self.logger = logger or logging.getLogger(__name__)
        self.records = tuple(records)

        self._code_index = self._build_index('code')
        self._field_indexes: Dict[str, Mapping[str, int]] = {
            field_name: self._build_index(field_name) for field_name in NAME_FIELDS
        }
        self._combined_index = self._build_combined_index()

        self.logger.debug(
            f"Built exact match indexes for {len(self.records)} prefectures "
            f"({len(self._combined_index)} distinct names)"
        )

    def _build_index(self, field_name: str) -> Mapping:
        index = {}
        for record in self.records:
            key = getattr(record, field_name)
            if key in index:
                raise ValueError(
                    f"Duplicate {field_name} '{key}' for prefecture codes "
                    f"{index[key]} and {record.code}"
                )
            index[key] = record.code
        return MappingProxyType(index)

    def _build_combined_index(self) -> Mapping[str, int]:
        """Merge every name index; a key may repeat only for the same prefecture."""
        combined = {}
        for field_name, index in self._field_indexes.items():
            for key, code in index.items():
                if combined.get(key, code) != code:
                    raise ValueError(
                        f"Name '{key}' ({field_name}) is shared by prefecture codes "
                        f"{combined[key]} and {code}"
                    )
                combined[key] = code
        return MappingProxyType(combined)

    def match_code(self, code: int) -> Optional[int]:
        """Return the code if it exists in the table."""
        return self._code_index.get(code)

    def match_field(self, field_name: str, value: str) -> Optional[int]:
        """
        Look up a value in the index of a single field.

        Args:
            field_name: One of the name fields (kanji, hiragana_short, english, ...)
            value: Value to look up, compared as-is

        Returns:
            Prefecture code if found, None otherwise
        """
        if field_name not in self._field_indexes:
            raise ValueError(f"Unknown prefecture field: {field_name}")
        return self._field_indexes[field_name].get(value)

    def match_any(self, value: str) -> Optional[int]:
        """Look up a value against every name representation."""
        code = self._combined_index.get(value)
        if code is None and value.isascii():
            code = self._field_indexes['english'].get(value.lower())
        return code
