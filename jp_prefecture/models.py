"""
Data models for prefecture bulk mapping.

This module defines the result structure produced for each mapped value.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .prefectures import Prefecture


MATCH_TYPES = ('exact', 'fuzzy', 'unmatched')


@dataclass
class MappingResult:
    """Represents the result of mapping one raw value to a prefecture."""

    source_value: Any
    prefecture: Optional[Prefecture]
    match_type: str  # 'exact', 'fuzzy', 'unmatched'
    match_score: Optional[float] = None
    alternative_matches: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate match type after initialization."""
        if self.match_type not in MATCH_TYPES:
            raise ValueError(f"Invalid match_type: {self.match_type}. "
                             f"Must be one of {', '.join(MATCH_TYPES)}")

        if self.match_type == 'unmatched' and self.prefecture is not None:
            raise ValueError("Unmatched results cannot carry a prefecture")

        if self.match_type != 'unmatched' and self.prefecture is None:
            raise ValueError(f"{self.match_type} results require a prefecture")

    def is_matched(self) -> bool:
        """Check if the value was successfully matched."""
        return self.prefecture is not None

    def get_confidence_level(self) -> str:
        """Get human-readable confidence level."""
        if self.match_type == 'exact':
            return 'High'
        elif self.match_type == 'fuzzy':
            if self.match_score is not None and self.match_score >= 95:
                return 'High'
            elif self.match_score is not None and self.match_score >= 85:
                return 'Medium'
            return 'Low'
        return 'None'

    def get_field(self, field_name: str) -> Any:
        """Return a prefecture field ('code', 'kanji', ...) or None when unmatched."""
        if self.prefecture is None:
            return None
        return getattr(self.prefecture, field_name)()

