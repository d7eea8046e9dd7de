"""
Matching strategy components.
"""

from .exact_matcher import ExactMatcher
from .fuzzy_matcher import FuzzyMatcher

__all__ = ['ExactMatcher', 'FuzzyMatcher']
