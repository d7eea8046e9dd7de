"""
Configuration management for prefecture bulk mapping.

This module provides dataclasses for the mapping run configuration
(input file, target column, matching parameters, output and logging options)
and for the statistics collected while mapping.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import os
from pathlib import Path

from .data import ALL_FIELDS


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MappingConfig:
    """Configuration class for prefecture mapping parameters."""

    # Input configuration
    input_file: str
    output_directory: str
    column: str

    # Fuzzy matching
    fuzzy_threshold: int = 85
    enable_fuzzy_matching: bool = True
    max_alternatives: int = 3

    # Prefecture fields appended to each row as prefecture_<field>
    output_fields: List[str] = field(default_factory=lambda: ['code', 'kanji', 'english'])

    encoding: str = "utf-8"
    show_progress: bool = False

    # Logging configuration
    log_level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_paths()
        self._validate_matching()
        self._validate_output_fields()
        self._validate_log_level()
        self._ensure_output_directory()

    def _validate_paths(self):
        """Validate that the input file exists."""
        if not os.path.exists(self.input_file):
            raise FileNotFoundError(f"Input file not found: {self.input_file}")

    def _validate_matching(self):
        if not self.column:
            raise ValueError("A column to map must be specified")

        if not 0 <= self.fuzzy_threshold <= 100:
            raise ValueError(f"Fuzzy threshold must be between 0 and 100: {self.fuzzy_threshold}")

        if self.max_alternatives < 0:
            raise ValueError(f"max_alternatives must not be negative: {self.max_alternatives}")

    def _validate_output_fields(self):
        if not self.output_fields:
            raise ValueError("At least one output field must be specified")

        unknown = [name for name in self.output_fields if name not in ALL_FIELDS]
        if unknown:
            raise ValueError(
                f"Unknown output fields: {', '.join(unknown)}. "
                f"Valid fields: {', '.join(ALL_FIELDS)}"
            )

    def _validate_log_level(self):
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {self.log_level}")

    def _ensure_output_directory(self):
        """Create output directory if it doesn't exist."""
        Path(self.output_directory).mkdir(parents=True, exist_ok=True)

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'MappingConfig':
        """Create configuration from dictionary."""
        return cls(**config_dict)

    def to_dict(self) -> Dict:
        """Convert configuration to dictionary."""
        return {
            'input_file': self.input_file,
            'output_directory': self.output_directory,
            'column': self.column,
            'fuzzy_threshold': self.fuzzy_threshold,
            'enable_fuzzy_matching': self.enable_fuzzy_matching,
            'max_alternatives': self.max_alternatives,
            'output_fields': list(self.output_fields),
            'encoding': self.encoding,
            'show_progress': self.show_progress,
            'log_level': self.log_level,
            'log_file': self.log_file
        }


@dataclass
class ProcessingStats:
    """Statistics tracking for mapping process."""

    total_values: int = 0
    unique_values: int = 0
    exact_matches: int = 0
    fuzzy_matches: int = 0
    unmatched: int = 0
    processing_time: float = 0.0

    def get_match_rate(self) -> float:
        """Calculate overall match rate percentage."""
        if self.total_values == 0:
            return 0.0

        return (self.exact_matches + self.fuzzy_matches) / self.total_values * 100

    def get_fuzzy_match_rate(self) -> float:
        if self.total_values == 0:
            return 0.0

        return self.fuzzy_matches / self.total_values * 100
