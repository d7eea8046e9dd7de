"""
Mapping orchestration engine for prefecture bulk mapping.

This module provides the MappingEngine class that resolves every value of a
CSV column to a prefecture: integer codes and exact names first, then a
fuzzy fallback, leaving the rest unmatched with suggested alternatives.
"""

import dataclasses
import time
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Tuple

import pandas as pd
from tqdm import tqdm

from .config import MappingConfig, ProcessingStats
from .data_loader import DataLoader
from .exceptions import InvalidPrefectureCode, InvalidPrefectureName
from .logging_config import MappingLogger
from .matching import FuzzyMatcher
from .models import MappingResult
from .output import OutputGenerator
from .prefectures import Prefecture, find, find_by_code
from .utils.data_utils import normalize_prefecture_value, safe_int_conversion


# Alternatives listed for unmatched values may score below the fuzzy threshold
MIN_ALTERNATIVE_SCORE = 50


class MappingEngine:
    """
    Orchestrates the mapping of raw prefecture values.

    Values are normalized (NFKC, whitespace removed) before matching and each
    distinct normalized value is resolved only once per engine.
    """

    def __init__(self, config: MappingConfig, logger: Optional[MappingLogger] = None):
        """
        Initialize the MappingEngine.

        Args:
            config: Configuration object with mapping parameters
            logger: Optional logger instance for logging operations
        """
        self.config = config
        self.logger = logger or MappingLogger(level=config.log_level)
        self.data_loader = DataLoader(logger=self.logger.logger, encoding=config.encoding)
        self.fuzzy_matcher = FuzzyMatcher(threshold=config.fuzzy_threshold, logger=self.logger.logger)

        self.processing_stats = ProcessingStats()
        self._resolution_cache: Dict[str, MappingResult] = {}

    def run(self) -> Tuple[pd.DataFrame, ProcessingStats, Dict[str, str]]:
        """
        Load the input file, map its configured column and write the outputs.

        Returns:
            Tuple of (DataFrame with prefecture columns appended, processing
            statistics, dictionary of generated output files)
        """
        self.logger.log_phase_start("Data Loading")
        df = self.data_loader.load(self.config.input_file, self.config.column)

        self.logger.log_processing_start(self.config.input_file, self.config.column, len(df))
        self.logger.log_phase_start("Prefecture Matching")
        mapped_df = self.map_dataframe(df)
        self.logger.log_processing_complete(self.processing_stats)

        self.logger.log_phase_start("Output Generation")
        output_generator = OutputGenerator(self.config, self.logger)
        generated_files = output_generator.generate_all_outputs(mapped_df, self.processing_stats)

        return mapped_df, self.processing_stats, generated_files

    def map_dataframe(self, df: pd.DataFrame, column: Optional[str] = None) -> pd.DataFrame:
        """
        Map one column of a DataFrame and append the result columns.

        Appends prefecture_<field> for every configured output field, plus
        match_type, match_score, match_confidence and alternative_matches.
        Unmatched cells hold None (pd.NA for the nullable code column). The
        input DataFrame is not modified.

        Args:
            df: DataFrame holding raw prefecture values
            column: Column to map, defaults to the configured column

        Returns:
            New DataFrame with result columns appended
        """
        column = column or self.config.column
        if column not in df.columns:
            raise KeyError(f"Column '{column}' not found in DataFrame")

        results = self.map_values(df[column].tolist())

        mapped_df = df.copy()
        for field_name in self.config.output_fields:
            values = [result.get_field(field_name) for result in results]
            dtype = "Int64" if field_name == 'code' else object
            mapped_df[f"prefecture_{field_name}"] = pd.Series(values, index=mapped_df.index, dtype=dtype)

        mapped_df['match_type'] = [result.match_type for result in results]
        mapped_df['match_score'] = [result.match_score for result in results]
        mapped_df['match_confidence'] = [result.get_confidence_level() for result in results]
        mapped_df['alternative_matches'] = ['; '.join(result.alternative_matches) for result in results]
        return mapped_df

    def map_values(self, values: Iterable[Any]) -> List[MappingResult]:
        """
        Map a sequence of raw values and record statistics for the run.

        Args:
            values: Raw prefecture values (names, codes, or nulls)

        Returns:
            One MappingResult per input value, in input order
        """
        start_time = time.time()
        stats = ProcessingStats()
        seen = set()
        unmatched_values = Counter()
        results = []

        for value in tqdm(values, desc="Mapping prefectures", disable=not self.config.show_progress):
            result = self.map_value(value)
            results.append(result)

            normalized = normalize_prefecture_value(value)
            stats.total_values += 1
            seen.add(normalized)
            if not result.is_matched():
                stats.unmatched += 1
                unmatched_values[normalized] += 1
            elif result.match_type == 'exact':
                stats.exact_matches += 1
            else:
                stats.fuzzy_matches += 1

        stats.unique_values = len(seen)
        stats.processing_time = time.time() - start_time
        self.processing_stats = stats

        self.logger.log_match_statistics(stats, fuzzy_enabled=self.config.enable_fuzzy_matching)
        if unmatched_values:
            self.logger.log_unmatched_values(unmatched_values)

        return results

    def map_value(self, value: Any) -> MappingResult:
        """Map a single raw value to a prefecture."""
        normalized = normalize_prefecture_value(value)

        cached = self._resolution_cache.get(normalized)
        if cached is None:
            cached = self._resolve(normalized)
            self._resolution_cache[normalized] = cached

        return dataclasses.replace(cached, source_value=value)

    def _resolve(self, normalized: str) -> MappingResult:
        if not normalized:
            return MappingResult(source_value=normalized, prefecture=None, match_type='unmatched')

        code = safe_int_conversion(normalized)
        if code is not None:
            try:
                return MappingResult(normalized, find_by_code(code), 'exact', 100.0)
            except InvalidPrefectureCode:
                self.logger.debug(f"Code out of range: {normalized}")
                return MappingResult(source_value=normalized, prefecture=None, match_type='unmatched')

        try:
            return MappingResult(normalized, find(normalized), 'exact', 100.0)
        except InvalidPrefectureName:
            pass

        if self.config.enable_fuzzy_matching:
            best = self.fuzzy_matcher.match(normalized)
            if best is not None:
                prefecture, score = Prefecture(best[0]), best[1]
                self.logger.debug(f"Fuzzy match '{normalized}' -> {prefecture.kanji()} ({score:.1f})")
                return MappingResult(normalized, prefecture, 'fuzzy', round(score, 2))

        alternatives = [
            f"{Prefecture(code).kanji()} ({score:.1f})"
            for code, score in self.fuzzy_matcher.suggest(
                normalized, limit=self.config.max_alternatives, threshold=MIN_ALTERNATIVE_SCORE
            )
        ]
        return MappingResult(
            source_value=normalized,
            prefecture=None,
            match_type='unmatched',
            alternative_matches=alternatives
        )
