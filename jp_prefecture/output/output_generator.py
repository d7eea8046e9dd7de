"""
Output generation for prefecture bulk mapping.

This module provides the OutputGenerator class that writes the mapped CSV,
a CSV of unmatched values and a plain-text summary report, each named with
the run timestamp.
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from ..config import MappingConfig, ProcessingStats
from ..exceptions import OutputGenerationError
from ..logging_config import MappingLogger


class OutputGenerator:
    """Writes mapping results to the configured output directory."""

    def __init__(self, config: MappingConfig, logger: Optional[MappingLogger] = None):
        """
        Initialize the OutputGenerator.

        Args:
            config: Configuration object with output directory and settings
            logger: Optional logger instance for logging operations
        """
        self.config = config
        self.logger = logger or MappingLogger(level=config.log_level)
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

        Path(self.config.output_directory).mkdir(parents=True, exist_ok=True)

        self.file_patterns = {
            'mapped': 'mapped_{timestamp}.csv',
            'unmatched': 'unmatched_{timestamp}.csv',
            'summary_report': 'mapping_summary_report_{timestamp}.txt'
        }

    def _output_path(self, output_type: str) -> str:
        filename = self.file_patterns[output_type].format(timestamp=self.timestamp)
        return os.path.join(self.config.output_directory, filename)

    def generate_all_outputs(self, mapped_df: pd.DataFrame,
                             processing_stats: ProcessingStats) -> Dict[str, str]:
        """
        Generate all output files for a mapping run.

        Args:
            mapped_df: DataFrame returned by MappingEngine.map_dataframe
            processing_stats: Processing statistics object

        Returns:
            Dictionary mapping output type to generated file path
        """
        self.logger.info("Starting output file generation")
        generated_files = {}

        generated_files['mapped'] = self._write_csv('mapped', mapped_df)

        unmatched_df = mapped_df[mapped_df['match_type'] == 'unmatched']
        if unmatched_df.empty:
            self.logger.info("No unmatched values, skipping unmatched file")
        else:
            columns = [self.config.column, 'alternative_matches']
            unmatched_summary = (
                unmatched_df[columns]
                .groupby(columns, dropna=False)
                .size()
                .reset_index(name='occurrences')
                .sort_values('occurrences', ascending=False)
            )
            generated_files['unmatched'] = self._write_csv('unmatched', unmatched_summary)

        generated_files['summary_report'] = self._generate_summary_report(processing_stats)

        self.logger.info(f"Generated {len(generated_files)} output files")
        return generated_files

    def _write_csv(self, output_type: str, df: pd.DataFrame) -> str:
        file_path = self._output_path(output_type)
        try:
            df.to_csv(file_path, index=False, encoding='utf-8')
        except OSError as e:
            raise OutputGenerationError(
                f"Failed to write {output_type} file: {e}",
                output_type=output_type,
                output_path=file_path,
                record_count=len(df),
                original_error=e
            )

        self.logger.log_output_written(output_type, file_path, len(df))
        return file_path

    def _generate_summary_report(self, processing_stats: ProcessingStats) -> str:
        """
        Generate text summary report.

        Args:
            processing_stats: Processing statistics

        Returns:
            Path to generated summary report file
        """
        file_path = self._output_path('summary_report')
        total = processing_stats.total_values

        def rate(count: int) -> float:
            return (count / total * 100) if total > 0 else 0

        lines = [
            "PREFECTURE MAPPING SUMMARY REPORT",
            "=" * 50,
            "",
            f"Report Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            f"Processing Time: {processing_stats.processing_time:.2f} seconds",
            "Configuration:",
            f"  Input File: {self.config.input_file}",
            f"  Column: {self.config.column}",
            f"  Fuzzy Matching: {'enabled' if self.config.enable_fuzzy_matching else 'disabled'}",
            f"  Fuzzy Threshold: {self.config.fuzzy_threshold}",
            "",
            "MATCHING RESULTS",
            "-" * 16,
            f"Total Values: {total:,}",
            f"Distinct Values: {processing_stats.unique_values:,}",
            f"Exact Matches: {processing_stats.exact_matches:,} ({rate(processing_stats.exact_matches):.2f}%)",
            f"Fuzzy Matches: {processing_stats.fuzzy_matches:,} ({processing_stats.get_fuzzy_match_rate():.2f}%)",
            f"Unmatched: {processing_stats.unmatched:,} ({rate(processing_stats.unmatched):.2f}%)",
            f"Overall Match Rate: {processing_stats.get_match_rate():.2f}%",
            "",
        ]

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write("\n".join(lines))
        except OSError as e:
            raise OutputGenerationError(
                f"Failed to write summary report: {e}",
                output_type='summary_report',
                output_path=file_path,
                original_error=e
            )

        self.logger.info(f"Generated summary report: {file_path}")
        return file_path
