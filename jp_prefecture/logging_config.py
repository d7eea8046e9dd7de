"""
Logging configuration for prefecture bulk mapping.

The mapping engine, output generator and CLI share one MappingLogger. It
writes to stdout and, for mapping runs, to a log file in the output
directory.
"""

import logging
import sys
from pathlib import Path
from typing import Mapping, Optional
from datetime import datetime


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Most frequent unmatched values listed after a run
UNMATCHED_SAMPLE_SIZE = 10


class MappingLogger:
    """Logger for prefecture mapping runs."""

    def __init__(self, name: str = "jp_prefecture", level: str = "INFO",
                 log_file: Optional[str] = None):
        """
        Initialize the mapping logger.

        Handlers from a previous MappingLogger of the same name are replaced.

        Args:
            name: Logger name
            level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_file: Optional UTF-8 log file, appended to
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        handlers = [logging.StreamHandler(sys.stdout)]
        if log_file:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def close(self):
        """Close and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    def info(self, message: str):
        self.logger.info(message)

    def debug(self, message: str):
        self.logger.debug(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str):
        self.logger.error(message)

    def log_processing_start(self, input_file: str, column: str, row_count: int):
        """Log the input file and column of a mapping run."""
        self.info("=" * 60)
        self.info("PREFECTURE MAPPING STARTED")
        self.info("=" * 60)
        self.info(f"Input file: {input_file}")
        self.info(f"Mapping column '{column}' across {row_count:,} rows")

    def log_processing_complete(self, stats):
        """Log the final counts of a mapping run."""
        self.info("=" * 60)
        self.info("PREFECTURE MAPPING COMPLETED")
        self.info("=" * 60)
        self.info(f"Values: {stats.total_values:,} ({stats.unique_values:,} distinct)")
        self.info(f"Overall match rate: {stats.get_match_rate():.2f}%")
        self.info(f"Processing time: {stats.processing_time:.2f} seconds")

    def log_phase_start(self, phase_name: str):
        self.info("-" * 40)
        self.info(f"Starting {phase_name}")
        self.info("-" * 40)

    def log_match_statistics(self, stats, fuzzy_enabled: bool = True):
        """Log exact, fuzzy and unmatched counts with their share of all values."""
        total = stats.total_values
        exact_rate = (stats.exact_matches / total * 100) if total > 0 else 0
        self.info(f"Exact matches: {stats.exact_matches:,}/{total:,} ({exact_rate:.2f}%)")
        if fuzzy_enabled:
            self.info(f"Fuzzy matches: {stats.fuzzy_matches:,}/{total:,} "
                      f"({stats.get_fuzzy_match_rate():.2f}%)")
        self.info(f"Unmatched: {stats.unmatched:,}/{total:,}")

    def log_unmatched_values(self, counts: Mapping[str, int]):
        """Warn about unmatched values, most frequent first."""
        self.warning(f"{sum(counts.values()):,} values could not be mapped to a prefecture")
        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        for value, count in ranked[:UNMATCHED_SAMPLE_SIZE]:
            self.warning(f"  unmatched {value!r}: {count:,} rows")

    def log_output_written(self, output_type: str, file_path: str, record_count: int):
        self.info(f"Wrote {output_type} file: {file_path} ({record_count:,} rows)")


def setup_logging(config) -> MappingLogger:
    """
    Set up logging for a mapping run.

    Logs go to config.log_file when set, otherwise to a timestamped
    mapping_log_<timestamp>.txt in the output directory.

    Args:
        config: MappingConfig instance

    Returns:
        Configured MappingLogger instance
    """
    log_file = config.log_file
    if not log_file and config.output_directory:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = str(Path(config.output_directory) / f"mapping_log_{timestamp}.txt")

    return MappingLogger(level=config.log_level, log_file=log_file)
