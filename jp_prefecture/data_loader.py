"""
Data loading module.

This module provides the DataLoader class for reading the CSV file whose
prefecture column is to be mapped.
"""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from .exceptions import DataLoadError, FileAccessError, create_file_error


class DataLoader:
    """
    Handles loading of CSV input for the prefecture mapping process.

    Every column is read as a string so codes such as '01' keep their
    original form; conversion happens in the mapping engine.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, encoding: str = "utf-8"):
        self.logger = logger or logging.getLogger(__name__)
        self.encoding = encoding

    def load(self, file_path: str, column: str) -> pd.DataFrame:
        """
        Load a CSV file and check that it has the column to map.

        Args:
            file_path: Path to the CSV file
            column: Name of the column holding prefecture values

        Returns:
            DataFrame with every column as string dtype

        Raises:
            FileAccessError: If the file is missing or unreadable
            DataLoadError: If the file cannot be parsed, is empty, or lacks the column
        """
        self.logger.info(f"Loading input from: {file_path}")

        file_path_obj = Path(file_path)
        if not file_path_obj.exists():
            raise FileAccessError(
                f"Input file not found: {file_path}",
                file_path=file_path,
                operation="read"
            )

        if not file_path_obj.is_file():
            raise FileAccessError(
                f"Path is not a file: {file_path}",
                file_path=file_path,
                operation="read"
            )

        try:
            df = pd.read_csv(file_path, dtype=str, encoding=self.encoding, keep_default_na=False)
        except pd.errors.EmptyDataError as e:
            raise DataLoadError(
                "Input file is empty or contains no valid data",
                file_path=file_path,
                original_error=e
            )
        except pd.errors.ParserError as e:
            raise DataLoadError(
                f"Error parsing input CSV file: {str(e)}",
                file_path=file_path,
                original_error=e
            )
        except UnicodeDecodeError as e:
            raise DataLoadError(
                f"Input file is not valid {self.encoding}: {file_path}",
                file_path=file_path,
                original_error=e
            )
        except PermissionError as e:
            raise create_file_error("read", file_path, e)

        if column not in df.columns:
            raise DataLoadError(
                f"Column '{column}' not found in {file_path}. "
                f"Available columns: {', '.join(map(str, df.columns))}",
                file_path=file_path,
                column=column
            )

        if df.empty:
            self.logger.warning(f"Input file has a header but no rows: {file_path}")

        self.logger.info(f"Loaded {len(df):,} rows")
        return df
