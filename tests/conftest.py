"""Shared fixtures for the jp_prefecture test suite."""

import pytest

from jp_prefecture.config import MappingConfig
from jp_prefecture.logging_config import MappingLogger


@pytest.fixture
def mapping_logger():
    """MappingLogger whose handlers are closed after the test."""
    logger = MappingLogger(name="jp_prefecture.tests", level="DEBUG")
    yield logger
    logger.close()


@pytest.fixture
def input_csv(tmp_path):
    """CSV file with a mix of exact, fuzzy, and unmatched prefecture values."""
    path = tmp_path / "customers.csv"
    rows = [
        ("1", "東京都"),
        ("2", "大阪"),
        ("3", "ほっかいどう"),
        ("4", "13"),
        ("5", "ＴＯＫＹＯ"),
        ("6", "東京県"),
        ("7", "atlantis"),
        ("8", ""),
        ("9", "99"),
    ]
    lines = ["id,pref"] + [f"{row_id},{value}" for row_id, value in rows]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def mapping_config(tmp_path, input_csv):
    return MappingConfig(
        input_file=str(input_csv),
        output_directory=str(tmp_path / "output"),
        column="pref",
        log_level="DEBUG"
    )
