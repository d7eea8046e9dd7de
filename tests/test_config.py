"""
Tests for MappingConfig validation and ProcessingStats.
"""

from pathlib import Path

import pytest

from jp_prefecture.config import MappingConfig, ProcessingStats


class TestMappingConfig:

    def test_defaults(self, mapping_config):
        assert mapping_config.fuzzy_threshold == 85
        assert mapping_config.enable_fuzzy_matching is True
        assert mapping_config.output_fields == ['code', 'kanji', 'english']

    def test_creates_output_directory(self, mapping_config):
        assert Path(mapping_config.output_directory).is_dir()

    def test_missing_input_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            MappingConfig(
                input_file=str(tmp_path / "missing.csv"),
                output_directory=str(tmp_path),
                column="pref"
            )

    @pytest.mark.parametrize("overrides", [
        {'fuzzy_threshold': 101},
        {'fuzzy_threshold': -1},
        {'column': ""},
        {'output_fields': []},
        {'output_fields': ['code', 'romaji']},
        {'log_level': "VERBOSE"},
        {'max_alternatives': -1},
    ])
    def test_invalid_values(self, mapping_config, overrides):
        config_dict = mapping_config.to_dict()
        config_dict.update(overrides)
        with pytest.raises(ValueError):
            MappingConfig.from_dict(config_dict)

    def test_dict_round_trip(self, mapping_config):
        assert MappingConfig.from_dict(mapping_config.to_dict()) == mapping_config


class TestProcessingStats:

    def test_empty(self):
        stats = ProcessingStats()
        assert stats.get_match_rate() == 0.0
        assert stats.get_fuzzy_match_rate() == 0.0

    def test_rates(self):
        stats = ProcessingStats(total_values=8, exact_matches=5, fuzzy_matches=1, unmatched=2)
        assert stats.get_match_rate() == pytest.approx(75.0)
        assert stats.get_fuzzy_match_rate() == pytest.approx(12.5)
