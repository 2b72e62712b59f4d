"""Tests for match_ethnicity.config — estimation parameters."""

import pytest

from match_ethnicity.config import EthnicityConfig


class TestDefaults:
    def test_default_values(self):
        config = EthnicityConfig()
        assert config.birth_country == ""
        assert config.excluded_countries == ("USA", "Canada", "Australia")
        assert config.close_relative_threshold == 20000000
        assert config.bin_length == 1000000
        assert config.dominance_ratio == 1.5

    def test_excluded_countries_become_tuple(self):
        config = EthnicityConfig(excluded_countries=["Brazil"])
        assert config.excluded_countries == ("Brazil",)


class TestValidation:
    @pytest.mark.parametrize('field,value', [
        ('bin_length', 0),
        ('close_relative_threshold', -1),
        ('dominance_ratio', 0.9),
    ])
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValueError):
            EthnicityConfig(**{field: value})


class TestFromDict:
    def test_overrides(self):
        config = EthnicityConfig.from_dict({'birth_country': 'Germany', 'dominance_ratio': 2.0})
        assert config.birth_country == 'Germany'
        assert config.dominance_ratio == 2.0
        assert config.bin_length == 1000000

    def test_unknown_key_rejected(self):
        with pytest.raises(ValueError, match='Unknown config keys'):
            EthnicityConfig.from_dict({'bin_size': 5})
