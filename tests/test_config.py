"""Tests for configuration loading and validation."""

import pytest

from tinkercrack import DEFAULT_CONFIG, CrackConfig, InvalidInput, load_config


class TestCrackConfig:
    def test_defaults(self):
        cfg = CrackConfig()
        assert cfg.rejection_threshold == 4.0
        assert cfg.max_key_length == 20
        assert cfg.min_column_letters == 3
        assert cfg.to_dict()["length_penalty"] == 0.002

    def test_is_frozen(self):
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.max_key_length = 5

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"rejection_threshold": 0},
            {"rejection_threshold": -1.0},
            {"max_key_length": 0},
            {"min_column_letters": 0},
            {"length_penalty": -0.1},
        ],
    )
    def test_rejects_bad_values(self, kwargs):
        with pytest.raises(InvalidInput):
            CrackConfig(**kwargs)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_key_length": "ten"},
            {"max_key_length": 8.0},
            {"min_column_letters": True},
            {"rejection_threshold": "4"},
            {"length_penalty": None},
        ],
    )
    def test_rejects_wrong_types(self, kwargs):
        with pytest.raises(InvalidInput):
            CrackConfig(**kwargs)

    def test_accepts_int_for_float_fields(self):
        assert CrackConfig(rejection_threshold=3, length_penalty=0).rejection_threshold == 3


class TestLoadConfig:
    def test_no_path_gives_defaults(self):
        assert load_config() is DEFAULT_CONFIG

    def test_reads_table(self, tmp_path):
        path = tmp_path / "crack.toml"
        path.write_text("[tinkercrack]\nrejection_threshold = 2.5\nmax_key_length = 8\n")
        cfg = load_config(path)
        assert cfg.rejection_threshold == 2.5
        assert cfg.max_key_length == 8
        assert cfg.min_column_letters == DEFAULT_CONFIG.min_column_letters

    def test_missing_table_gives_defaults(self, tmp_path):
        path = tmp_path / "crack.toml"
        path.write_text("[other]\nvalue = 1\n")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "crack.toml"
        path.write_text("[tinkercrack]\nthreshold = 2.5\n")
        with pytest.raises(InvalidInput) as exc_info:
            load_config(path)
        assert exc_info.value.details["unknown"] == ["threshold"]

    def test_wrong_typed_value(self, tmp_path):
        path = tmp_path / "crack.toml"
        path.write_text('[tinkercrack]\nmax_key_length = "ten"\n')
        with pytest.raises(InvalidInput) as exc_info:
            load_config(path)
        assert exc_info.value.details["field"] == "max_key_length"

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInput):
            load_config(tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path):
        path = tmp_path / "crack.toml"
        path.write_text("[tinkercrack\n")
        with pytest.raises(InvalidInput):
            load_config(path)
