"""Tests for configuration loading and settings."""

import pytest

from link_colors.config import Config, Settings, load_config
from link_colors.core.hashing import HashMode


class TestConfig:
    """Tests for Config class."""

    def test_defaults(self):
        cfg = load_config()
        assert cfg.get('palette') == 'vibrant'
        assert cfg.get('ignore_prefix') is True
        assert cfg.get('hash_mode') == 'strict-full'
        assert cfg.get('underline_variants') is False
        assert cfg.get('display.dark_mode') is True

    def test_get_missing_key_returns_default(self):
        cfg = load_config()
        assert cfg.get('display.missing', 'fallback') == 'fallback'
        assert cfg.get('palette.nested') is None

    def test_load_from_file_merges(self, temp_config_file):
        cfg = load_config(temp_config_file)
        assert cfg.get('palette') == 'nord'
        assert cfg.get('hash_mode') == 'similarity'
        assert cfg.get('display.dark_mode') is False
        # Untouched defaults survive the merge
        assert cfg.get('ignore_prefix') is True
        assert cfg.get('output.format') == 'json'

    def test_invalid_yaml_keeps_defaults(self, temp_output_dir):
        bad = temp_output_dir / "bad.yaml"
        bad.write_text("palette: [unclosed\n")
        cfg = Config(bad)
        assert cfg.get('palette') == 'vibrant'

    def test_env_overrides(self, monkeypatch, temp_config_file):
        monkeypatch.setenv('LINKCOLOR_PALETTE', 'dracula')
        monkeypatch.setenv('LINKCOLOR_DARK_MODE', 'yes')
        monkeypatch.setenv('LINKCOLOR_IGNORE_PREFIX', 'false')
        cfg = load_config(temp_config_file)
        assert cfg.get('palette') == 'dracula'
        assert cfg.get('display.dark_mode') is True
        assert cfg.get('ignore_prefix') is False

    def test_set_nested(self):
        cfg = load_config()
        cfg.set('display.dark_mode', False)
        cfg.set('extra.deep.value', 3)
        assert cfg.get('display.dark_mode') is False
        assert cfg.get('extra.deep.value') == 3


class TestSettings:
    """Tests for Settings dataclass."""

    def test_defaults(self):
        settings = Settings()
        assert settings.palette == 'vibrant'
        assert settings.ignore_prefix is True
        assert settings.hash_mode == HashMode.STRICT_FULL
        assert settings.underline_variants is False

    def test_hash_mode_string_converted(self):
        assert Settings(hash_mode='strict-acronym').hash_mode is HashMode.STRICT_ACRONYM

    def test_unknown_hash_mode_rejected(self):
        with pytest.raises(ValueError, match="Unknown hash mode"):
            Settings(hash_mode='levenshtein')

    def test_frozen(self):
        settings = Settings()
        with pytest.raises(Exception):
            settings.palette = 'nord'

    def test_from_config(self, temp_config_file):
        settings = Settings.from_config(load_config(temp_config_file))
        assert settings.palette == 'nord'
        assert settings.hash_mode == HashMode.SIMILARITY
        assert settings.ignore_prefix is True
