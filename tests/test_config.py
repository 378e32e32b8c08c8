"""Tests for screensaver_any.config — configuration loading and validation."""

from __future__ import annotations

import json
import logging

import pytest

from screensaver_any.config import (
    DEFAULT_CONFIG,
    _sanitize_json_text,
    load_config,
    validate_config,
)


# ------------------------------------------------------------------
# DEFAULT_CONFIG
# ------------------------------------------------------------------

class TestDefaultConfig:
    """DEFAULT_CONFIG contains all expected keys."""

    EXPECTED_KEYS = {'screensaver', 'debug', 'prevent_interval'}

    def test_contains_all_expected_keys(self):
        assert set(DEFAULT_CONFIG.keys()) == self.EXPECTED_KEYS

    def test_detects_by_default(self):
        assert DEFAULT_CONFIG['screensaver'] is None


# ------------------------------------------------------------------
# validate_config
# ------------------------------------------------------------------

class TestValidateConfig:
    """validate_config normalises input and rejects invalid values."""

    def test_valid_data_passes(self):
        result = validate_config({
            'screensaver': 'gnome',
            'debug': True,
            'prevent_interval': 45,
        })
        assert result == {'screensaver': 'gnome', 'debug': True, 'prevent_interval': 45.0}

    def test_screensaver_is_normalised(self):
        assert validate_config({'screensaver': ' KDE '})['screensaver'] == 'kde'

    def test_invalid_screensaver(self):
        with pytest.raises(ValueError, match="screensaver"):
            validate_config({'screensaver': 'light-locker'})

    def test_invalid_screensaver_type(self):
        with pytest.raises(ValueError, match="screensaver"):
            validate_config({'screensaver': 3})

    def test_invalid_debug_type(self):
        with pytest.raises(ValueError, match="debug"):
            validate_config({'debug': 'yes'})

    @pytest.mark.parametrize("value", [0, -5, 'soon', True, None])
    def test_invalid_prevent_interval(self, value):
        with pytest.raises(ValueError, match="prevent_interval"):
            validate_config({'prevent_interval': value})

    def test_none_returns_defaults(self):
        assert validate_config(None) == DEFAULT_CONFIG

    def test_empty_dict_returns_defaults(self):
        assert validate_config({}) == DEFAULT_CONFIG


# ------------------------------------------------------------------
# _sanitize_json_text
# ------------------------------------------------------------------

class TestSanitizeJsonText:
    """_sanitize_json_text strips comments and trailing commas."""

    def test_removes_hash_comments(self):
        text = '{\n  # this is a comment\n  "a": 1\n}'
        result = _sanitize_json_text(text)
        assert "#" not in result
        assert json.loads(result) == {"a": 1}

    def test_removes_slash_comments(self):
        text = '{\n  // which screensaver to drive\n  "a": 1\n}'
        result = _sanitize_json_text(text)
        assert "//" not in result
        assert json.loads(result) == {"a": 1}

    def test_removes_trailing_commas(self):
        text = '{\n  "a": 1,\n  "b": 2,\n}'
        assert json.loads(_sanitize_json_text(text)) == {"a": 1, "b": 2}

    def test_keeps_slashes_inside_values(self):
        text = '{\n  "url": "http://example.org",\n}'
        assert json.loads(_sanitize_json_text(text)) == {"url": "http://example.org"}


# ------------------------------------------------------------------
# load_config
# ------------------------------------------------------------------

class TestLoadConfig:
    """load_config reads JSON files and merges with defaults."""

    def test_nonexistent_file_returns_defaults(self, tmp_path):
        result = load_config(config_path=str(tmp_path / "nope.json"))
        assert result == DEFAULT_CONFIG

    def test_loads_real_json_file(self, tmp_path):
        cfg_file = tmp_path / "config.json"
        cfg_file.write_text(json.dumps({"screensaver": "xscreensaver"}))
        result = load_config(config_path=str(cfg_file))
        assert result['screensaver'] == 'xscreensaver'
        # Other keys remain default
        assert result['debug'] is False
        assert result['prevent_interval'] == 30.0

    def test_loads_config_with_comments(self, tmp_path):
        cfg_file = tmp_path / "config.json"
        cfg_file.write_text('{\n  # a comment\n  "debug": true,\n}')
        assert load_config(config_path=str(cfg_file))['debug'] is True

    def test_invalid_values_fall_back_to_defaults(self, tmp_path, caplog):
        cfg_file = tmp_path / "config.json"
        cfg_file.write_text(json.dumps({"screensaver": "windows", "debug": True}))
        with caplog.at_level(logging.WARNING, logger="screensaver_any.config"):
            result = load_config(config_path=str(cfg_file))
        assert result == DEFAULT_CONFIG
        assert "Invalid config" in caplog.text

    def test_broken_json(self, tmp_path, caplog):
        cfg_file = tmp_path / "config.json"
        cfg_file.write_text('{"debug": ')
        with caplog.at_level(logging.WARNING, logger="screensaver_any.config"):
            result = load_config(config_path=str(cfg_file))
        assert result == DEFAULT_CONFIG
        assert "JSON parse error" in caplog.text

    def test_non_object(self, tmp_path):
        cfg_file = tmp_path / "config.json"
        cfg_file.write_text('["kde"]')
        assert load_config(config_path=str(cfg_file)) == DEFAULT_CONFIG

    def test_no_path_uses_user_config(self, tmp_path, monkeypatch):
        cfg_dir = tmp_path / ".config" / "screensaver-any"
        cfg_dir.mkdir(parents=True)
        (cfg_dir / "config.json").write_text('{"screensaver": "cinnamon"}')
        monkeypatch.setenv("HOME", str(tmp_path))
        assert load_config()['screensaver'] == 'cinnamon'
