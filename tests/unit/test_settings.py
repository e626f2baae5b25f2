"""
Unit tests for Settings
"""

import pytest
from filterscope.config.settings import Settings, ConfigError


class TestSettings:
    """Test configuration loading"""

    def test_sections_loaded(self, test_settings):
        """Test sections and helpers"""
        assert test_settings.log_query_length == 200
        assert test_settings.is_policy_enforced() is True
        assert test_settings.logging['console_colors'] is False

    def test_table_policy_lookup(self, test_settings):
        """Test case-insensitive policy lookup"""
        policy = test_settings.get_table_policy("SALES.orders")

        assert policy['required_columns'] == ['cob_date']
        assert test_settings.get_table_policy("sales.positions")['require_filter'] is False
        assert test_settings.get_table_policy("sales.products") is None

    def test_defaults(self, tmp_path):
        """Test defaults when sections are absent"""
        path = tmp_path / 'config.yaml'
        path.write_text("logging:\n  level: DEBUG\n", encoding='utf-8')

        settings = Settings(str(path))

        assert settings.log_query_length == 500
        assert settings.is_policy_enforced() is True
        assert settings.get_table_policy("sales.orders") is None

    def test_empty_policy_entry(self, tmp_path):
        """Test table listed without options"""
        path = tmp_path / 'config.yaml'
        path.write_text("policies:\n  tables:\n    ref.calendar:\n", encoding='utf-8')

        settings = Settings(str(path))

        assert settings.get_table_policy("ref.calendar") == {}

    def test_env_substitution(self, tmp_path, monkeypatch):
        """Test ${VAR} placeholders"""
        monkeypatch.setenv('FILTERSCOPE_TEST_LEVEL', 'WARNING')
        path = tmp_path / 'config.yaml'
        path.write_text("logging:\n  level: ${FILTERSCOPE_TEST_LEVEL}\n", encoding='utf-8')

        settings = Settings(str(path))

        assert settings.logging['level'] == 'WARNING'

    def test_missing_env_var(self, tmp_path, monkeypatch):
        """Test unset placeholder variable"""
        monkeypatch.delenv('FILTERSCOPE_TEST_UNSET', raising=False)
        path = tmp_path / 'config.yaml'
        path.write_text("logging:\n  level: ${FILTERSCOPE_TEST_UNSET}\n", encoding='utf-8')

        with pytest.raises(ConfigError, match="FILTERSCOPE_TEST_UNSET"):
            Settings(str(path))

    def test_config_file_from_env(self, config_file, monkeypatch):
        """Test CONFIG_FILE environment variable"""
        monkeypatch.setenv('CONFIG_FILE', config_file)

        settings = Settings()

        assert str(settings.config_file) == config_file

    def test_missing_file(self, tmp_path):
        """Test nonexistent config file"""
        with pytest.raises(ConfigError, match="not found"):
            Settings(str(tmp_path / 'missing.yaml'))

    def test_empty_file(self, tmp_path):
        """Test empty config file"""
        path = tmp_path / 'config.yaml'
        path.write_text("", encoding='utf-8')

        with pytest.raises(ConfigError, match="empty"):
            Settings(str(path))

    def test_invalid_yaml(self, tmp_path):
        """Test unparsable config file"""
        path = tmp_path / 'config.yaml'
        path.write_text("policies: [unclosed\n", encoding='utf-8')

        with pytest.raises(ConfigError, match="Failed to parse"):
            Settings(str(path))
