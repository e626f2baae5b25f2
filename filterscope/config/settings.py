"""
Configuration Management for FilterScope
Loads settings from YAML config file with environment variable substitution
"""

import os
import re
import yaml
from typing import Any, Dict, Optional
from pathlib import Path
from dotenv import load_dotenv


class ConfigError(Exception):
    """Configuration error"""
    pass


class Settings:
    """Application configuration manager"""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize settings from config file

        Args:
            config_file: Path to YAML config file (default: config/config.yaml)
        """
        load_dotenv()

        if config_file is None:
            config_file = os.getenv('CONFIG_FILE', 'config/config.yaml')

        self.config_file = Path(config_file)
        if not self.config_file.exists():
            raise ConfigError(f"Configuration file not found: {self.config_file}")

        self._config = self._load_config()

        # Parse sections
        self.parser = self._config.get('parser', {}) or {}
        self.policies = self._config.get('policies', {}) or {}
        self.logging = self._config.get('logging', {}) or {}

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML config file with environment variable substitution"""
        with open(self.config_file, 'r', encoding='utf-8') as f:
            content = f.read()

        content = self._substitute_env_vars(content)

        try:
            config = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Failed to parse config file: {e}")

        if config is None:
            raise ConfigError("Config file is empty")
        if not isinstance(config, dict):
            raise ConfigError("Config file must contain a mapping at the top level")
        return config

    def _substitute_env_vars(self, content: str) -> str:
        """
        Replace ${VAR_NAME} with environment variable values

        Args:
            content: YAML content with ${VAR} placeholders

        Returns:
            Content with environment variables substituted
        """
        pattern = r'\$\{([^}]+)\}'

        def replace(match):
            var_name = match.group(1)
            value = os.getenv(var_name)
            if value is None:
                raise ConfigError(
                    f"Environment variable '{var_name}' not found. "
                    f"Please set it in .env file or environment."
                )
            return value

        return re.sub(pattern, replace, content)

    @property
    def log_query_length(self) -> int:
        """Maximum number of query characters written to log records"""
        return int(self.parser.get('log_query_length', 500))

    def is_policy_enforced(self) -> bool:
        """
        Check if row-filter policies are enforced

        Returns:
            True if enforcement is on
        """
        return bool(self.policies.get('enforce', True))

    def get_table_policy(self, table_name: str) -> Optional[Dict[str, Any]]:
        """
        Look up the row-filter policy for a table

        Args:
            table_name: Qualified table name (schema.table), any case

        Returns:
            Policy dictionary, or None if the table has no policy
        """
        tables = self.policies.get('tables', {}) or {}
        for name, policy in tables.items():
            if name.lower() == table_name.lower():
                return policy or {}
        return None

    def __repr__(self) -> str:
        return f"Settings(config_file={self.config_file})"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings(config_file: Optional[str] = None) -> Settings:
    """
    Get global settings instance (singleton pattern)

    Args:
        config_file: Path to config file (only used on first call)

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings(config_file)
    return _settings


def reload_settings(config_file: Optional[str] = None) -> Settings:
    """
    Reload settings (useful for testing or config changes)

    Args:
        config_file: Path to config file

    Returns:
        New settings instance
    """
    global _settings
    _settings = Settings(config_file)
    return _settings
