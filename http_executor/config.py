"""
load the config from config.yaml and environment variables
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# env var -> (section, key)
ENV_OVERRIDES = {
    'HTTP_USER_AGENT': ('http', 'user_agent'),
    'HTTP_FOLLOW_REDIRECTS': ('http', 'follow_redirects'),
    'HTTP_VERIFY_SSL': ('http', 'verify_ssl'),
    'LOG_LEVEL': ('logging', 'level'),
    'LOG_FORMAT': ('logging', 'format'),
    'LOG_JSON': ('logging', 'json'),
}


def _env_value(value: str):
    """'true'/'false' become booleans; everything else stays a string."""
    if value.lower() in ('true', 'false'):
        return value.lower() == 'true'
    return value


class Config:
    """Client and logging settings: bundled config.yaml, then environment overrides."""

    def __init__(self, config_path: str = None):
        self.config_path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

        for env_var, (section, key) in ENV_OVERRIDES.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue
            if not isinstance(config.get(section), dict):
                config[section] = {}
            config[section][key] = _env_value(env_value)

        return config

    def get(self, *keys, default=None):
        """Nested lookup, e.g. get('http', 'user_agent'); `default` when any key is missing."""
        current = self._config
        for key in keys:
            if isinstance(current, dict) and key in current:
                current = current[key]
            else:
                return default
        return current

    @property
    def http(self) -> Dict[str, Any]:
        return self.get('http', default={})

    @property
    def logging(self) -> Dict[str, Any]:
        return self.get('logging', default={})


config = Config()
