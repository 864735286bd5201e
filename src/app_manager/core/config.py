"""Configuration management core functionality."""

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Iterator, Tuple

from .errors import ConfigError

VALID_AUTH_METHODS = ["auto", "env", "netrc"]

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "api": {"host": "api.heroku.com", "timeout": 10},
    "git": {"host": "heroku.com"},
    "auth": {"method": "auto"},
    "apps": {"default_remote": "heroku", "create_timeout": 30, "default_stack": None},
    "logging": {"level": "WARNING"},
}


class Config:
    """Configuration wrapper class."""

    def __init__(self, config_data: Optional[Dict[str, Any]] = None):
        self._config = copy.deepcopy(config_data) if config_data else {}
        self._validate_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        value = self._config

        for k in key.split("."):
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]

        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value using dot notation."""
        keys = key.split(".")
        config = self._config

        for k in keys[:-1]:
            if not isinstance(config.get(k), dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value
        self._validate_config()

    def items(self) -> Iterator[Tuple[str, Any]]:
        """Get all configuration items as iterator of (key, value) pairs."""
        return iter(self._config.items())

    def keys(self) -> Iterator[str]:
        """Get all configuration keys."""
        return iter(self._config.keys())

    def values(self) -> Iterator[Any]:
        """Get all configuration values."""
        return iter(self._config.values())

    @property
    def api_host(self) -> str:
        return self.get("api.host")

    @property
    def git_host(self) -> str:
        return self.get("git.host")

    @property
    def default_remote(self) -> str:
        return self.get("apps.default_remote")

    @property
    def create_timeout(self) -> int:
        return self.get("apps.create_timeout")

    def _validate_config(self) -> None:
        """Fill in defaults and validate configuration structure."""
        if not isinstance(self._config, dict):
            raise ConfigError("Configuration must be a dictionary")

        for section, defaults in DEFAULTS.items():
            values = self._config.setdefault(section, {})
            if not isinstance(values, dict):
                raise ConfigError(f"Config section '{section}' must be a dictionary")
            for key, value in defaults.items():
                values.setdefault(key, value)

        for key in ("api.host", "git.host", "apps.default_remote"):
            value = self.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{key}' must be a non-empty string")

        timeout = self.get("api.timeout")
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError("'api.timeout' must be a positive number")

        create_timeout = self.get("apps.create_timeout")
        if (
            isinstance(create_timeout, bool)
            or not isinstance(create_timeout, int)
            or create_timeout <= 0
        ):
            raise ConfigError("'apps.create_timeout' must be a positive integer")

        stack = self.get("apps.default_stack")
        if stack is not None and not isinstance(stack, str):
            raise ConfigError("'apps.default_stack' must be a string")

        auth_method = self.get("auth.method")
        if auth_method not in VALID_AUTH_METHODS:
            raise ConfigError(
                f"Invalid auth method '{auth_method}'. Must be one of: {', '.join(VALID_AUTH_METHODS)}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return copy.deepcopy(self._config)

    def __getitem__(self, key: str) -> Any:
        """Get configuration value using dictionary syntax."""
        return self._config[key]

    def __setitem__(self, key: str, value: Any) -> None:
        """Set configuration value using dictionary syntax."""
        self._config[key] = value
        self._validate_config()

    def __contains__(self, key: str) -> bool:
        """Check if key exists in configuration."""
        return key in self._config

    def __iter__(self):
        """Iterate over configuration keys."""
        return iter(self._config)

    def __len__(self) -> int:
        """Get number of configuration items."""
        return len(self._config)

    def __bool__(self) -> bool:
        """Check if config is not empty."""
        return bool(self._config)


def default_config_dir() -> Path:
    """Directory holding config.json, overridable with APP_MANAGER_HOME."""
    home = os.environ.get("APP_MANAGER_HOME")
    if home:
        return Path(home)
    return Path.home() / ".app-manager"


class ConfigManager:
    """Core configuration management functionality."""

    def __init__(
        self,
        config_dir: Optional[Path] = None,
        config_file: str = "config.json",
    ):
        if config_dir is None:
            config_dir = default_config_dir()

        self.config_dir = config_dir
        self.config_file = config_file
        self.config_path = config_dir / config_file

    def init(self) -> None:
        """Initialize configuration with defaults only."""
        self.save_config(Config({}))

    def load_config(self) -> Optional[Config]:
        """Load configuration from file."""
        if not self.config_path.exists():
            return None

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return Config(data)

    def load_or_default(self) -> Config:
        """Load configuration, falling back to defaults when no file exists."""
        return self.load_config() or Config({})

    def save_config(self, config: Config) -> None:
        """Save configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def create_sample_config(self) -> Path:
        """Create a sample configuration file."""
        sample_config = {
            "api": {"host": "api.heroku.com", "timeout": 10},
            "git": {"host": "heroku.com"},
            "auth": {"method": "auto"},
            "apps": {
                "default_remote": "heroku",
                "create_timeout": 30,
                "default_stack": "cedar",
            },
            "logging": {"level": "WARNING"},
        }

        config = Config(sample_config)
        self.save_config(config)
        return self.config_path

    def validate_config(self, config: Config) -> bool:
        """Validate configuration."""
        if not config:
            return False

        try:
            Config(config.to_dict())
        except ConfigError:
            return False

        return True

    def get_config_info(self) -> Dict[str, Any]:
        """Get configuration information."""
        config = self.load_config()
        return {
            "path": str(self.config_path),
            "exists": self.config_path.exists(),
            "valid": self.validate_config(config) if config else False,
        }
