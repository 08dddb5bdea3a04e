import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .exceptions import ConfigError
from .utils import merge_dicts

ENV_PREFIX = "NETSERVICE_"

class Config:
    def __init__(self, config_path: Optional[Path] = None):
        self._config: Dict[str, Any] = {}
        self._load_defaults()
        self._load_environment_variables()
        if config_path:
            self.load(config_path)
        self.validate(self._config)

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self._config = {
            "app": {
                "name": "netservice",
                "version": "1.0.0"
            },
            "transport": {
                "base_url": None,
                "timeout": 30.0,
                "connect_timeout": 10.0,
                "verify_ssl": True,
                "user_agent": "netservice/1.0"
            },
            "logging": {
                "level": "INFO",
                "file": None,
                "console_output": False,
                "max_size": 1024 * 1024,
                "backup_count": 3
            }
        }

    def load(self, path: Path) -> None:
        """Load configuration from JSON file"""
        try:
            with open(path, 'r') as f:
                file_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Failed to load config from {path}: {str(e)}") from e
        if not isinstance(file_config, dict):
            raise ConfigError(f"Config file {path} must contain a JSON object")
        self.update(file_config)

    def save(self, path: Path) -> None:
        """Save configuration to JSON file"""
        with open(path, 'w') as f:
            json.dump(self._config, f, indent=2)

    def _load_environment_variables(self) -> None:
        """Load configuration from environment variables"""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                # NETSERVICE_TRANSPORT_VERIFY_SSL -> transport.verify_ssl
                parts = key[len(ENV_PREFIX):].lower().split('_')
                if len(parts) < 2:
                    continue
                config_key = f"{parts[0]}.{'_'.join(parts[1:])}"
                self.set(config_key, self._convert_value(value))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation key"""
        try:
            value = self._config
            for k in key.split('.'):
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Set configuration value by dot notation key"""
        keys = key.split('.')
        d = self._config
        for k in keys[:-1]:
            if not isinstance(d.get(k), dict):
                d[k] = {}
            d = d[k]
        d[keys[-1]] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """Update configuration with dictionary"""
        self._config = merge_dicts(self._config, config_dict)

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration values"""
        transport = config.get("transport")
        if transport:
            for name in ("timeout", "connect_timeout"):
                value = transport.get(name)
                if value is None:
                    continue
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                    raise ConfigError(f"transport.{name} must be a positive number")
            if "verify_ssl" in transport and not isinstance(transport["verify_ssl"], bool):
                raise ConfigError("transport.verify_ssl must be a boolean")
            base_url = transport.get("base_url")
            if base_url is not None and not isinstance(base_url, str):
                raise ConfigError("transport.base_url must be a string")

    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of the full configuration"""
        return copy.deepcopy(self._config)

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string value to appropriate type"""
        if value.lower() == "true":
            return True
        if value.lower() == "false":
            return False

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            return value
