"""
Configuration manager for loading and validating the relay's config file.
"""
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, Union
from urllib.parse import urlparse

from .errors import ConfigLoadError
from .models import Config


class ConfigManager:
    """Loads the JSON config file and validates its settings."""

    DEFAULT_CONFIG_PATH = "config.json"
    DEFAULT_QUIZ_BASE_URL = "https://quizizz.com"
    DEFAULT_TIMEOUT = 10.0
    DEFAULT_LOG_LEVEL = "INFO"

    # Validation limits
    MIN_TIMEOUT = 1
    MAX_TIMEOUT = 120
    LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

    REQUIRED_FIELDS = ("quiz_id", "webhook_url")
    OPTIONAL_STRING_FIELDS = ("webhook_name", "profile_url")

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def load_config(self, path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            path: Path to the config file

        Returns:
            Config built from the file

        Raises:
            ConfigLoadError: If the file is missing, unreadable, not JSON or invalid
        """
        config_path = Path(path)

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigLoadError(f"Config file not found: {config_path}") from e
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Invalid JSON in {config_path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigLoadError(f"Failed to read config file {config_path}: {e}") from e

        validation = self.validate_config(data)
        if not validation["valid"]:
            raise ConfigLoadError(
                f"Invalid configuration in {config_path}: " + "; ".join(validation["issues"])
            )

        config = self._build_config(data)
        self.logger.debug(f"Loaded configuration from {config_path}")
        return config

    def validate_config(self, data: Any) -> Dict[str, Any]:
        """
        Validate raw config data and return validation results.

        Args:
            data: Parsed JSON content of the config file

        Returns:
            Dictionary with validation results and any issues found
        """
        validation_result = {
            "valid": True,
            "issues": []
        }

        if not isinstance(data, dict):
            validation_result["valid"] = False
            validation_result["issues"].append("Config must be a JSON object")
            return validation_result

        for field_name in self.REQUIRED_FIELDS:
            value = data.get(field_name)
            if not isinstance(value, str) or not value.strip():
                validation_result["valid"] = False
                validation_result["issues"].append(f"'{field_name}' must be a non-empty string")

        webhook_url = data.get("webhook_url")
        if isinstance(webhook_url, str) and webhook_url.strip():
            if not self._is_http_url(webhook_url):
                validation_result["valid"] = False
                validation_result["issues"].append("'webhook_url' must be an http(s) URL")

        for field_name in self.OPTIONAL_STRING_FIELDS:
            if field_name in data and not isinstance(data[field_name], str):
                validation_result["valid"] = False
                validation_result["issues"].append(f"'{field_name}' must be a string")

        if "request_timeout" in data:
            timeout = data["request_timeout"]
            if (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or
                    not math.isfinite(timeout) or
                    timeout < self.MIN_TIMEOUT or timeout > self.MAX_TIMEOUT):
                validation_result["valid"] = False
                validation_result["issues"].append(
                    f"'request_timeout' must be between {self.MIN_TIMEOUT} and "
                    f"{self.MAX_TIMEOUT} seconds"
                )

        if "quiz_base_url" in data:
            base_url = data["quiz_base_url"]
            if not isinstance(base_url, str) or not self._is_http_url(base_url):
                validation_result["valid"] = False
                validation_result["issues"].append("'quiz_base_url' must be an http(s) URL")

        log_config = data.get("logging", {})
        if not isinstance(log_config, dict):
            validation_result["valid"] = False
            validation_result["issues"].append("'logging' must be an object")
        else:
            level = log_config.get("level", self.DEFAULT_LOG_LEVEL)
            if not isinstance(level, str) or level.upper() not in self.LOG_LEVELS:
                validation_result["valid"] = False
                validation_result["issues"].append(f"Invalid log level: {level}")
            log_directory = log_config.get("log_directory")
            if log_directory is not None and not isinstance(log_directory, str):
                validation_result["valid"] = False
                validation_result["issues"].append("'logging.log_directory' must be a string")

        return validation_result

    @staticmethod
    def _is_http_url(value: str) -> bool:
        """Check for an http(s) URL with a host and a usable port."""
        try:
            parsed = urlparse(value)
            # port raises ValueError when non-numeric or out of range
            parsed.port
        except ValueError:
            return False
        return parsed.scheme in ("http", "https") and bool(parsed.netloc)

    def _build_config(self, data: Dict[str, Any]) -> Config:
        log_config = data.get("logging", {})
        return Config(
            quiz_id=data["quiz_id"],
            webhook_url=data["webhook_url"],
            webhook_name=data.get("webhook_name", ""),
            profile_url=data.get("profile_url", ""),
            request_timeout=float(data.get("request_timeout", self.DEFAULT_TIMEOUT)),
            quiz_base_url=data.get("quiz_base_url", self.DEFAULT_QUIZ_BASE_URL),
            log_level=log_config.get("level", self.DEFAULT_LOG_LEVEL).upper(),
            log_directory=log_config.get("log_directory"),
        )

    def get_settings_summary(self, config: Config) -> str:
        """
        Get a formatted summary of a configuration.

        The webhook URL carries its token, so only its host is shown.

        Returns:
            Human-readable string describing the settings
        """
        webhook_host = urlparse(config.webhook_url).netloc or "?"
        return (
            f"Settings:\n"
            f"• Quiz: {config.quiz_id}\n"
            f"• Quiz host: {config.quiz_base_url}\n"
            f"• Webhook host: {webhook_host}\n"
            f"• Webhook name: {config.webhook_name or '(default)'}\n"
            f"• Timeout: {config.request_timeout:g} seconds"
        )
