# -*- coding: utf-8 -*-
"""
config.py - Configuration management for Clip2Arena
Handles the Are.na connection settings, the optional settings file and .env loading
"""

import os
import json
from pathlib import Path
from dataclasses import dataclass, asdict, fields
from typing import Optional

from dotenv import load_dotenv

# Application directories
APP_NAME = "Clip2Arena"
if os.environ.get("APPDATA"):
    APP_DIR = Path(os.environ["APPDATA"]) / APP_NAME
else:
    APP_DIR = Path.home() / ".config" / APP_NAME
CONFIG_FILE = APP_DIR / "config.json"

# Environment variable names used by the headless runner
ENV_TOKEN = "ARENA_PERSONAL_ACCESS_TOKEN"
ENV_CHANNEL = "ARENA_CHANNEL_SLUG"
ENV_TITLE = "ARENA_BLOCK_TITLE"
ENV_INTERVAL = "ARENA_CHECK_INTERVAL_MS"

DEFAULT_CHECK_INTERVAL_MS = 2000
DEFAULT_REQUEST_TIMEOUT = 10.0


class ConfigError(ValueError):
    """Raised when required settings are missing at startup"""


def require_credentials(token: str, channel_slug: str):
    """Fail fast when the token or channel slug is blank"""
    missing = []
    if not (token or "").strip():
        missing.append("Are.na token")
    if not (channel_slug or "").strip():
        missing.append("channel slug")
    if missing:
        raise ConfigError(f"Missing required setting: {', '.join(missing)}")


@dataclass
class Config:
    """Application configuration dataclass"""
    # Are.na connection
    arena_token: str = ""
    channel_slug: str = ""
    block_title: str = ""

    # Monitoring
    check_interval_ms: int = DEFAULT_CHECK_INTERVAL_MS
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Persisting the token means writing it to disk in plain text
    remember_settings: bool = False

    def validate(self):
        """Raise ConfigError if the connection settings are incomplete"""
        require_credentials(self.arena_token, self.channel_slug)
        self.check_monitoring()

    def check_monitoring(self):
        """Raise ConfigError for timing values the monitor cannot run with"""
        if self.check_interval_ms <= 0:
            raise ConfigError("check_interval_ms must be positive")
        if self.request_timeout <= 0:
            raise ConfigError("request_timeout must be positive")

    @classmethod
    def _coerce(cls, data: dict) -> dict:
        """Keep known keys whose values fit the field's type"""
        defaults = cls()
        values = {}
        for field in fields(cls):
            if field.name not in data:
                continue
            default = getattr(defaults, field.name)
            value = data[field.name]
            if isinstance(default, (bool, str)):
                if isinstance(value, type(default)):
                    values[field.name] = value
                continue
            try:
                values[field.name] = type(default)(value)
            except (TypeError, ValueError, OverflowError):
                pass
        return values

    def save(self, path: Path = CONFIG_FILE):
        """Save configuration to file"""
        data = asdict(self)
        if not self.remember_settings:
            data['arena_token'] = ""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> 'Config':
        """Load configuration from file, falling back to defaults"""
        if path.exists():
            try:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                return cls(**cls._coerce(data))
            except (OSError, ValueError, TypeError, AttributeError):
                pass
        return cls()

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'Config':
        """Build configuration from environment variables (and a .env file if present)"""
        load_dotenv(dotenv_path=env_file)

        interval = os.getenv(ENV_INTERVAL, "").strip()
        try:
            check_interval_ms = int(interval) if interval else DEFAULT_CHECK_INTERVAL_MS
        except ValueError:
            raise ConfigError(f"{ENV_INTERVAL} must be an integer, got {interval!r}") from None

        return cls(
            arena_token=os.getenv(ENV_TOKEN, ""),
            channel_slug=os.getenv(ENV_CHANNEL, ""),
            block_title=os.getenv(ENV_TITLE, ""),
            check_interval_ms=check_interval_ms,
        )


# Global config instance
config = Config.load()
