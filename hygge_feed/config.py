"""
Configuration loader for the hygge feed tools.

Loads settings from config/settings.yaml and provides
typed access to configuration values.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

SETTINGS_ENV_VAR = "HYGGE_FEED_SETTINGS"


@dataclass
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class FeedConfig:
    strict_pagination: bool = False


@dataclass
class Settings:
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)


def default_config_path() -> Path:
    """config/settings.yaml next to the package, unless overridden by env."""
    override = os.getenv(SETTINGS_ENV_VAR)
    if override:
        return Path(override)
    return Path(__file__).parent.parent / "config" / "settings.yaml"


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load settings from YAML config file.

    Args:
        config_path: Path to settings.yaml. If None, uses default location.

    Returns:
        Settings object. Missing file or sections fall back to defaults.
    """
    if config_path is None:
        config_path = default_config_path()

    if not config_path.exists():
        return Settings()

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    return Settings(
        logging=LoggingConfig(**(raw.get("logging") or {})),
        feed=FeedConfig(**(raw.get("feed") or {})),
    )


# Singleton instance - load once, use everywhere
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance (lazy-loaded)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next get_settings() reloads."""
    global _settings
    _settings = None
