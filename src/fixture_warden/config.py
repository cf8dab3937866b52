"""Configuration management for Fixture Warden."""

from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

# Load .env file at import time
load_dotenv()

CONFIG_FILE_NAMES = ["fixture_warden.yaml", "fixture_warden.yml", ".fixture_warden.yaml"]


class EngineConfig(BaseModel, frozen=True):
    """Analysis engine configuration."""

    # None selects the built-in Python syntax engine
    command: str | None = None
    completed_codes: tuple[int, ...] = (0, 1)


class FixtureFormatConfig(BaseModel, frozen=True):
    """Fixture file layout."""

    comment_prefix: str = "//"

    @property
    def delimiter(self) -> str:
        return f"{self.comment_prefix} ----"


class DiscoveryConfig(BaseModel, frozen=True):
    """Fixture discovery configuration."""

    patterns: tuple[str, ...] = ("*",)
    exclude: tuple[str, ...] = (".*", "*~")


class Config(BaseSettings):
    """Main configuration for Fixture Warden."""

    model_config = SettingsConfigDict(
        env_prefix="FIXTURE_WARDEN_",
        env_nested_delimiter="__",
        frozen=True,
    )

    color: bool = True
    # Read from $EDITOR when not configured explicitly
    editor: str | None = Field(default=None, validation_alias="editor")

    engine: EngineConfig = Field(default_factory=EngineConfig)
    fixture: FixtureFormatConfig = Field(default_factory=FixtureFormatConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)


def _read_yaml(config_path: Path) -> dict:
    try:
        with open(config_path) as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot read configuration ({e})", config_path) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError("configuration must be a mapping", config_path)
    section = raw.get("fixture_warden", raw)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError("fixture_warden section must be a mapping", config_path)
    return section


def _merge(base: dict, overrides: dict) -> dict:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Path | None = None, **overrides: Any) -> Config:
    """Load configuration from YAML, environment variables and CLI overrides.

    Overrides whose value is None are ignored so unset CLI options fall
    through to the file and the environment.
    """
    config_data: dict = {}

    if config_path is None:
        for name in CONFIG_FILE_NAMES:
            if Path(name).exists():
                config_path = Path(name)
                break

    if config_path is not None:
        config_data = _read_yaml(config_path)

    config_data = _merge(config_data, {k: v for k, v in overrides.items() if v is not None})

    try:
        return Config(**config_data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration ({e.error_count()} errors)\n{e}", config_path) from e
