"""
Configuration management for nodeprobe using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("nodeprobe.yaml", "nodeprobe.yml")

# --- Nested Configuration Models ---


class HttpConfig(BaseModel):
    """HTTP client configuration for fetching pages and following links."""

    base_url: str = Field(default="", description="Base URL relative request paths are resolved against.")
    timeout: float = Field(default=10.0, description="HTTP request timeout in seconds.")
    follow_redirects: bool = Field(default=True, description="Whether to follow HTTP redirects.")
    user_agent: str = Field(default="nodeprobe/0.1.0", description="User-Agent string for HTTP requests.")
    headers: Dict[str, str] = Field(default_factory=dict, description="Extra headers sent with every request.")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be greater than 0")
        return v


class ParserConfig(BaseModel):
    """HTML parser configuration."""

    backend: Literal["selectolax", "bs4"] = Field(default="selectolax", description="HTML parser backend.")


class MonitoringConfig(BaseModel):
    """Logging configuration."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: Optional[str] = Field(default=None, description="Path to log file. If None, logs to console.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Settings(BaseSettings):
    http: HttpConfig = Field(default_factory=HttpConfig)
    parser: ParserConfig = Field(default_factory=ParserConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="NODEPROBE_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Settings:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file(directory: Path | None = None) -> Path | None:
    current_dir = directory or Path.cwd()
    for name in CONFIG_FILE_NAMES:
        path = current_dir / name
        if path.exists():
            return path
    return None


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from ``path``, a discovered config file, or the environment."""
    config_path = path or find_config_file()
    if config_path is None:
        log.debug("No config file found. Using environment and default settings.")
        return Settings()
    return Settings.from_yaml(config_path)
