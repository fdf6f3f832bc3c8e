"""Configuration management for the DocuSeal MCP server.

Server settings support a YAML file with environment variable overrides and
are cached after the first load. DocuSeal credentials come from the process
environment only and are re-read on every outbound call.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.docuseal.co"


class DocuSealSettings(BaseSettings):
    """DocuSeal API connection settings."""
    api_key: Optional[str] = Field(default=None, description="X-Auth-Token value")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API base URL, override for self-hosted DocuSeal"
    )
    timeout_seconds: float = Field(default=30.0, gt=0)
    
    model_config = SettingsConfigDict(
        env_prefix="DOCUSEAL_",
        extra="ignore"
    )
    
    @field_validator("base_url")
    @classmethod
    def _default_when_blank(cls, value: str) -> str:
        return value.strip().rstrip("/") or DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Main server settings."""
    log_level: str = Field(default="INFO")
    json_logs: bool = Field(default=False)
    server_name: str = Field(default="docuseal-mcp")
    
    # Dispatch
    validate_input: bool = Field(default=True, description="Check arguments against tool schemas")
    enable_audit: bool = Field(default=True)
    
    model_config = SettingsConfigDict(
        env_prefix="DOCUSEAL_MCP_",
        extra="ignore"
    )
    
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Environment overrides values passed in from YAML
        return env_settings, init_settings
    
    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file, environment variables still win."""
        return cls(**load_yaml_config(path))


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file."""
    path = Path(path)
    if not path.exists():
        return {}
    
    with open(path) as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Get cached server settings."""
    config_path = os.environ.get("DOCUSEAL_MCP_CONFIG_PATH", "config/settings.yaml")
    return Settings.from_yaml(config_path)
