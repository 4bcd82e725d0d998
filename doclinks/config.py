"""Configuration management for Doc-Links.

This module provides configuration settings for the link checker.
All configuration values can be overridden via environment variables or .env file.

Environment Variables:
    DOCLINKS_CONTENT_ROOT: Directory walked for documents (default: docs)
    DOCLINKS_BASE_DIR: Directory internal link paths are resolved against
                       under the prefix policy (default: current directory)
    DOCLINKS_RESOLUTION_POLICY: Internal link resolution policy (default: prefix)
                                - prefix: only targets under DOCLINKS_INTERNAL_PREFIX
                                  are checked, as exact paths
                                - probe: every root-relative target is checked by
                                  probing .mdx/.md/index.mdx/index.md candidates
                                  under the content root
    DOCLINKS_INTERNAL_PREFIX: Prefix marking internal links (default: /docs/)
    DOCLINKS_DOCUMENT_EXTENSIONS: JSON list of document suffixes (default: [".md"])
    DOCLINKS_REQUEST_TIMEOUT: External probe timeout in seconds (default: 5)
    DOCLINKS_MAX_WORKERS: Concurrent external probes per file (default: 1)
    DOCLINKS_HTTP_HOST: HTTP API bind address (default: 127.0.0.1)
    DOCLINKS_HTTP_PORT: HTTP API port (default: 8005)
    DOCLINKS_LOG_LEVEL: Logging level (default: WARNING)
    DOCLINKS_ENVIRONMENT: Environment name (default: development)
    DOCLINKS_DEBUG: Enable debug mode (default: false)
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings for Doc-Links.

    All configuration values can be set via environment variables or .env file.
    Defaults reproduce the plain `docs/` link check run from the repository root.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCLINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Content tree
    content_root: str = "docs"
    base_dir: str = "."
    document_extensions: list[str] = [".md"]

    # Internal link resolution
    resolution_policy: Literal["prefix", "probe"] = "prefix"
    internal_prefix: str = "/docs/"

    # External probes
    request_timeout: float = 5.0
    max_workers: int = 1

    # HTTP API
    http_host: str = "127.0.0.1"
    http_port: int = 8005

    # Logging configuration
    log_level: str = "WARNING"

    # Environment configuration
    environment: str = "development"
    debug: bool = False

    @field_validator("document_extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        normalized = []
        for ext in value:
            ext = ext.strip()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("at least one document extension is required")
        return normalized

    @field_validator("internal_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("internal prefix must start with '/'")
        return value

    @field_validator("request_timeout")
    @classmethod
    def _check_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("request timeout must be positive")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("max_workers")
    @classmethod
    def _check_workers(cls, value: int) -> int:
        if value < 1:
            raise ValueError("max_workers must be at least 1")
        return value

    def is_probe_policy(self) -> bool:
        """Check if internal links are resolved by candidate probing."""
        return self.resolution_policy == "probe"

    def get_content_root(self) -> Path:
        """Get the content root directory."""
        return Path(self.content_root)

    def get_base_dir(self) -> Path:
        """Get the directory prefix-policy paths are resolved against."""
        return Path(self.base_dir)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    return Settings()
