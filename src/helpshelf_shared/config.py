"""
config.py - pydantic-settings Settings class.

All environment variables for helpshelf are declared here. The pipeline
and the site both import `settings` from this module.

Usage:
    from helpshelf_shared.config import settings
    print(settings.resources_path)
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_dotenv() -> Path | None:
    """Walk up from CWD to find the nearest .env file."""
    current = Path.cwd()
    for parent in [current, *current.parents]:
        candidate = parent / ".env"
        if candidate.is_file():
            return candidate
    return None


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_find_dotenv() or ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Data files
    # -------------------------------------------------------------------------
    csv_path: Path = Field(default=Path("data/approved.csv"))
    resources_path: Path = Field(default=Path("data/resources.json"))

    # -------------------------------------------------------------------------
    # Site
    # -------------------------------------------------------------------------
    site_title: str = Field(default="Lydia Studio Resources")
    site_host: str = Field(default="127.0.0.1")
    site_port: int = Field(default=8000)
    cors_origins: str = Field(default="http://localhost:3000")
    favicon_url_template: str = Field(
        default="https://www.google.com/s2/favicons?domain={domain}&sz=128"
    )
    card_primary_needs: int = Field(default=2, ge=0)

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_format: Literal["json", "console"] = Field(default="console")

    # -------------------------------------------------------------------------
    # Derived / computed
    # -------------------------------------------------------------------------
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Module-level singleton - import this everywhere
# ---------------------------------------------------------------------------
settings = Settings()
