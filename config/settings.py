"""
config/settings.py

- Reads environment variables (and .env) into application-wide settings.
- pydantic v2 / pydantic-settings v2.
- DATABASE_URL defaults to a local SQLite file so the service runs without
  any external database; point it at MySQL/Postgres in deployment.
"""

from typing import List, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # App / runtime
    # =========================
    ENV: Literal["dev", "stage", "prod"] = "dev"
    APP_TITLE: str = "Examination Remuneration API"
    APP_DESCRIPTION: str = "Examiner, subject and remuneration management backend"
    APP_VERSION: str = "1.0.0"

    # =========================
    # CORS
    # =========================
    # comma separated string -> List[str]
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        if isinstance(v, str):
            # "a,b , c" -> ["a","b","c"]
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    # =========================
    # Database
    # =========================
    DATABASE_URL: str = "sqlite:///./remuneration.db"

    # =========================
    # Reports / export
    # =========================
    CURRENCY_SYMBOL: str = "₹"
    EXPORT_FILENAME_PREFIX: str = "remuneration_summary"
    TEMPLATE_DIR: str = "templates"

    # =========================
    # Logging
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# ✅ shared settings object, import it anywhere
settings = Settings()
