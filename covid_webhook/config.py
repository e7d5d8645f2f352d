"""Typed settings loaded from the environment."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Webhook settings, overridable through COVID_WEBHOOK_* variables."""

    # BigQuery
    gcp_project: Optional[str] = None  # falls back to application default credentials
    dataset: str = "bigquery-public-data.covid19_jhu_csse"
    query_location: str = "US"
    query_timeout_ms: int = 5000

    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="COVID_WEBHOOK_",
        env_file="./.env",
        env_ignore_empty=True,
        extra="ignore",
    )


settings = Settings()
