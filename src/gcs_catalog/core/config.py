"""Configuration management for gcs-catalog."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "gcs-catalog"
    download_chunk_size: int = 1024 * 1024

    model_config = {
        "env_prefix": "GCS_CATALOG_",
        "case_sensitive": False,
    }


settings = Settings()
