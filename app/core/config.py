"""Application configuration using Pydantic settings."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore")

    gemini_api_key: str = ""
    generation_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    generation_timeout_seconds: float = 60.0
    generation_max_tokens: int = 2048

    redis_url: str = "redis://localhost:6379"
    redis_pool_size: int = 10
    blob_store_backend: str = "redis"

    service_name: str = "document-service"
    service_port: int = 8000
    allowed_origins: List[str] = [
        "http://localhost:5173", "http://localhost:3000"]

    # Blob store keys
    documents_key: str = "documents"
    preferences_key: str = "userPreferences"

    # View configuration
    items_per_page: int = 12
    items_per_batch: int = 12

    # Retry configuration
    max_retries: int = 3
    retry_delay_seconds: float = 1.0
    retry_backoff_multiplier: float = 2.0


settings = Settings()
