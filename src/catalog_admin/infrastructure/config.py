from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CATALOG_ADMIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    #Storage
    data_dir: Path = Path("data")
    products_file: str = "admin_products.json"
    session_file: str = "admin_user.json"

    #Gemini
    gemini_api_key: str = ""
    gemini_api_url: str = (
        "https://generativelanguage.googleapis.com/v1beta/models/gemini-pro:generateContent"
    )
    ai_timeout_seconds: float = 15.0

    #Logging
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    return Settings()
