from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # -----------------------------
    # Database
    # -----------------------------
    DATABASE_URL: str
    SQL_ECHO: bool = False

    # -----------------------------
    # API
    # -----------------------------
    APP_TITLE: str = "Invoice Tracker API"
    API_PREFIX: str = "/api/v1"

    # -----------------------------
    # App Environment
    # -----------------------------
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# -----------------------------
# Cached settings instance
# -----------------------------
@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
