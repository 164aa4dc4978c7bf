from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


def _csv_values(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Utility Operations API"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # HTTP boundary
    CORS_ALLOWED_ORIGINS: str = "*"
    MAX_BODY_BYTES: int = 1024 * 1024
    STATIC_DIR: str = "public"
    INDEX_FILE: str = "index.html"

    # Random generation
    RANDOM_DEFAULT_COUNT: int = 10
    MAX_RANDOM_COUNT: int = 10000

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def cors_origins(self) -> list[str]:
        return _csv_values(self.CORS_ALLOWED_ORIGINS)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
