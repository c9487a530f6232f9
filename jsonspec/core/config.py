from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console output

    # Schema derivation
    SCHEMA_CACHE_SIZE: int = 256  # Max types memoised by schema_for

    model_config = SettingsConfigDict(
        env_prefix="JSONSPEC_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
