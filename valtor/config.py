from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    # Errors
    MAX_ERROR_VALUE_LENGTH: int = 50  # Truncate echoed values in ValidationError.to_dict

    model_config = SettingsConfigDict(env_prefix="VALTOR_", env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()
