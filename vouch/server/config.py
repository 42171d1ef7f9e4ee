from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """ Service settings, read from `VOUCH_*` environment variables or `.env` """

    model_config = SettingsConfigDict(env_prefix="VOUCH_", env_file=".env", extra="ignore")

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # JSON lines instead of colored console output


@lru_cache
def get_settings() -> Settings:
    return Settings()
