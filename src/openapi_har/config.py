"""Runtime settings, read from `OPENAPI_HAR_*` environment variables."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OPENAPI_HAR_", case_sensitive=False)

    log_level: str = Field(default="WARNING")
    max_ref_depth: int = Field(default=32, ge=1)
    max_sample_depth: int = Field(default=10, ge=1)
    indent: int = Field(default=2, ge=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
