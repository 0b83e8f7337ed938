from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.city_api import DEFAULT_BASE_URL


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    env: Env = Env.local
    api_base_url: str = DEFAULT_BASE_URL
    api_key: str = ""
    host: str = "0.0.0.0"
    port: int = 3000
    # Seconds. None waits on the provider indefinitely.
    timeout: float | None = None
    log_level: str = "INFO"
