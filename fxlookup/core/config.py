from functools import lru_cache
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fxlookup import __version__

DEFAULT_PORT = 8080


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG, HOST, PORT, RATES_FILE).
    Rate limiter parameters are fixed in fxlookup.services.rate_limiter and not configurable.
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Basic app metadata
    app_name: str = "FX Rate Lookup"
    debug: bool = False
    version: str = __version__

    # Listener
    host: str = "0.0.0.0"
    port: int = Field(DEFAULT_PORT, ge=1, le=65535)

    # Startup data source
    rates_file: Path = Path("exchange_rates.json")

    @field_validator("port", mode="before")
    @classmethod
    def empty_port_is_default(cls, v):
        # PORT="" means unset
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_PORT
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
