from functools import lru_cache

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

RATE_SOURCE_KINDS = {"static", "external-http"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    EXCHANGE_RATE_PROVIDER, EXCHANGE_API_BASE_URL, HTTP_TIMEOUT_SECONDS).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "NomadFlow Runway Calculator"
    debug: bool = False
    version: str = "0.1.0"

    # Live exchange rates
    # Allowed: 'external-http' (live lookup, falls back per country) or
    # 'static' (never hits the network, always uses the fallback table)
    exchange_rate_provider: str = "external-http"
    exchange_api_base_url: AnyHttpUrl = "https://api.exchangerate.host/latest"
    http_timeout_seconds: float = 5.0

    def init_post_load(self) -> None:
        """Validate derived / enumerated fields."""
        if self.exchange_rate_provider not in RATE_SOURCE_KINDS:
            raise ValueError(
                f"Unsupported exchange_rate_provider '{self.exchange_rate_provider}'. Allowed: {RATE_SOURCE_KINDS}"
            )
        if self.http_timeout_seconds <= 0:
            raise ValueError("http_timeout_seconds must be positive")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
