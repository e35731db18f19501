"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from chatquery.exceptions import ConfigurationError

# Credentials each adapter needs before it may touch the network.
PROVIDER_SETTINGS: dict[str, tuple[str, ...]] = {
    "bing": ("bing_api_key",),
    "google": ("google_search_api_key", "google_search_cx_id"),
    "geonames": ("geonames_id",),
    "wolfram": ("wolfram_id",),
    "github": ("github_api_key",),
    "youtube": ("google_youtube_key",),
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Provider credentials
    bing_api_key: str = Field(default="", description="Bing Web Search subscription key")
    geonames_id: str = Field(default="", description="GeoNames username")
    github_api_key: str = Field(default="", description="GitHub personal access token")
    google_search_api_key: str = Field(default="", description="Google Custom Search API key")
    google_search_cx_id: str = Field(default="", description="Google Custom Search engine id")
    google_youtube_key: str = Field(default="", description="YouTube Data API key")
    wolfram_id: str = Field(default="", description="Wolfram|Alpha app id")

    # Transport
    http_timeout: float = Field(default=5.0, description="HTTP request timeout in seconds")

    # Application Configuration
    app_title: str = Field(default="chatquery", description="Application title")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")

    def require(self, name: str) -> str:
        """Return a credential or raise ConfigurationError naming it."""
        value = getattr(self, name, "")
        if not value:
            raise ConfigurationError(name)
        return value

    def configured_providers(self) -> dict[str, bool]:
        """Report which adapters have every credential they need."""
        return {
            provider: all(getattr(self, name) for name in names)
            for provider, names in PROVIDER_SETTINGS.items()
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
