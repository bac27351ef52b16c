"""Configuration settings for the IACR MCP server."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server configuration settings."""

    APP_NAME: str = "iacr-mcp-server"
    APP_VERSION: str = "0.1.0"
    FEED_URL: str = "https://eprint.iacr.org/rss/rss.xml?order=recent"
    DOCUMENT_BASE_URL: str = "https://eprint.iacr.org/"
    FEED_TIMEOUT: float = 15.0
    DEFAULT_MAX_RESULTS: int = 20
    # Window (in years before the current one) that the search year gate always admits
    RECENT_YEARS: int = 10
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(extra="allow")
