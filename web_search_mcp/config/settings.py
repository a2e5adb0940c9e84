"""Application settings loaded from environment variables via pydantic-settings.

Values are read from (highest priority first):

  1. Environment variables, e.g. ``BRAVE_API_KEY=...``
  2. A ``.env`` file in the working directory (local development)
  3. The defaults below

Field ``brave_api_key`` maps to env var ``BRAVE_API_KEY`` automatically
(pydantic-settings matches case-insensitively).  The ``.env`` file holds a
secret and is never committed.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """web-search-mcp settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Web Search ===
    # Empty string = "not configured"; load_config() refuses to start.
    brave_api_key: str = Field(default="", repr=False)
    max_results: int = 10
    request_timeout: int = 10_000  # milliseconds

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
