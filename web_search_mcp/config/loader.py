"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml: static defaults checked into the repo (server
     identity)
  2. .env file         : local developer overrides (not committed)
  3. Environment vars  : set by the host that launches the server

The merged dict is validated into :class:`AppConfig`; anything missing or
out of range becomes a :class:`ConfigurationError` and the server does not
start.
"""

from __future__ import annotations

from pathlib import Path

import pydantic
import yaml
from pydantic import BaseModel, ConfigDict

from web_search_mcp.config.settings import Settings
from web_search_mcp.interfaces.search_provider import SearchProviderConfig
from web_search_mcp.utils.errors import ConfigurationError

_ENV_NAMES = {
    "api_key": "BRAVE_API_KEY",
    "max_results": "MAX_RESULTS",
    "timeout_ms": "REQUEST_TIMEOUT",
}


class ServerConfig(BaseModel):
    """Identity reported to the host during the protocol handshake."""

    model_config = ConfigDict(frozen=True)

    name: str = "web-search-mcp"
    version: str = "1.0.0"


class AppConfig(BaseModel):
    """Fully resolved application configuration."""

    model_config = ConfigDict(frozen=True)

    server: ServerConfig = ServerConfig()
    search: SearchProviderConfig
    log_level: str = "INFO"
    app_env: str = "development"


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> AppConfig:
    """Load YAML config, merge environment-based Settings, and validate.

    Args:
        path: Path to the YAML configuration file (optional on disk).
        settings: Pre-built Settings; read from the environment when omitted.

    Returns:
        The validated application configuration.

    Raises:
        ConfigurationError: If the API key is missing or a limit is invalid.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    try:
        settings = settings or Settings()
    except pydantic.ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc

    if not settings.brave_api_key:
        raise ConfigurationError(
            "BRAVE_API_KEY environment variable is not set. "
            "Create a .env file in the project root with your API key."
        )

    env_overrides = {
        "search": {
            "api_key": settings.brave_api_key,
            "max_results": settings.max_results,
            "timeout_ms": settings.request_timeout,
        },
        "log_level": settings.log_level,
        "app_env": settings.app_env,
    }
    _deep_merge(yaml_config, env_overrides)

    try:
        return AppConfig.model_validate(yaml_config)
    except pydantic.ValidationError as exc:
        raise ConfigurationError(_describe(exc)) from exc


def _describe(exc: pydantic.ValidationError) -> str:
    """Name the offending environment variables in a validation failure."""
    problems = []
    for error in exc.errors():
        field = str(error["loc"][-1]) if error["loc"] else "config"
        problems.append(f"{_ENV_NAMES.get(field, field.upper())}: {error['msg']}")
    return "Invalid configuration: " + "; ".join(problems)


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
