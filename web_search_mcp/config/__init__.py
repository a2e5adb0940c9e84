"""Configuration module. Exports Settings, AppConfig and load_config."""

from web_search_mcp.config.loader import AppConfig, ServerConfig, load_config
from web_search_mcp.config.settings import Settings

__all__ = ["AppConfig", "ServerConfig", "Settings", "load_config"]
