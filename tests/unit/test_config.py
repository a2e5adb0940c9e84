"""Unit tests for Settings and the YAML/env configuration loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from web_search_mcp.config.loader import load_config
from web_search_mcp.config.settings import Settings
from web_search_mcp.utils.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run in an empty directory (no .env) with no search variables set."""
    for name in ("BRAVE_API_KEY", "MAX_RESULTS", "REQUEST_TIMEOUT", "LOG_LEVEL", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestSettings:
    def test_defaults(self, clean_env: Path) -> None:
        settings = Settings()
        assert settings.brave_api_key == ""
        assert settings.max_results == 10
        assert settings.request_timeout == 10_000
        assert settings.log_level == "INFO"

    def test_reads_environment(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BRAVE_API_KEY", "env-key")
        monkeypatch.setenv("MAX_RESULTS", "4")
        monkeypatch.setenv("REQUEST_TIMEOUT", "2500")

        settings = Settings()
        assert settings.brave_api_key == "env-key"
        assert settings.max_results == 4
        assert settings.request_timeout == 2500

    def test_reads_dotenv_file(self, clean_env: Path) -> None:
        (clean_env / ".env").write_text("BRAVE_API_KEY=dotenv-key\n", encoding="utf-8")
        assert Settings().brave_api_key == "dotenv-key"

    def test_api_key_hidden_from_repr(self) -> None:
        assert "secret" not in repr(Settings(brave_api_key="secret"))


class TestLoadConfig:
    def test_missing_api_key_is_fatal(self, clean_env: Path) -> None:
        with pytest.raises(ConfigurationError, match="BRAVE_API_KEY"):
            load_config(path=str(clean_env / "missing.yaml"))

    def test_env_values_and_default_server(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BRAVE_API_KEY", "env-key")
        monkeypatch.setenv("MAX_RESULTS", "3")

        config = load_config(path=str(clean_env / "missing.yaml"))

        assert config.search.api_key == "env-key"
        assert config.search.max_results == 3
        assert config.search.timeout_ms == 10_000
        assert config.server.name == "web-search-mcp"
        assert config.server.version == "1.0.0"

    def test_yaml_server_identity(self, clean_env: Path) -> None:
        yaml_path = clean_env / "config.yaml"
        yaml_path.write_text("server:\n  name: custom-search\n  version: '2.1.0'\n", encoding="utf-8")

        config = load_config(path=str(yaml_path), settings=Settings(brave_api_key="k"))

        assert config.server.name == "custom-search"
        assert config.server.version == "2.1.0"

    def test_empty_yaml_file(self, clean_env: Path) -> None:
        yaml_path = clean_env / "config.yaml"
        yaml_path.write_text("", encoding="utf-8")

        config = load_config(path=str(yaml_path), settings=Settings(brave_api_key="k"))
        assert config.server.name == "web-search-mcp"

    def test_non_positive_limit_names_variable(self, clean_env: Path) -> None:
        settings = Settings(brave_api_key="k", max_results=0)
        with pytest.raises(ConfigurationError, match="MAX_RESULTS"):
            load_config(path=str(clean_env / "missing.yaml"), settings=settings)

    def test_non_numeric_env_value(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BRAVE_API_KEY", "k")
        monkeypatch.setenv("REQUEST_TIMEOUT", "soon")

        with pytest.raises(ConfigurationError, match="REQUEST_TIMEOUT"):
            load_config(path=str(clean_env / "missing.yaml"))

    def test_repo_config_file_is_valid(self) -> None:
        repo_yaml = Path(__file__).resolve().parents[2] / "config" / "config.yaml"
        config = load_config(path=str(repo_yaml), settings=Settings(brave_api_key="k"))
        assert config.server.name == "web-search-mcp"
