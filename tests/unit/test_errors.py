"""Unit tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from web_search_mcp.utils.errors import (
    BackendError,
    ConfigurationError,
    ProviderStateError,
    SearchError,
    ValidationError,
    WebSearchMCPError,
)


@pytest.mark.parametrize(
    "error_cls",
    [BackendError, ConfigurationError, ProviderStateError, SearchError, ValidationError],
)
def test_subclasses_share_base(error_cls: type[WebSearchMCPError]) -> None:
    error = error_cls("boom")
    assert isinstance(error, WebSearchMCPError)
    assert error.message == "boom"
    assert str(error) == "boom"


def test_provider_name_prefixes_str() -> None:
    error = BackendError("timed out", provider_name="Brave Search")
    assert str(error) == "[Brave Search] timed out"
    assert error.message == "timed out"
    assert error.provider_name == "Brave Search"


def test_default_messages() -> None:
    assert ConfigurationError().message == "Invalid or missing configuration"
    assert SearchError().message == "Search failed"
