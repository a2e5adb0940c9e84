"""Pydantic schemas for tool-call arguments.

The host sends ``arguments`` as a free-form JSON object; these models are
the single place where it is checked.  A pydantic validation failure here
becomes an invalid-request error before any provider is contacted.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class WebSearchArguments(BaseModel):
    """Arguments accepted by the ``web_search`` tool."""

    model_config = ConfigDict(extra="ignore")

    search_term: str
    provider: str | None = None

    @field_validator("search_term")
    @classmethod
    def _strip_search_term(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("'search_term' must be a non-empty string")
        return stripped

    @field_validator("provider")
    @classmethod
    def _blank_provider_is_default(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()
