"""Search result models returned by every provider.

Pydantic v2 models, frozen so a response cannot be altered after the
provider has truncated it to ``max_results``.  Field names are snake_case
in Python and camelCase on the wire (``totalResults``, ``searchTimeMillis``),
which is what the host sees inside the tool-call envelope.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """A single web-search hit, passed through from the backend unchanged."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    description: str


class SearchResponse(BaseModel):
    """Normalized outcome of one search call.

    ``query`` echoes the query string the backend actually ran (some
    backends rewrite or spell-correct it).  ``total_results`` and
    ``search_time_ms`` are best-effort and stay ``None`` when the backend
    does not report them.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    query: str
    results: list[SearchResult] = Field(default_factory=list)
    total_results: int | None = Field(default=None, alias="totalResults")
    search_time_ms: float | None = Field(default=None, alias="searchTimeMillis")

    def to_wire(self) -> dict:
        """Return the camelCase dict sent to the host, without null fields."""
        return self.model_dump(by_alias=True, exclude_none=True)
