"""Query intent models.

``QueryCategory`` values are the labels the host sees in tool metadata and
in the guidance text, so they keep their camelCase spelling.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class QueryCategory(str, Enum):  # noqa: UP042: StrEnum requires Python 3.11+
    """Best-fit category for a free-text query.

    The first five members are *mandatory* categories: a query matching any
    of them must always be searched.  ``GENERAL_INFORMATION`` is only
    assigned when no mandatory category matched but the query still looks
    like a request for information.
    """

    WEATHER = "weather"
    CURRENT_EVENTS = "currentEvents"
    SPORTS_SCORES = "sportsScores"
    STOCK_MARKET = "stockMarket"
    TIME_SENSITIVE = "timeSensitive"
    GENERAL_INFORMATION = "generalInformation"


class QueryIntent(BaseModel):
    """The full classification of one query, computed in a single pass."""

    model_config = ConfigDict(frozen=True)

    query: str
    requires_real_time_data: bool
    is_information_seeking: bool
    category: QueryCategory | None = None

    @property
    def category_label(self) -> str:
        """Category as reported in tool metadata ("general" when unmatched)."""
        return self.category.value if self.category else "general"
