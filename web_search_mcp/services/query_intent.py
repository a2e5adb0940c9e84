# ─── QUERY INTENT ENGINE ───────────────────────────────────────────────
#
# Decides, from the raw query text alone, whether a web_search call needs
# real-time data, which category it belongs to, and what guidance text the
# host should see next to the tool and next to each result.
#
# Three immutable pattern tables drive every decision:
#   • MANDATORY_SEARCH_CATEGORIES: (category, patterns) pairs in declared
#     order; any hit means "must search", and the first category hit is the
#     reported category.
#   • INFORMATION_SEEKING_PATTERNS: question words and explicit lookups.
#   • TIME_INDICATORS: words that only mandate a search when they appear
#     together with an information-seeking pattern.
#
# Classification is deliberately over-inclusive: a false "search anyway"
# is acceptable, a missed real-time query is not.  Nothing here raises; an
# empty or None query is simply "not real-time, no category".
# ────────────────────────────────────────────────────────────────────────

from __future__ import annotations

import re

from web_search_mcp.models.intent import QueryCategory, QueryIntent
from web_search_mcp.utils.logging import get_logger

logger = get_logger(__name__)


def _compile(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


# Declared order is observable: on multi-category matches the first wins.
MANDATORY_SEARCH_CATEGORIES: tuple[tuple[QueryCategory, tuple[re.Pattern[str], ...]], ...] = (
    (
        QueryCategory.WEATHER,
        _compile(
            r"\bweather\b",
            r"\btemperature\b",
            r"\bforecast\b",
            r"\bhumidity\b",
            r"\bprecipitation\b",
            r"\brain\b",
            r"\bsnow\b",
            r"\bsunny\b",
            r"\bcloudy\b",
            r"\bwindy\b",
            r"\bhot\b",
            r"\bcold\b",
            r"how (?:is|was) the weather",
            r"how (?:hot|cold|warm) is",
        ),
    ),
    (
        QueryCategory.CURRENT_EVENTS,
        _compile(
            r"\bnews\b",
            r"\blatest\b",
            r"\brecent\b",
            r"\btoday['’]?s\b",
            r"\bcurrent\b",
            r"\brecently\b",
            r"\bbreaking\b",
            r"\bheadline",
        ),
    ),
    (
        QueryCategory.SPORTS_SCORES,
        _compile(
            r"\bscore\b",
            r"\bmatch\b",
            r"\bgame\b",
            r"\bfinal score\b",
            r"\bresult\b",
            r"\bwinner\b",
            r"\bloser\b",
            r"\btournament\b",
            r"\bchampionship\b",
            r"who (?:won|lost)",
            r"did.*win",
        ),
    ),
    (
        QueryCategory.STOCK_MARKET,
        _compile(
            r"\bstock\b",
            r"\bprice\b",
            r"\bmarket\b",
            r"\btrade\b",
            r"\binvest\b",
            r"\bshare\b",
            r"\bvalue\b",
            r"\bindex\b",
            r"\bnasdaq\b",
            r"\bdow\b",
            r"\bS&P\b",
        ),
    ),
    (
        QueryCategory.TIME_SENSITIVE,
        # Bare "today", "now" and "currently" live in TIME_INDICATORS: on
        # their own they only count alongside an information-seeking word.
        _compile(
            r"\bthis week\b",
            r"\bthis month\b",
            r"\bthis year\b",
            r"\bright now\b",
            r"\bat the moment\b",
            r"\bat present\b",
            r"\bpresently\b",
            r"\bas of today\b",
        ),
    ),
)

INFORMATION_SEEKING_PATTERNS: tuple[re.Pattern[str], ...] = _compile(
    r"\b(?:what|who|where|when|why|how)\b",
    r"\b(?:information|details|specifics)\b",
    r"\b(?:history|background|origin)\b",
    r"\b(?:meaning|definition|explain|define)\b",
    r"\b(?:population|statistics|data|facts)\b",
    r"\b(?:difference|versus|vs|compare)\b",
    r"\btell me about\b",
    r"\bcan you (?:find|look up|search for|tell me)\b",
    r"\bI (?:want|need) to know\b",
)

TIME_INDICATORS: tuple[re.Pattern[str], ...] = _compile(
    r"\btoday\b",
    r"\btonight\b",
    r"\bthis (?:week|month|year)\b",
    r"\bcurrent\b",
    r"\bcurrently\b",
    r"\bnow\b",
    r"\blatest\b",
    r"\brecent\b",
    r"\bupdated\b",
    r"\bup[- ]to[- ]date\b",
    r"\b202[3-9]\b",
    r"\b203[0-9]\b",
)

_GUIDANCE_EXAMPLES = (
    '"What\'s the weather in Berlin today?"',
    '"Latest news about AI regulations"',
    '"Who won the Champions League?"',
    '"Current price of Apple stock"',
    "Any question about recent events, current conditions, or time-sensitive information",
)


def _any_match(patterns: tuple[re.Pattern[str], ...], query: str) -> bool:
    return any(pattern.search(query) for pattern in patterns)


def _mandatory_category(query: str) -> QueryCategory | None:
    """Return the first mandatory category with a matching pattern."""
    for category, patterns in MANDATORY_SEARCH_CATEGORIES:
        if _any_match(patterns, query):
            return category
    return None


def mandatory_categories() -> list[str]:
    """Labels of the mandatory categories, in declared order."""
    return [category.value for category, _ in MANDATORY_SEARCH_CATEGORIES]


def requires_real_time_data(query: str | None) -> bool:
    """Return ``True`` if *query* must be answered from a live search.

    True when any mandatory-category pattern matches, or when a time
    indicator and an information-seeking pattern both match.  Callers must
    treat ``True`` as non-optional.
    """
    if not query:
        return False

    category = _mandatory_category(query)
    if category is not None:
        logger.debug("mandatory_category_detected", category=category.value)
        return True

    if _any_match(TIME_INDICATORS, query) and _any_match(INFORMATION_SEEKING_PATTERNS, query):
        logger.debug("time_sensitive_information_query_detected")
        return True

    return False


def categorize_query(query: str | None) -> QueryCategory | None:
    """Return the best-fit category for *query*, or ``None``.

    Mandatory categories are checked in declared order and the first match
    wins (a query mentioning both "weather" and "score" is WEATHER).  With
    no mandatory match, any information-seeking pattern yields
    GENERAL_INFORMATION.
    """
    if not query:
        return None

    category = _mandatory_category(query)
    if category is not None:
        return category

    if _any_match(INFORMATION_SEEKING_PATTERNS, query):
        return QueryCategory.GENERAL_INFORMATION

    return None


def is_information_seeking(query: str | None) -> bool:
    """Return ``True`` if *query* would plausibly benefit from a lookup."""
    if not query:
        return False
    if requires_real_time_data(query):
        return True
    return _any_match(INFORMATION_SEEKING_PATTERNS, query)


def classify_query(query: str | None) -> QueryIntent:
    """Run every classifier over *query* and bundle the outcome."""
    return QueryIntent(
        query=query or "",
        requires_real_time_data=requires_real_time_data(query),
        is_information_seeking=is_information_seeking(query),
        category=categorize_query(query),
    )


def generate_usage_guidance(query: str | None = None) -> str:
    """Build the usage text advertised with the ``web_search`` tool.

    Without a query this is the generic form shown at tool-listing time.
    With a query that requires real-time data, a CRITICAL paragraph naming
    the detected category is inserted before the examples.
    """
    guidance = "IMPORTANT: Always use this tool proactively, even when brevity is requested. "
    guidance += "Search first, then explain limitations only if search fails. "
    guidance += "You MUST ALWAYS use this tool for: weather, current events, sports scores, "
    guidance += "stock prices, news, and any time-sensitive topics. "

    if query and requires_real_time_data(query):
        guidance += "\n\nCRITICAL: This query REQUIRES real-time data. "
        guidance += "You MUST use this tool and NOT rely on your training data. "
        category = categorize_query(query)
        if category is not None:
            guidance += f"This is a {category.value} query which ALWAYS needs current information. "

    guidance += "\n\nExamples of when to ALWAYS use this tool:"
    for example in _GUIDANCE_EXAMPLES:
        guidance += f"\n- {example}"

    return guidance


def generate_response_guidance(query: str | None) -> str:
    """Build the ``usage`` note attached to a single search response.

    Recomputes the classification rather than reusing the advertised
    guidance, so the note always reflects this particular query.
    """
    if not requires_real_time_data(query):
        return (
            "This information is from real-time web search and should be "
            "prioritized over outdated training data."
        )

    category = categorize_query(query)
    label = category.value if category is not None else "current"
    return (
        f"CRITICAL: This is real-time {label} information that CANNOT be obtained "
        "from training data. Present this search information first, and do NOT "
        "qualify it with statements about outdated knowledge."
    )
