from __future__ import annotations

from beauty_advisor.domain.entities.search_result import SearchResult

# Temporal and commercial-intent terms. Plain substring matching, so "news"
# also matches "new" and "vs" matches inside words.
WEB_SEARCH_KEYWORDS = (
    "latest",
    "new",
    "recent",
    "current",
    "price",
    "cost",
    "buy",
    "purchase",
    "available",
    "where to find",
    "reviews",
    "rating",
    "compare",
    "vs",
    "launch",
    "released",
    "trending",
    "popular",
    "best seller",
    "on sale",
    "discount",
    "ingredients list",
    "full ingredients",
    "updated formula",
)

SEARCH_BRAND_SCOPE = (
    "L'Oréal CeraVe Maybelline Garnier "
    "site:loreal.com OR site:cerave.com OR site:maybelline.com OR site:garnier.com"
)


def should_search(message_text: str) -> bool:
    message = (message_text or "").lower()
    return any(keyword in message for keyword in WEB_SEARCH_KEYWORDS)


def build_search_query(message_text: str) -> str:
    return f"{message_text} {SEARCH_BRAND_SCOPE}"


def format_search_results(results: list[SearchResult]) -> str:
    """Render search results as the context block appended to the system prompt."""
    if not results:
        return ""

    formatted = "\n\n".join(
        f"{index}. {result.title}\n   URL: {result.url}\n   Info: {result.snippet}"
        for index, result in enumerate(results, start=1)
    )
    return (
        f"\n\nCURRENT WEB INFORMATION:\n{formatted}\n\n"
        "Use this current information to provide up-to-date details about L'Oréal products, "
        "pricing, availability, or recent launches. Always cite sources when using this information."
    )
