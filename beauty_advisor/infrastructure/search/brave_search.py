from __future__ import annotations

import logging
from typing import Any

import httpx

from beauty_advisor.application.ports.web_search import WebSearchPort
from beauty_advisor.core.config import settings
from beauty_advisor.domain.entities.search_result import SearchResult

MAX_CONTEXT_RESULTS = 3


class BraveWebSearch(WebSearchPort):
    """Brave Search API client. Any failure degrades to an empty result list."""

    def __init__(
        self,
        api_key: str | None = None,
        endpoint: str | None = None,
        result_count: int | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key or settings.BRAVE_API_KEY
        self._endpoint = endpoint or settings.BRAVE_SEARCH_ENDPOINT
        self._result_count = result_count or settings.BRAVE_RESULT_COUNT
        self._client = client or httpx.Client(timeout=settings.SEARCH_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._api_key:
            raise ValueError("BRAVE_API_KEY is required for Brave web search")

    def search(self, query: str) -> list[SearchResult]:
        params = {
            "q": query,
            "count": self._result_count,
            "search_lang": "en",
            "country": "us",
            "safesearch": "strict",
        }
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip",
            "X-Subscription-Token": self._api_key,
        }
        try:
            response = self._client.get(self._endpoint, params=params, headers=headers)
        except httpx.HTTPError as e:
            self._logger.error("Web search error", extra={"error": str(e)})
            return []

        if response.status_code >= 400:
            self._logger.warning("Web search failed", extra={"status_code": response.status_code})
            return []

        try:
            data = response.json()
        except ValueError as e:
            self._logger.error("Web search returned invalid JSON", extra={"error": str(e)})
            return []

        return _parse_results(data)[:MAX_CONTEXT_RESULTS]


def _parse_results(data: Any) -> list[SearchResult]:
    if not isinstance(data, dict):
        return []
    web = data.get("web")
    raw_results = web.get("results") if isinstance(web, dict) else None
    if not isinstance(raw_results, list):
        return []

    results: list[SearchResult] = []
    for item in raw_results:
        if not isinstance(item, dict):
            continue
        description = item.get("description") or item.get("snippet") or ""
        snippet = item.get("snippet") or item.get("description") or ""
        results.append(
            SearchResult(
                title=str(item.get("title") or ""),
                url=str(item.get("url") or ""),
                description=str(description),
                snippet=str(snippet),
            )
        )
    return results
