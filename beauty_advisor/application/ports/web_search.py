from __future__ import annotations

from abc import ABC, abstractmethod

from beauty_advisor.domain.entities.search_result import SearchResult


class WebSearchPort(ABC):
    @abstractmethod
    def search(self, query: str) -> list[SearchResult]:
        """
        Run a web search for `query`.

        Adapters may raise SearchUpstreamError; callers treat any failure as an
        empty result set.
        """
        raise NotImplementedError
