from beauty_advisor.application.ports.web_search import WebSearchPort
from beauty_advisor.domain.entities.search_result import SearchResult


class NullWebSearch(WebSearchPort):
    """Used when no search key is configured: chat runs without web augmentation."""

    def search(self, query: str) -> list[SearchResult]:
        return []
