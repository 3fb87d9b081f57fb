from __future__ import annotations

import logging
import threading

from beauty_advisor.application.exceptions import ChatInProgress, RemoteServiceError
from beauty_advisor.application.ports.llm import LLMPort
from beauty_advisor.application.ports.web_search import WebSearchPort
from beauty_advisor.application.use_cases.conversation_context import ConversationContext
from beauty_advisor.application.use_cases.product_catalog import ProductCatalog
from beauty_advisor.application.use_cases.recommendation_extractor import extract
from beauty_advisor.application.use_cases.selection_store import SelectionStore
from beauty_advisor.application.utils.search_decision import (
    build_search_query,
    format_search_results,
    should_search,
)
from beauty_advisor.application.utils.text_format import clean_markdown_formatting
from beauty_advisor.domain.entities.reply import ChatReply
from beauty_advisor.domain.entities.search_result import SearchResult

CONNECTION_FALLBACK = "I'm sorry, I'm having trouble connecting right now. Please try again in a moment!"


class ChatUseCase:
    """Relay a user question to the LLM with selection, routine and optional web context."""

    def __init__(
        self,
        llm: LLMPort,
        web_search: WebSearchPort,
        catalog: ProductCatalog,
        selection: SelectionStore,
        context: ConversationContext,
    ) -> None:
        self._llm = llm
        self._web_search = web_search
        self._catalog = catalog
        self._selection = selection
        self._context = context
        self._in_flight = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def ask(self, message: str) -> ChatReply:
        text = (message or "").strip()
        if not text:
            raise ValueError("message must not be empty")

        # One outstanding request at a time keeps history in dispatch order.
        if not self._in_flight.acquire(blocking=False):
            raise ChatInProgress("a chat request is already in progress")
        try:
            return self._ask(text)
        finally:
            self._in_flight.release()

    def _ask(self, text: str) -> ChatReply:
        used_web_search = should_search(text)
        web_context = ""
        if used_web_search:
            web_context = format_search_results(self._search(text))

        suffix = self._context.build_context_suffix(self._selection.products)
        session_context = f"{suffix.render()}{web_context}"

        self._context.append_user_turn(text)
        try:
            raw = self._llm.generate_reply(session_context, self._context.history)
        except RemoteServiceError as e:
            self._logger.error(
                "Error getting AI response",
                extra={"error": str(e), "used_web_search": used_web_search},
            )
            return ChatReply(text=CONNECTION_FALLBACK, used_web_search=used_web_search, failed=True)

        reply_text = clean_markdown_formatting(raw)
        self._context.append_assistant_turn(reply_text)
        products = extract(reply_text, self._catalog.products)

        self._logger.info(
            "Chat reply generated",
            extra={
                "history_len": len(self._context.history),
                "used_web_search": used_web_search,
                "reason": f"{len(products)} recommendations",
            },
        )
        return ChatReply(text=reply_text, products=products, used_web_search=used_web_search)

    def _search(self, text: str) -> list[SearchResult]:
        try:
            return self._web_search.search(build_search_query(text))
        except RemoteServiceError as e:
            self._logger.warning("Web search error", extra={"error": str(e)})
            return []
