from __future__ import annotations

import logging

from beauty_advisor.application.exceptions import RemoteServiceError
from beauty_advisor.application.ports.llm import LLMPort
from beauty_advisor.application.use_cases.conversation_context import ConversationContext
from beauty_advisor.application.use_cases.selection_store import SelectionStore
from beauty_advisor.application.utils.text_format import clean_markdown_formatting
from beauty_advisor.domain.entities.reply import RoutineResult

EMPTY_SELECTION_MESSAGE = "Please select some products first before generating a routine!"
ROUTINE_FALLBACK = "I'm sorry, I had trouble creating your routine. Please try again in a moment!"


class RoutineUseCase:
    def __init__(self, llm: LLMPort, selection: SelectionStore, context: ConversationContext) -> None:
        self._llm = llm
        self._selection = selection
        self._context = context
        self._logger = logging.getLogger(__name__)

    def generate(self) -> RoutineResult:
        products = self._selection.products
        if not products:
            return RoutineResult(text=EMPTY_SELECTION_MESSAGE)

        try:
            raw = self._llm.generate_routine(products)
        except RemoteServiceError as e:
            self._logger.error("Error generating routine", extra={"error": str(e)})
            return RoutineResult(text=ROUTINE_FALLBACK, failed=True)

        routine = clean_markdown_formatting(raw)
        self._context.set_generated_routine(routine)
        self._logger.info(
            "Routine generated",
            extra={"selected_count": len(products), "history_len": len(self._context.history)},
        )
        return RoutineResult(text=routine, generated=True)
