from __future__ import annotations

import logging
import threading

from beauty_advisor.domain.entities.context_suffix import ContextSuffix
from beauty_advisor.domain.entities.product import Product
from beauty_advisor.domain.entities.turn import ASSISTANT, USER, Turn

DEFAULT_HISTORY_LIMIT = 10

ROUTINE_TURN_PREFIX = "Here is your personalized L'Oréal routine: "
ROUTINE_FOLLOW_UP_NOTE = (
    "\n\nA personalized routine has been generated for the customer. "
    "They may ask follow-up questions about this routine."
)
NO_SELECTION_NOTE = "\n\nThe customer has not selected any products yet."


class ConversationContext:
    """
    Rolling chat history plus the most recently generated routine.

    History is kept to `history_limit` turns: once it grows past the limit it
    is cut back to the first turn (the welcome message) and the newest
    `history_limit - 1` turns. The rule is applied as-is, so a user turn can
    lose its paired assistant turn at the cut.
    """

    def __init__(self, history_limit: int = DEFAULT_HISTORY_LIMIT) -> None:
        if history_limit < 2:
            raise ValueError("history_limit must be at least 2")
        self._history_limit = history_limit
        self._history: list[Turn] = []
        self._generated_routine: str | None = None
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def history_limit(self) -> int:
        return self._history_limit

    @property
    def history(self) -> list[Turn]:
        with self._lock:
            return list(self._history)

    @property
    def generated_routine(self) -> str | None:
        return self._generated_routine

    def append_user_turn(self, text: str) -> None:
        self._append(Turn(role=USER, content=text))

    def append_assistant_turn(self, text: str) -> None:
        self._append(Turn(role=ASSISTANT, content=text))

    def set_generated_routine(self, text: str) -> None:
        with self._lock:
            self._generated_routine = text
            self._append(Turn(role=ASSISTANT, content=f"{ROUTINE_TURN_PREFIX}{text}"))

    def build_context_suffix(self, selection: list[Product]) -> ContextSuffix:
        if selection:
            names = ", ".join(f"{p.name} by {p.brand}" for p in selection)
            selection_text = f"\n\nThe customer has selected these products: {names}."
        else:
            selection_text = NO_SELECTION_NOTE
        routine_text = ROUTINE_FOLLOW_UP_NOTE if self._generated_routine else ""
        return ContextSuffix(selection_text=selection_text, routine_text=routine_text)

    def _append(self, turn: Turn) -> None:
        with self._lock:
            self._history.append(turn)
            if len(self._history) > self._history_limit:
                keep = self._history_limit - 1
                self._history = [self._history[0], *self._history[-keep:]]
                self._logger.debug("History compacted", extra={"history_len": len(self._history)})
