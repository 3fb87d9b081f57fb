from abc import ABC, abstractmethod

from beauty_advisor.domain.entities.product import Product
from beauty_advisor.domain.entities.turn import Turn


class LLMPort(ABC):
    @abstractmethod
    def generate_reply(self, session_context: str, history: list[Turn]) -> str:
        """
        Produce the next assistant message.

        Requirements:
        - The adapter owns the persona/brand instructions and appends `session_context` to them
        - `history` is the full bounded conversation, ending with the new user turn
        - Return the raw completion text (callers clean formatting)
        - Raise LLMUpstreamError on provider/network failure or non-success status
        - Raise LLMContractError when the provider returns no usable text

        Args:
            session_context: Selection, routine and web-search context for this request
            history: Ordered user/assistant turns

        Returns:
            Completion text
        """
        raise NotImplementedError

    @abstractmethod
    def generate_routine(self, products: list[Product]) -> str:
        """
        Produce a personalized routine for the given selected products.

        Raises the same errors as generate_reply.
        """
        raise NotImplementedError
