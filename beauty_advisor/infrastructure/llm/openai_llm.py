from __future__ import annotations

from typing import Any

from openai import OpenAI

from beauty_advisor.application.exceptions import LLMContractError, LLMUpstreamError
from beauty_advisor.application.ports.llm import LLMPort
from beauty_advisor.core.config import settings
from beauty_advisor.domain.entities.product import Product
from beauty_advisor.domain.entities.turn import Turn
from beauty_advisor.infrastructure.llm.prompts import (
    ROUTINE_SYSTEM_MESSAGE,
    build_chat_system_prompt,
    build_routine_prompt,
)


class OpenAIChatLLM(LLMPort):
    """
    OpenAI chat-completions adapter implementing LLMPort.

    Contract guarantees:
    - generate_reply / generate_routine return non-empty completion text
    - Raises:
        LLMUpstreamError: networking/provider failures, including non-success HTTP status
        LLMContractError: empty or missing completion
    """

    def __init__(self, client: OpenAI | None = None) -> None:
        self.client = client or OpenAI(api_key=settings.OPENAI_API_KEY)

    def generate_reply(self, session_context: str, history: list[Turn]) -> str:
        messages = [{"role": "system", "content": build_chat_system_prompt(session_context)}]
        messages += [turn.as_message() for turn in history]
        return self._call_text(messages, max_tokens=settings.OPENAI_MAX_TOKENS_CHAT)

    def generate_routine(self, products: list[Product]) -> str:
        if not products:
            raise ValueError("generate_routine needs at least one product")
        messages = [
            {"role": "system", "content": ROUTINE_SYSTEM_MESSAGE},
            {"role": "user", "content": build_routine_prompt(products)},
        ]
        return self._call_text(messages, max_tokens=settings.OPENAI_MAX_TOKENS_ROUTINE)

    def _call_text(self, messages: list[dict[str, Any]], max_tokens: int) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=settings.OPENAI_MODEL,
                messages=messages,
                max_tokens=max_tokens,
                temperature=settings.OPENAI_TEMPERATURE,
            )
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        content = (resp.choices[0].message.content or "").strip() if resp.choices else ""
        if not content:
            raise LLMContractError("LLM returned empty response text.")

        return content
