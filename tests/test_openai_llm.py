"""
Tests for the OpenAI chat adapter with a stubbed SDK client.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from beauty_advisor.application.exceptions import LLMContractError, LLMUpstreamError, RemoteServiceError
from beauty_advisor.domain.entities.turn import Turn
from beauty_advisor.infrastructure.llm.mock_llm import MockLLM
from beauty_advisor.infrastructure.llm.openai_llm import OpenAIChatLLM


class StubCompletions:
    def __init__(self, content: str | None = "Hello!", error: Exception | None = None) -> None:
        self.content = content
        self.error = error
        self.kwargs: dict = {}

    def create(self, **kwargs):
        self.kwargs = kwargs
        if self.error:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _llm(completions: StubCompletions) -> OpenAIChatLLM:
    return OpenAIChatLLM(client=SimpleNamespace(chat=SimpleNamespace(completions=completions)))


def test_reply_sends_system_prompt_and_history():
    completions = StubCompletions(content="  Try CeraVe.  ")
    history = [Turn("assistant", "welcome"), Turn("user", "dry skin?")]

    text = _llm(completions).generate_reply("\n\nThe customer has not selected any products yet.", history)

    assert text == "Try CeraVe."
    messages = completions.kwargs["messages"]
    assert messages[0]["role"] == "system"
    assert messages[0]["content"].endswith("The customer has not selected any products yet.")
    assert "CeraVe" in messages[0]["content"]
    assert messages[1:] == [
        {"role": "assistant", "content": "welcome"},
        {"role": "user", "content": "dry skin?"},
    ]
    assert completions.kwargs["max_tokens"] == 1000


def test_routine_lists_products(products):
    completions = StubCompletions(content="Morning: cleanse.")
    assert _llm(completions).generate_routine(products[:2]) == "Morning: cleanse."
    prompt = completions.kwargs["messages"][1]["content"]
    assert "- Foaming Facial Cleanser by CeraVe (cleanser): Gel cleanser with ceramides" in prompt
    assert completions.kwargs["max_tokens"] == 1200


def test_provider_error_is_upstream_error():
    with pytest.raises(LLMUpstreamError):
        _llm(StubCompletions(error=RuntimeError("HTTP 500"))).generate_reply("", [Turn("user", "hi")])


def test_empty_completion_is_contract_error():
    with pytest.raises(LLMContractError) as excinfo:
        _llm(StubCompletions(content=None)).generate_reply("", [Turn("user", "hi")])
    assert isinstance(excinfo.value, RemoteServiceError)


def test_mock_llm_mentions_catalog_keywords(products):
    llm = MockLLM()
    reply = llm.generate_reply("", [Turn("user", "My skin is so dry")])
    assert "CeraVe" in reply
    routine = llm.generate_routine(products[:2])
    assert "Foaming Facial Cleanser" in routine
