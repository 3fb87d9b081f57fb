from __future__ import annotations

from beauty_advisor.application.ports.llm import LLMPort
from beauty_advisor.domain.entities.product import Product
from beauty_advisor.domain.entities.turn import USER, Turn


class MockLLM(LLMPort):
    """Offline stand-in used when no OpenAI key is configured."""

    def generate_reply(self, session_context: str, history: list[Turn]) -> str:
        question = next((t.content for t in reversed(history) if t.role == USER), "")
        lowered = question.lower()
        if any(word in lowered for word in ("dry", "hydrat", "moistur")):
            return (
                "For dry skin, try the **CeraVe Moisturizing Cream** at night and a gentle "
                "hydrating cleanser in the morning."
            )
        if any(word in lowered for word in ("lash", "mascara", "eye")):
            return "Maybelline mascara gives great volume without clumping."
        if "routine" in lowered:
            return "Start with a cleanser, follow with a serum, and finish with sunscreen in the morning."
        return f"Happy to help! Tell me more about your skin type so I can tailor advice on: {question}"

    def generate_routine(self, products: list[Product]) -> str:
        morning = "\n".join(f"{i}. {p.name} ({p.category})" for i, p in enumerate(products, start=1))
        return (
            "### Morning\n"
            f"{morning}\n"
            "### Evening\n"
            "Repeat the routine, skipping sunscreen. **Introduce actives slowly.**"
        )
