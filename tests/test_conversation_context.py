"""
Tests for the bounded conversation history and routine slot.
"""

from __future__ import annotations

import pytest

from beauty_advisor.application.use_cases.conversation_context import (
    NO_SELECTION_NOTE,
    ROUTINE_FOLLOW_UP_NOTE,
    ROUTINE_TURN_PREFIX,
    ConversationContext,
)


def test_eleven_turns_compact_to_first_plus_last_nine():
    context = ConversationContext()
    for i in range(11):
        if i % 2:
            context.append_user_turn(f"turn {i}")
        else:
            context.append_assistant_turn(f"turn {i}")

    history = context.history
    assert len(history) == 10
    assert history[0].content == "turn 0"
    assert [t.content for t in history[1:]] == [f"turn {i}" for i in range(2, 11)]


def test_ten_turns_are_not_compacted():
    context = ConversationContext()
    for i in range(10):
        context.append_user_turn(f"turn {i}")
    assert [t.content for t in context.history] == [f"turn {i}" for i in range(10)]


def test_twelve_turns_keep_welcome_turn():
    context = ConversationContext()
    context.append_assistant_turn("welcome")
    for i in range(11):
        context.append_user_turn(f"q{i}")

    history = context.history
    assert len(history) == 10
    assert history[0].content == "welcome"
    assert history[-1].content == "q10"


def test_roles_are_recorded():
    context = ConversationContext()
    context.append_user_turn("hi")
    context.append_assistant_turn("hello")
    assert [t.role for t in context.history] == ["user", "assistant"]


def test_history_is_a_copy():
    context = ConversationContext()
    context.append_user_turn("hi")
    context.history.clear()
    assert len(context.history) == 1


def test_set_generated_routine_overwrites_and_appends_turn():
    context = ConversationContext()
    context.set_generated_routine("first routine")
    context.set_generated_routine("second routine")

    assert context.generated_routine == "second routine"
    history = context.history
    assert len(history) == 2
    assert history[-1].role == "assistant"
    assert history[-1].content == f"{ROUTINE_TURN_PREFIX}second routine"


def test_context_suffix_without_selection_or_routine():
    context = ConversationContext()
    suffix = context.build_context_suffix([])
    assert suffix.selection_text == NO_SELECTION_NOTE
    assert suffix.routine_text == ""


def test_context_suffix_names_selection_and_routine(products):
    context = ConversationContext()
    context.set_generated_routine("routine")
    history_before = context.history

    suffix = context.build_context_suffix(products[:2])
    assert "Foaming Facial Cleanser by CeraVe, Moisturizing Cream by CeraVe" in suffix.selection_text
    assert suffix.routine_text == ROUTINE_FOLLOW_UP_NOTE
    assert suffix.render() == suffix.selection_text + suffix.routine_text
    assert context.history == history_before


def test_custom_limit():
    context = ConversationContext(history_limit=4)
    for i in range(6):
        context.append_user_turn(str(i))
    assert [t.content for t in context.history] == ["0", "3", "4", "5"]


def test_limit_must_leave_room_for_recent_turns():
    with pytest.raises(ValueError):
        ConversationContext(history_limit=1)
