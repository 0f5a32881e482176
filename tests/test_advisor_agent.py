"""
Tests for the chat advisor.

pydantic-ai's TestModel and FunctionModel stand in for the hosted model.
"""

import pytest
from pydantic_ai.messages import ModelRequest, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models.function import AgentInfo, FunctionModel
from pydantic_ai.models.test import TestModel

import config
from api.agents.advisor_agent import (
    FALLBACK_REPLY,
    INTERVIEW_QUESTIONS,
    INTERVIEW_SYSTEM_PROMPT,
    LEGACY_SYSTEM_PROMPT,
    AdvisorError,
    ChatAdvisor,
    InvalidTranscriptError,
    build_message_history,
)
from data_models import ChatMessage, ChatRole


def _user(text):
    return ChatMessage(role=ChatRole.USER, content=text)


def _assistant(text):
    return ChatMessage(role=ChatRole.ASSISTANT, content=text)


def _capturing_model(prompts, reply="Verstanden."):
    """FunctionModel that records the pending user prompt of every call."""

    def respond(messages, info: AgentInfo) -> ModelResponse:
        request = messages[-1]
        prompts.extend(part.content for part in request.parts if isinstance(part, UserPromptPart))
        return ModelResponse(parts=[TextPart(content=reply)])

    return FunctionModel(respond)


# =============================================================================
# Transcript conversion
# =============================================================================

class TestBuildMessageHistory:
    """Tests for turning chat turns into model history."""

    def test_splits_prompt_from_history(self):
        prompt, history = build_message_history([
            _user("Hallo"),
            _assistant("Guten Tag!"),
            _user("Ich plane meine Nachfolge."),
        ])

        assert prompt == "Ich plane meine Nachfolge."
        assert len(history) == 2
        assert isinstance(history[0], ModelRequest)
        assert isinstance(history[1], ModelResponse)
        assert history[1].parts[0].content == "Guten Tag!"

    def test_system_turns_are_dropped(self):
        prompt, history = build_message_history([
            ChatMessage(role=ChatRole.SYSTEM, content="Sei nett"),
            _user("Hallo"),
        ])

        assert prompt == "Hallo"
        assert history == []

    def test_transcript_must_end_with_user(self):
        with pytest.raises(InvalidTranscriptError):
            build_message_history([_user("Hallo"), _assistant("Hallo!")])

    def test_empty_transcript_is_rejected(self):
        with pytest.raises(InvalidTranscriptError):
            build_message_history([])


# =============================================================================
# Replies
# =============================================================================

class TestReply:
    """Tests for ChatAdvisor.reply."""

    @pytest.mark.asyncio
    async def test_returns_model_output(self):
        advisor = ChatAdvisor(model=TestModel(custom_output_text="Planen Sie frühzeitig."))

        reply = await advisor.reply([_user("Wann sollte ich anfangen?")])

        assert reply == "Planen Sie frühzeitig."

    @pytest.mark.asyncio
    async def test_empty_output_uses_fallback(self):
        advisor = ChatAdvisor(model=TestModel(custom_output_text="   "))

        assert await advisor.reply([_user("Hallo")]) == FALLBACK_REPLY

    @pytest.mark.asyncio
    async def test_guidance_is_appended_to_prompt(self):
        prompts = []
        advisor = ChatAdvisor(model=_capturing_model(prompts))

        await advisor.reply([_user("Meier")], INTERVIEW_SYSTEM_PROMPT, guidance="Frage nach der Branche")

        assert prompts[-1].startswith("Meier")
        assert "[Hinweis für den Berater: Frage nach der Branche]" in prompts[-1]

    @pytest.mark.asyncio
    async def test_model_failure_raises_advisor_error(self):
        def broken(messages, info):
            raise RuntimeError("upstream unavailable")

        advisor = ChatAdvisor(model=FunctionModel(broken))

        with pytest.raises(AdvisorError, match="upstream unavailable"):
            await advisor.reply([_user("Hallo")])

    def test_one_agent_per_system_prompt(self):
        advisor = ChatAdvisor(model=TestModel())

        legacy = advisor.get_agent(LEGACY_SYSTEM_PROMPT)

        assert advisor.get_agent(LEGACY_SYSTEM_PROMPT) is legacy
        assert advisor.get_agent(INTERVIEW_SYSTEM_PROMPT) is not legacy

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.setattr(config, "GEMINI_API_KEY", None)

        with pytest.raises(AdvisorError, match="GEMINI_API_KEY"):
            ChatAdvisor().get_agent(LEGACY_SYSTEM_PROMPT)


# =============================================================================
# Interview
# =============================================================================

class TestInterview:
    """Tests for the open interview flow."""

    @pytest.mark.asyncio
    async def test_opening_question_without_model(self):
        advisor = ChatAdvisor()

        turn = await advisor.interview([])

        assert turn.response == INTERVIEW_QUESTIONS[0]
        assert turn.question_index == 0
        assert turn.done is False

    @pytest.mark.asyncio
    async def test_next_question_follows_answer_count(self):
        prompts = []
        advisor = ChatAdvisor(model=_capturing_model(prompts, reply="Schön! Welche Art von Unternehmen führen Sie?"))

        turn = await advisor.interview([_assistant(INTERVIEW_QUESTIONS[0]), _user("Meier")])

        assert turn.question_index == 1
        assert turn.done is False
        assert turn.response == "Schön! Welche Art von Unternehmen führen Sie?"
        assert INTERVIEW_QUESTIONS[1] in prompts[-1]

    @pytest.mark.asyncio
    async def test_done_after_last_question(self):
        messages = []
        for i, question in enumerate(INTERVIEW_QUESTIONS):
            messages.append(_assistant(question))
            messages.append(_user(f"Antwort {i}"))

        advisor = ChatAdvisor(model=TestModel(custom_output_text="Vielen Dank für das Gespräch."))

        turn = await advisor.interview(messages)

        assert turn.done is True
        assert turn.question_index is None
        assert turn.response == "Vielen Dank für das Gespräch."
