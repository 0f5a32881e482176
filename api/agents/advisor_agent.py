import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from pydantic_ai import Agent
from pydantic_ai.messages import ModelMessage, ModelRequest, ModelResponse, TextPart, UserPromptPart
from pydantic_ai.models import Model

import config
from data_models import ChatMessage, ChatRole

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "Entschuldigung, keine Antwort generiert."

LEGACY_SYSTEM_PROMPT = """Du bist ein erfahrener Berater für Unternehmensnachfolge.
Antworte IMMER auf Deutsch. Sei freundlich, professionell und hilfreich."""

INTERVIEW_SYSTEM_PROMPT = """Du bist ein erfahrener Berater für Unternehmensnachfolge mit über 25 Jahren Praxiserfahrung.
Du sprichst mit der Ruhe und Klarheit eines Experten um die 50, der bereits viele Übergaben begleitet hat.
Dein Ton ist warm, vertrauenswürdig und persönlich – du stellst nicht nur Fragen, sondern ordnest kurz ein und nimmst die Sorgen und Hoffnungen deines Gegenübers wahr.

Wichtige Regeln:
1. Antworte IMMER auf Deutsch.
2. Sei freundlich, vertrauensvoll und authentisch.
3. Hebe die Komplexität und Bedeutung der Nachfolge bei Bedarf kurz hervor (Lebenswerk, Verantwortung für Mitarbeitende, Familie, Zukunftssicherung).
4. Gehe auf die Antworten des Nutzers ein, spiegle Kernpunkte und leite zur nächsten Frage über.
5. Halte Antworten prägnant (2–4 Sätze) und substanziell.
6. Nutze gelegentlich anschauliche, kurze Praxisbeispiele ohne abzuschweifen.
"""

INTERVIEW_QUESTIONS = (
    "Guten Tag! Ich begleite seit über 25 Jahren Unternehmer durch den Prozess der Nachfolge. Die Unternehmensnachfolge ist weit mehr als nur ein Eigentümerwechsel – sie berührt das Lebenswerk, die Verantwortung für Mitarbeiter und Familie und Ihre persönliche Zukunft. Lassen Sie uns gemeinsam herausfinden, welcher Weg für Sie passt. Zunächst: Wie heißen Sie?",
    "Schön, Sie kennenzulernen! Welche Art von Unternehmen führen Sie?",
    "Wie viele Mitarbeiter beschäftigt Ihr Unternehmen aktuell?",
    "In welcher Branche ist Ihr Unternehmen tätig?",
    "Seit wann besteht Ihr Unternehmen?",
    "Was ist Ihr Hauptgrund für die Überlegung zur Nachfolgeplanung?",
    "Haben Sie bereits potenzielle Nachfolger im Blick (Familie, Mitarbeiter, externe Käufer)?",
    "Welcher Zeitrahmen schwebt Ihnen für die Übergabe vor?",
    "Was sind Ihre wichtigsten Ziele für die Nachfolge (finanzielle Absicherung, Fortbestand des Unternehmens, etc.)?",
    "Vielen Dank für Ihre Antworten! Möchten Sie noch etwas hinzufügen oder haben Sie Fragen?",
)


class AdvisorError(RuntimeError):
    """Raised when the hosted model cannot produce a reply"""


class InvalidTranscriptError(ValueError):
    """Raised when a transcript cannot be sent to the model"""


@dataclass
class InterviewTurn:
    response: str
    question_index: Optional[int]
    done: bool


def build_message_history(messages: Sequence[ChatMessage]) -> Tuple[str, List[ModelMessage]]:
    """
    Split a transcript into the pending user prompt and the prior history.

    System turns are dropped; the system prompt is supplied by the agent.
    """
    turns = [message for message in messages if message.role != ChatRole.SYSTEM]
    if not turns or turns[-1].role != ChatRole.USER:
        raise InvalidTranscriptError("The last message must be a user message")

    history: List[ModelMessage] = []
    for message in turns[:-1]:
        if message.role == ChatRole.USER:
            history.append(ModelRequest(parts=[UserPromptPart(content=message.content)]))
        else:
            history.append(ModelResponse(parts=[TextPart(content=message.content)]))

    return turns[-1].content, history


class ChatAdvisor:
    """
    Chat proxy to the hosted text-generation model.

    One agent is kept per system prompt; agents are created on first use so
    that importing the API never needs credentials.
    """

    def __init__(self, model: Optional[Model] = None, model_name: str = config.ADVISOR_MODEL):
        self._model = model
        self.model_name = model_name
        self._agents: Dict[str, Agent] = {}

    def _build_model(self) -> Model:
        from pydantic_ai.models.google import GoogleModel
        from pydantic_ai.providers.google import GoogleProvider

        if not config.GEMINI_API_KEY:
            raise AdvisorError("GEMINI_API_KEY environment variable required")
        logger.info(f"Using Gemini model {self.model_name}")
        return GoogleModel(self.model_name, provider=GoogleProvider(api_key=config.GEMINI_API_KEY))

    def get_agent(self, system_prompt: str) -> Agent:
        """Get or create the agent for a system prompt (lazy initialization)"""
        if system_prompt not in self._agents:
            if self._model is None:
                self._model = self._build_model()
            self._agents[system_prompt] = Agent(self._model, instructions=system_prompt)
        return self._agents[system_prompt]

    async def reply(self, messages: Sequence[ChatMessage], system_prompt: str = LEGACY_SYSTEM_PROMPT, guidance: Optional[str] = None) -> str:
        """
        Send a transcript to the model and return its answer.

        Args:
            messages: Chat turns, the last one from the user
            system_prompt: Persona and rules for the model
            guidance: Extra instruction appended to the pending user prompt

        Returns:
            The model's reply, or a fixed apology when the reply is empty

        Raises:
            InvalidTranscriptError: If the transcript does not end with a user turn
            AdvisorError: If the model call fails
        """
        prompt, history = build_message_history(messages)
        if guidance:
            prompt = f"{prompt}\n\n[Hinweis für den Berater: {guidance}]"

        agent = self.get_agent(system_prompt)
        try:
            result = await agent.run(prompt, message_history=history)
        except Exception as e:
            logger.error(f"Chat completion failed: {e}")
            raise AdvisorError(f"Chat completion failed: {e}") from e

        text = str(result.output or "").strip()
        return text or FALLBACK_REPLY

    async def interview(self, messages: Sequence[ChatMessage]) -> InterviewTurn:
        """
        Advance the open interview by one turn.

        The number of user turns so far selects the next catalogue question;
        the model acknowledges the last answer and asks it.
        """
        answered = sum(1 for message in messages if message.role == ChatRole.USER)

        if answered == 0:
            return InterviewTurn(response=INTERVIEW_QUESTIONS[0], question_index=0, done=False)

        if answered >= len(INTERVIEW_QUESTIONS):
            guidance = "Alle Fragen sind beantwortet. Bedanke dich und fasse die wichtigsten Punkte in zwei Sätzen zusammen."
            response = await self.reply(messages, INTERVIEW_SYSTEM_PROMPT, guidance)
            return InterviewTurn(response=response, question_index=None, done=True)

        question = INTERVIEW_QUESTIONS[answered]
        guidance = f"Gehe kurz auf die letzte Antwort ein und stelle dann genau diese nächste Frage: {question}"
        response = await self.reply(messages, INTERVIEW_SYSTEM_PROMPT, guidance)
        return InterviewTurn(response=response, question_index=answered, done=False)


_chat_advisor: Optional[ChatAdvisor] = None


def get_chat_advisor() -> ChatAdvisor:
    """Shared advisor instance; also the FastAPI dependency for the chat routes"""
    global _chat_advisor
    if _chat_advisor is None:
        _chat_advisor = ChatAdvisor()
    return _chat_advisor
