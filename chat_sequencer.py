"""
Question-by-question wizard that fills a SuccessionInput from chat answers.

The catalogue is asked in a fixed order. The successor-type question is only
asked when a successor has been identified. Free-text answers are mapped onto
the questionnaire's enumerated values with ordered substring rules: the first
matching rule wins and the last value is the fallback.
"""

import re
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from data_models import ChatMessage, ChatRole, SuccessionInput, SuccessorStatus

logger = logging.getLogger(__name__)

CHOICE = "choice"
NUMBER = "number"

COMPLETION_MESSAGE = "Vielen Dank! Ich erstelle jetzt Ihre individuelle Analyse..."


@dataclass(frozen=True)
class Question:
    field: str
    prompt: str
    kind: str = CHOICE
    options: Tuple[str, ...] = ()
    condition: Optional[Callable[[Dict[str, Any]], bool]] = None

    def applies(self, answers: Dict[str, Any]) -> bool:
        return self.condition is None or self.condition(answers)


def _successor_identified(answers: Dict[str, Any]) -> bool:
    return answers.get("successor_identified") == SuccessorStatus.YES


QUESTIONS: Tuple[Question, ...] = (
    Question(
        "company_size",
        "Herzlich willkommen! Ich bin Ihr digitaler Berater für Unternehmensnachfolge. 'Emotional, aber planbar - Ihr Weg zur erfolgreichen Übergabe.' Lassen Sie uns gemeinsam Ihre individuelle Situation analysieren. Wie groß ist Ihr Unternehmen?",
        options=("Klein (< 10 Mitarbeiter)", "Mittel (10-250 Mitarbeiter)", "Groß (> 250 Mitarbeiter)")
    ),
    Question(
        "industry",
        "Danke! In welcher Branche ist Ihr Unternehmen tätig?",
        options=("Handwerk", "Produktion", "Handel", "Dienstleistung", "IT", "Andere")
    ),
    Question(
        "annual_revenue",
        "Verstehe. Was ist der ungefähre Jahresumsatz Ihres Unternehmens?",
        options=("Unter 500.000 €", "500.000 - 2 Mio. €", "2 - 10 Mio. €", "Über 10 Mio. €")
    ),
    Question(
        "employee_count",
        "Wie viele Mitarbeiter beschäftigt Ihr Unternehmen aktuell? (Bitte Zahl eingeben)",
        kind=NUMBER
    ),
    Question(
        "is_family_business",
        "Ist Ihr Unternehmen ein Familienunternehmen?",
        options=("Ja", "Nein")
    ),
    Question(
        "successor_identified",
        "Haben Sie bereits einen Nachfolger im Blick?",
        options=("Ja", "Nein", "Unklar")
    ),
    Question(
        "successor_type",
        "Um welche Art von Nachfolger handelt es sich?",
        options=("Familie", "Mitarbeiter", "Extern"),
        condition=_successor_identified
    ),
    Question(
        "timeframe",
        "In welchem Zeitrahmen planen Sie die Übergabe?",
        options=("Unter 2 Jahre", "2-5 Jahre", "Über 5 Jahre")
    ),
    Question(
        "owner_age",
        "Wie alt sind Sie aktuell? (Bitte Zahl eingeben)",
        kind=NUMBER
    ),
    Question(
        "emotional_attachment",
        "Wie stark ist Ihre emotionale Bindung an das Unternehmen?",
        options=("Sehr hoch", "Hoch", "Mittel", "Niedrig")
    ),
    Question(
        "financial_expectations",
        "Wie hoch sind Ihre finanziellen Erwartungen an die Nachfolge?",
        options=("Sehr hoch", "Hoch", "Mittel", "Niedrig")
    ),
)


# field -> (ordered rules, fallback); a rule matches when all of its terms occur
_LEVEL_RULES = ([(("sehr hoch",), "very_high"), (("sehr",), "very_high"), (("hoch",), "high"), (("niedrig",), "low")], "medium")

CHOICE_RULES: Dict[str, Tuple[List[Tuple[Tuple[str, ...], str]], str]] = {
    "company_size": ([(("klein",), "small"), (("< 10",), "small"), (("groß",), "large"), (("> 250",), "large")], "medium"),
    "industry": ([
        (("handwerk",), "trade"),
        (("produktion",), "manufacturing"),
        (("handel",), "retail"),
        (("dienstleistung",), "services"),
        (("it",), "it"),
    ], "other"),
    "annual_revenue": ([(("unter 500",), "under_500k"), (("500", "2"), "500k_2m"), (("2", "10"), "2m_10m")], "over_10m"),
    "is_family_business": ([(("ja",), "yes")], "no"),
    "successor_identified": ([(("ja",), "yes"), (("nein",), "no")], "unclear"),
    "successor_type": ([(("familie",), "family"), (("mitarbeiter",), "employee")], "external"),
    "timeframe": ([(("unter 2",), "under_2y"), (("< 2",), "under_2y"), (("2", "5"), "2to5y")], "over_5y"),
    "emotional_attachment": _LEVEL_RULES,
    "financial_expectations": _LEVEL_RULES,
}

_LEADING_INTEGER = re.compile(r'\s*(\d+)')


def parse_answer(question: Question, answer: str) -> Any:
    """
    Map a free-text answer onto the value stored for the question's field.

    Number questions take the leading integer (None when there is none).
    Choice questions use the field's substring rules; fields without rules
    keep the raw answer.
    """
    answer = answer.strip()

    if question.kind == NUMBER:
        match = _LEADING_INTEGER.match(answer)
        return int(match.group(1)) if match else None

    if question.field not in CHOICE_RULES:
        return answer

    lower = answer.lower()
    rules, fallback = CHOICE_RULES[question.field]
    for terms, value in rules:
        if all(term in lower for term in terms):
            return value
    return fallback


class ConversationCompleteError(RuntimeError):
    """Raised when an answer arrives after the last question"""


class ChatSequencer:
    """
    Finite-state walk through the question catalogue.

    State is the index of the next question plus the answers collected so far.
    Questions whose condition fails are skipped before they are asked.
    """

    def __init__(self, questions: Tuple[Question, ...] = QUESTIONS):
        self.questions = questions
        self.answers: Dict[str, Any] = {}
        self._index = 0

    def _advance_to_applicable(self):
        while self._index < len(self.questions) and not self.questions[self._index].applies(self.answers):
            logger.debug(f"Skipping question '{self.questions[self._index].field}'")
            self._index += 1

    def current_question(self) -> Optional[Question]:
        self._advance_to_applicable()
        if self._index >= len(self.questions):
            return None
        return self.questions[self._index]

    @property
    def is_complete(self) -> bool:
        return self.current_question() is None

    def unanswered_fields(self) -> List[str]:
        """Fields of the questions still to ask, judged by the answers so far"""
        self._advance_to_applicable()
        return [question.field for question in self.questions[self._index:] if question.applies(self.answers)]

    def answer(self, text: str) -> Any:
        """Record the answer to the current question and move on"""
        question = self.current_question()
        if question is None:
            raise ConversationCompleteError("All questions have already been answered")

        value = parse_answer(question, text)
        self.answers[question.field] = value
        self._index += 1
        return value

    def to_input(self) -> SuccessionInput:
        return SuccessionInput(**self.answers)

    @classmethod
    def replay(cls, messages: Iterable[ChatMessage], questions: Tuple[Question, ...] = QUESTIONS) -> "ChatSequencer":
        """
        Rebuild the wizard state from a chat transcript.

        Every user turn answers the question that is current at that point;
        assistant and system turns are ignored, as are user turns after the
        last question.
        """
        sequencer = cls(questions)
        for message in messages:
            if message.role != ChatRole.USER:
                continue
            if sequencer.is_complete:
                logger.debug("Ignoring user turn after the last question")
                continue
            sequencer.answer(message.content)
        return sequencer
