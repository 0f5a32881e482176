import logging

from fastapi import APIRouter, Depends, HTTPException

from chat_sequencer import COMPLETION_MESSAGE, ChatSequencer
from succession_engine import IncompleteInputError, assemble
from api.agents.advisor_agent import ChatAdvisor, LEGACY_SYSTEM_PROMPT, get_chat_advisor
from api.models.responses import (
    ChatRequest, ChatResponse, ConversationRequest, ErrorResponse, FinalizeResponse,
    InterviewResponse, NextQuestionResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Chat"])


@router.post("/chatbot/next", response_model=NextQuestionResponse)
async def chatbot_next(request: ConversationRequest):
    """
    Return the next wizard question for a transcript

    Each user turn in the transcript answers one question in catalogue order.
    """
    sequencer = ChatSequencer.replay(request.conversation)
    question = sequencer.current_question()

    if question is None:
        return NextQuestionResponse(done=True, message=COMPLETION_MESSAGE)

    return NextQuestionResponse(
        done=False,
        question=question.prompt,
        field=question.field,
        kind=question.kind,
        options=list(question.options) or None
    )


@router.post("/chatbot/finalize", response_model=FinalizeResponse, responses={400: {"model": ErrorResponse}})
async def chatbot_finalize(request: ConversationRequest):
    """
    Build the analysis from a completed wizard transcript

    A transcript that stops before the last applicable question is rejected
    with 400 and the unanswered fields.
    """
    sequencer = ChatSequencer.replay(request.conversation)
    if not sequencer.is_complete:
        raise IncompleteInputError(sequencer.unanswered_fields())
    result = assemble(sequencer.to_input())
    return FinalizeResponse(analysis=result)


@router.post("/chat", response_model=ChatResponse, responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}})
async def chat(request: ChatRequest, advisor: ChatAdvisor = Depends(get_chat_advisor)):
    """Free-text chat with the succession advisor persona"""
    if not request.messages:
        raise HTTPException(status_code=400, detail="Invalid request: messages required")

    response = await advisor.reply(request.messages, LEGACY_SYSTEM_PROMPT)
    return ChatResponse(response=response)


@router.post("/interview", response_model=InterviewResponse, responses={502: {"model": ErrorResponse}})
async def interview(request: ChatRequest, advisor: ChatAdvisor = Depends(get_chat_advisor)):
    """Open interview: the model comments on each answer and asks the next question"""
    turn = await advisor.interview(request.messages)
    return InterviewResponse(response=turn.response, question_index=turn.question_index, done=turn.done)
