from pydantic import BaseModel, Field
from typing import Optional, List

from data_models import AnalysisResult, ChatMessage


class ErrorResponse(BaseModel):
    """Standard error response model"""
    success: bool = False
    error: str = Field(description="Error message")
    missing_fields: List[str] = Field(default_factory=list, description="Required answers that were not given")
    details: Optional[str] = Field(default=None, description="Diagnostic detail")

class HealthResponse(BaseModel):
    """Health check response model"""
    status: str = Field(description="Service health status")
    service: str = Field(description="Service name")
    version: Optional[str] = Field(default="1.0.0", description="API version")
    llm_configured: bool = Field(default=False, description="Whether a model API key is configured")

class ReportResponse(BaseModel):
    """Analysis together with its plain-text rendering"""
    success: bool = True
    analysis: AnalysisResult
    report: str = Field(description="Human-readable analysis report")

class Fact(BaseModel):
    label: str
    value: str = Field(description="Percentage as displayed, e.g. '59%'")
    description: str

class StatisticsResponse(BaseModel):
    """Static facts about business succession"""
    title: str
    description: str
    facts: List[Fact]
    sources: List[str]

class ConversationRequest(BaseModel):
    """Transcript of the question wizard"""
    conversation: List[ChatMessage] = Field(default_factory=list)

class NextQuestionResponse(BaseModel):
    """Next wizard question, or completion notice"""
    done: bool = Field(description="True once every applicable question is answered")
    question: Optional[str] = None
    field: Optional[str] = Field(default=None, description="Questionnaire field the question fills")
    kind: Optional[str] = Field(default=None, description="choice or number")
    options: Optional[List[str]] = None
    message: Optional[str] = None

class FinalizeResponse(BaseModel):
    success: bool = True
    analysis: AnalysisResult

class ChatRequest(BaseModel):
    """Free-text chat transcript"""
    messages: List[ChatMessage] = Field(default_factory=list)

class ChatResponse(BaseModel):
    response: str

class InterviewResponse(BaseModel):
    response: str
    question_index: Optional[int] = Field(default=None, description="Index of the question asked in this turn")
    done: bool = False
