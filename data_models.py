"""
Shared data models for the Succession Advisor
"""

from typing import List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class CompanySize(str, Enum):
    SMALL = "small"       # < 10 employees
    MEDIUM = "medium"     # 10-250 employees
    LARGE = "large"       # > 250 employees

class Industry(str, Enum):
    TRADE = "trade"
    MANUFACTURING = "manufacturing"
    RETAIL = "retail"
    SERVICES = "services"
    IT = "it"
    OTHER = "other"

class RevenueBand(str, Enum):
    UNDER_500K = "under_500k"
    FROM_500K_TO_2M = "500k_2m"
    FROM_2M_TO_10M = "2m_10m"
    OVER_10M = "over_10m"

class YesNo(str, Enum):
    YES = "yes"
    NO = "no"

class SuccessorStatus(str, Enum):
    YES = "yes"
    NO = "no"
    UNCLEAR = "unclear"

class SuccessorType(str, Enum):
    FAMILY = "family"
    EMPLOYEE = "employee"
    EXTERNAL = "external"

class Timeframe(str, Enum):
    UNDER_2_YEARS = "under_2y"
    TWO_TO_FIVE_YEARS = "2to5y"
    OVER_5_YEARS = "over_5y"

class Level(str, Enum):
    VERY_HIGH = "very_high"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class Scenario(str, Enum):
    FAMILY_SUCCESSION = "family_succession"
    MANAGEMENT_BUYOUT = "management_buyout"
    EXTERNAL_LEADERSHIP = "external_leadership"
    SALE = "sale"

class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class SuccessionInput(BaseModel):
    """Questionnaire answers describing one owner's situation.

    Enumerated answers are kept as plain strings: unrecognised values are
    tolerated here and fall through to the engine's default branches.
    Only ``successor_identified`` and ``timeframe`` are required, and that
    is checked by the engine rather than the schema.
    """
    model_config = ConfigDict(frozen=True)

    # Company
    company_size: Optional[str] = Field(default=None, description="small, medium, large")
    industry: Optional[str] = Field(default=None, description="trade, manufacturing, retail, services, it, other")
    annual_revenue: Optional[str] = Field(default=None, description="under_500k, 500k_2m, 2m_10m, over_10m")
    employee_count: Optional[int] = Field(default=None, ge=0, description="Current head count")
    is_family_business: Optional[str] = Field(default=None, description="yes, no")

    # Succession planning
    successor_identified: Optional[str] = Field(default=None, description="yes, no, unclear")
    successor_type: Optional[str] = Field(default=None, description="family, employee, external (only read when a successor is identified)")
    timeframe: Optional[str] = Field(default=None, description="under_2y, 2to5y, over_5y")
    owner_age: Optional[int] = Field(default=None, ge=0, description="Age of the current owner")
    emotional_attachment: Optional[str] = Field(default=None, description="very_high, high, medium, low")
    financial_expectations: Optional[str] = Field(default=None, description="very_high, high, medium, low")


class Perspectives(BaseModel):
    """Advice grouped by advisory dimension"""
    model_config = ConfigDict(frozen=True)

    emotional: List[str] = Field(default_factory=list)
    legal: List[str] = Field(default_factory=list)
    tax: List[str] = Field(default_factory=list)
    organizational: List[str] = Field(default_factory=list)


class Timeline(BaseModel):
    """Milestones for the three planning horizons"""
    model_config = ConfigDict(frozen=True)

    phase_0_2_years: List[str] = Field(default_factory=list)
    phase_2_5_years: List[str] = Field(default_factory=list)
    phase_5_plus_years: List[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Complete advisory output for one questionnaire"""
    model_config = ConfigDict(frozen=True)

    scenario: Scenario = Field(description="Derived succession scenario")
    priority: Priority = Field(description="Urgency derived from the timeframe")
    perspectives: Perspectives
    next_steps: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    timeline: Timeline
    success_factors: List[str] = Field(default_factory=list)
    statistics: List[str] = Field(default_factory=list)
    quotes: List[str] = Field(default_factory=list)


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """One turn of a chat transcript"""
    role: ChatRole
    content: str
