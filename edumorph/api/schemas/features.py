"""
Request and response schemas for the learning features.

Requests reject blank primary fields and out-of-set options before anything
reaches the generation pipeline.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Dict, List, Optional

from pydantic import AfterValidator, BaseModel, Field

from edumorph.application.prompts import QuizQuestion
from edumorph.domain.entities import (
    ChatMessage,
    MilestoneProgress,
    QuizResult,
    Rating,
    RoadmapProgress,
)
from edumorph.domain.value_objects import (
    ExplanationDepth,
    Persona,
    QuizDifficulty,
    SkillLevel,
    TimeCommitment,
    ToneMode,
)


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value.strip()


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


# ---------- APPLICATION VISION ----------
class ApplicationVisionRequest(BaseModel):
    concept: NonBlankStr = Field(..., max_length=200)
    persona: Persona = Persona.DEFAULT


# ---------- ROADMAP ----------
class CreateRoadmapRequest(BaseModel):
    learning_goal: NonBlankStr = Field(..., max_length=500)
    level: SkillLevel = SkillLevel.BEGINNER
    time_commitment: TimeCommitment = TimeCommitment.PART_TIME


class MilestoneResponse(BaseModel):
    id: str
    title: str
    description: str
    estimated_days: int
    topics: List[str]
    difficulty: str
    icon: str
    completed: bool

    @classmethod
    def from_entity(cls, milestone: MilestoneProgress) -> "MilestoneResponse":
        return cls(
            id=milestone.id,
            title=milestone.title,
            description=milestone.description,
            estimated_days=milestone.estimated_days,
            topics=milestone.topics,
            difficulty=milestone.difficulty,
            icon=milestone.icon,
            completed=milestone.completed,
        )


class RoadmapResponse(BaseModel):
    title: str
    description: str
    category: str
    total_days: int
    total_milestones: int
    completed_milestones: int
    progress_percentage: float
    milestones: List[MilestoneResponse]

    @classmethod
    def from_entity(cls, roadmap: RoadmapProgress) -> "RoadmapResponse":
        return cls(
            title=roadmap.title,
            description=roadmap.description,
            category=roadmap.category,
            total_days=roadmap.total_days,
            total_milestones=roadmap.total_milestones,
            completed_milestones=roadmap.completed_count,
            progress_percentage=roadmap.progress_percentage,
            milestones=[MilestoneResponse.from_entity(m) for m in roadmap.milestones],
        )


# ---------- DOUBT RESOLVER ----------
class AskDoubtRequest(BaseModel):
    question: NonBlankStr = Field(..., max_length=4000)
    subject: str = Field("General", max_length=100)


class ChatMessageResponse(BaseModel):
    id: str
    content: str
    is_user: bool
    subject: str
    rating: Optional[Rating] = None
    timestamp: datetime

    @classmethod
    def from_entity(cls, message: ChatMessage) -> "ChatMessageResponse":
        return cls(
            id=message.id,
            content=message.content,
            is_user=message.is_user,
            subject=message.subject,
            rating=message.rating,
            timestamp=message.timestamp,
        )


class AskDoubtResponse(BaseModel):
    question: ChatMessageResponse
    answer: ChatMessageResponse


class RateMessageRequest(BaseModel):
    rating: Optional[Rating] = Field(..., description="\"up\", \"down\", or null to clear")


# ---------- CONCEPT EXPLAINER ----------
class ExplainConceptRequest(BaseModel):
    topic: NonBlankStr = Field(..., max_length=300)
    mode: ToneMode = ToneMode.DEFAULT


class StreamConceptRequest(ExplainConceptRequest):
    depth: ExplanationDepth = ExplanationDepth.DEEPDIVE


class ConceptSessionResponse(BaseModel):
    topic: str
    mode: str
    responses: Dict[str, str]
    timestamp: datetime


class ExplainAnswerRequest(BaseModel):
    concept: NonBlankStr = Field(..., max_length=300)
    question: str = Field(..., max_length=4000)
    mode: ToneMode = ToneMode.DEFAULT


class ExplanationResponse(BaseModel):
    explanation: str


# ---------- QUIZ ----------
class GenerateQuizRequest(BaseModel):
    topic: NonBlankStr = Field(..., max_length=200)
    difficulty: QuizDifficulty = QuizDifficulty.MEDIUM
    question_count: int = Field(5, ge=1, le=20)


class QuizResponse(BaseModel):
    topic: str
    difficulty: str
    questions: List[QuizQuestion]


class SubmitQuizRequest(BaseModel):
    topic: str
    difficulty: QuizDifficulty
    questions: List[QuizQuestion] = Field(..., min_length=1)
    answers: List[Optional[int]]
    time_taken: int = Field(0, ge=0, description="Seconds spent on the quiz")


class QuizResultResponse(BaseModel):
    score: int
    total_questions: int
    percentage: int
    passed: bool
    answers: List[Optional[int]]
    time_taken: int
    topic: str
    difficulty: str
    taken_at: datetime

    @classmethod
    def from_entity(cls, result: QuizResult) -> "QuizResultResponse":
        return cls(
            score=result.score,
            total_questions=result.total_questions,
            percentage=result.percentage,
            passed=result.passed,
            answers=result.answers,
            time_taken=result.time_taken,
            topic=result.topic,
            difficulty=result.difficulty,
            taken_at=result.taken_at,
        )
