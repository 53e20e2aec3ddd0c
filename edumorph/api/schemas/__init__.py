"""API request/response schemas."""

from .base import ErrorResponse
from .features import (
    ApplicationVisionRequest,
    AskDoubtRequest,
    AskDoubtResponse,
    ChatMessageResponse,
    ConceptSessionResponse,
    CreateRoadmapRequest,
    ExplainAnswerRequest,
    ExplainConceptRequest,
    ExplanationResponse,
    GenerateQuizRequest,
    MilestoneResponse,
    QuizResponse,
    QuizResultResponse,
    RateMessageRequest,
    RoadmapResponse,
    StreamConceptRequest,
    SubmitQuizRequest,
)

__all__ = [
    "ErrorResponse",
    "ApplicationVisionRequest",
    "AskDoubtRequest",
    "AskDoubtResponse",
    "ChatMessageResponse",
    "ConceptSessionResponse",
    "CreateRoadmapRequest",
    "ExplainAnswerRequest",
    "ExplainConceptRequest",
    "ExplanationResponse",
    "GenerateQuizRequest",
    "MilestoneResponse",
    "QuizResponse",
    "QuizResultResponse",
    "RateMessageRequest",
    "RoadmapResponse",
    "StreamConceptRequest",
    "SubmitQuizRequest",
]
