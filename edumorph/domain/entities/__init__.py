"""Domain entities exports."""

from .chat import ChatMessage, Rating, build_conversation_context
from .concept import ConceptSession
from .quiz import QuizResult, score_quiz
from .roadmap import MilestoneProgress, RoadmapProgress

__all__ = [
    "ChatMessage",
    "Rating",
    "build_conversation_context",
    "ConceptSession",
    "QuizResult",
    "score_quiz",
    "MilestoneProgress",
    "RoadmapProgress",
]
