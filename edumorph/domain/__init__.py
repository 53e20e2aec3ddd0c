"""
Domain layer - learning entities, value objects and the error taxonomy.

Nothing here talks to the model backend or to storage.
"""

from .entities import (
    ChatMessage,
    ConceptSession,
    MilestoneProgress,
    QuizResult,
    RoadmapProgress,
    build_conversation_context,
    score_quiz,
)
from .value_objects import (
    ExplanationDepth,
    Persona,
    QuizDifficulty,
    SkillLevel,
    TimeCommitment,
    ToneMode,
)

__all__ = [
    "ChatMessage",
    "ConceptSession",
    "MilestoneProgress",
    "QuizResult",
    "RoadmapProgress",
    "build_conversation_context",
    "score_quiz",
    "ExplanationDepth",
    "Persona",
    "QuizDifficulty",
    "SkillLevel",
    "TimeCommitment",
    "ToneMode",
]
