"""
Domain value objects - immutable objects that represent concepts.
"""

from .learning_options import (
    ExplanationDepth,
    Persona,
    QuizDifficulty,
    SkillLevel,
    TimeCommitment,
    ToneMode,
)

__all__ = [
    "ExplanationDepth",
    "Persona",
    "QuizDifficulty",
    "SkillLevel",
    "TimeCommitment",
    "ToneMode",
]
