"""Feature use cases."""

from .application_vision import ApplicationVisionUseCase
from .create_roadmap import CreateRoadmapUseCase
from .explain_concept import ALL_DEPTHS, ExplainConceptUseCase
from .generate_quiz import GenerateQuizUseCase
from .resolve_doubt import ResolveDoubtUseCase

__all__ = [
    "ALL_DEPTHS",
    "ApplicationVisionUseCase",
    "CreateRoadmapUseCase",
    "ExplainConceptUseCase",
    "GenerateQuizUseCase",
    "ResolveDoubtUseCase",
]
