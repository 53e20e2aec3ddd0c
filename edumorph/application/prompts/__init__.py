"""
Application-layer prompts and LLM response models.

Each feature module holds its fixed instruction template, the builder that
interpolates caller parameters into it, and the pydantic model its JSON answer
is validated against. ``PromptBuilder`` selects a builder by template id.
"""

from enum import Enum
from typing import Any, Callable, Dict, Mapping

from .application_vision import ApplicationVision, build_application_vision_prompt
from .concept_explainer import build_concept_prompt
from .doubt_resolver import build_doubt_prompt
from .quiz import QuizQuestion, build_quiz_prompt
from .roadmap import LearningRoadmap, Milestone, build_roadmap_prompt


class PromptTemplateId(str, Enum):
    APPLICATION_VISION = "application_vision"
    ROADMAP = "roadmap"
    DOUBT_RESOLVER = "doubt_resolver"
    CONCEPT_EXPLAINER = "concept_explainer"
    QUIZ = "quiz"


class PromptBuilder:
    """Maps a template id plus its parameters to a complete prompt string."""

    _builders: Dict[PromptTemplateId, Callable[..., str]] = {
        PromptTemplateId.APPLICATION_VISION: build_application_vision_prompt,
        PromptTemplateId.ROADMAP: build_roadmap_prompt,
        PromptTemplateId.DOUBT_RESOLVER: build_doubt_prompt,
        PromptTemplateId.CONCEPT_EXPLAINER: build_concept_prompt,
        PromptTemplateId.QUIZ: build_quiz_prompt,
    }

    @classmethod
    def build(cls, template_id: Any, params: Mapping[str, Any]) -> str:
        """
        Build the prompt for ``template_id``.

        Args:
            template_id: A ``PromptTemplateId`` or its string value
            params: Keyword arguments of the selected builder

        Raises:
            ValueError: If the template id is unknown
        """
        builder = cls._builders[PromptTemplateId(template_id)]
        return builder(**params)


__all__ = [
    "ApplicationVision",
    "LearningRoadmap",
    "Milestone",
    "QuizQuestion",
    "PromptBuilder",
    "PromptTemplateId",
    "build_application_vision_prompt",
    "build_concept_prompt",
    "build_doubt_prompt",
    "build_quiz_prompt",
    "build_roadmap_prompt",
]
