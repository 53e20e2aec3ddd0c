"""
Use Case: Application Vision

Shows where a concept is used in the real world, tuned to an optional persona.
"""

from edumorph.application.normalizer import extract_json_object, validate_payload
from edumorph.application.prompts import (
    ApplicationVision,
    PromptBuilder,
    PromptTemplateId,
)
from edumorph.application.use_cases.base import FeatureUseCase


class ApplicationVisionUseCase(FeatureUseCase):
    feature = "application vision"
    log_name = "application_vision"

    async def execute(self, concept: str, persona: str = "default") -> ApplicationVision:
        """
        Generate the application vision for a concept.

        Args:
            concept: Concept to map onto real-world applications
            persona: One of default/engineer/designer/researcher/entrepreneur

        Returns:
            Validated ApplicationVision

        Raises:
            GenerationFailed: On any backend, extraction, parse or schema failure
        """
        self._log.info("usecase.start", persona=persona, concept_len=len(concept))
        prompt = PromptBuilder.build(
            PromptTemplateId.APPLICATION_VISION,
            {"concept": concept, "persona": persona},
        )

        try:
            text = await self.llm_client.invoke_text(prompt)
            vision = validate_payload(ApplicationVision, extract_json_object(text))
        except Exception as e:
            raise self._failed(e) from e

        self._log.info("usecase.success", use_cases=len(vision.use_cases))
        return vision
