"""
Use Case: Create Learning Roadmap
"""

from edumorph.application.normalizer import extract_json_object, validate_payload
from edumorph.application.prompts import LearningRoadmap, PromptBuilder, PromptTemplateId
from edumorph.application.use_cases.base import FeatureUseCase


class CreateRoadmapUseCase(FeatureUseCase):
    feature = "learning roadmap"
    log_name = "roadmap"

    async def execute(
        self,
        learning_goal: str,
        level: str = "beginner",
        time_commitment: str = "part-time",
    ) -> LearningRoadmap:
        """Generate a milestone roadmap for a learning goal."""
        self._log.info("usecase.start", level=level, time_commitment=time_commitment)
        prompt = PromptBuilder.build(
            PromptTemplateId.ROADMAP,
            {
                "learning_goal": learning_goal,
                "level": level,
                "time_commitment": time_commitment,
            },
        )

        try:
            text = await self.llm_client.invoke_text(prompt)
            roadmap = validate_payload(LearningRoadmap, extract_json_object(text))
        except Exception as e:
            raise self._failed(e) from e

        self._log.info(
            "usecase.success",
            milestones=len(roadmap.milestones),
            total_days=roadmap.total_days,
        )
        return roadmap
