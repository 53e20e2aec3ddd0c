"""
Use Case: Resolve Doubt

Answers a student question as free markdown text.
"""

from edumorph.application.prompts import PromptBuilder, PromptTemplateId
from edumorph.application.use_cases.base import FeatureUseCase


class ResolveDoubtUseCase(FeatureUseCase):
    feature = "doubt resolution"
    log_name = "doubt_resolver"

    async def execute(
        self, question: str, context: str = "", subject: str = "General"
    ) -> str:
        """
        Answer ``question``.

        Blank questions are not rejected here; callers filter them out first.
        """
        self._log.info("usecase.start", subject=subject, has_context=bool(context))
        prompt = PromptBuilder.build(
            PromptTemplateId.DOUBT_RESOLVER,
            {"question": question, "context": context, "subject": subject},
        )

        try:
            answer = await self.llm_client.invoke_text(prompt)
        except Exception as e:
            raise self._failed(e) from e

        self._log.info("usecase.success", chars=len(answer))
        return answer
