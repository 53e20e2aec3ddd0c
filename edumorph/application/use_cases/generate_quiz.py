"""
Use Case: Generate Quiz
"""

from typing import List

from edumorph.application.normalizer import extract_json_array, validate_payload_list
from edumorph.application.prompts import PromptBuilder, PromptTemplateId, QuizQuestion
from edumorph.application.use_cases.base import FeatureUseCase


class GenerateQuizUseCase(FeatureUseCase):
    feature = "quiz questions"
    log_name = "quiz"

    async def execute(
        self, topic: str, difficulty: str = "medium", question_count: int = 5
    ) -> List[QuizQuestion]:
        """
        Generate multiple-choice questions about ``topic``.

        Every returned question has ``correct_answer`` inside ``options``. The
        model may return a different number of questions than requested.
        """
        self._log.info(
            "usecase.start", difficulty=difficulty, question_count=question_count
        )
        prompt = PromptBuilder.build(
            PromptTemplateId.QUIZ,
            {"topic": topic, "difficulty": difficulty, "question_count": question_count},
        )

        try:
            text = await self.llm_client.invoke_text(prompt)
            questions = validate_payload_list(QuizQuestion, extract_json_array(text))
        except Exception as e:
            raise self._failed(e) from e

        if len(questions) != question_count:
            self._log.warning(
                "usecase.question_count_mismatch",
                requested=question_count,
                received=len(questions),
            )
        self._log.info("usecase.success", questions=len(questions))
        return questions
