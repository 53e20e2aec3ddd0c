"""
Quiz-generation prompt and structured output model.
"""

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from edumorph.domain.value_objects import QuizDifficulty
from edumorph.infra.config.logging_config import get_logger

_log = get_logger("prompts.quiz")


# ---------- STRUCTURED OUTPUT MODELS ----------
class QuizQuestion(BaseModel):
    """A single multiple-choice question.

    Four options are requested but not required; only the answer index is checked.
    """

    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: List[str] = Field(..., min_length=1)
    correct_answer: int = Field(..., alias="correctAnswer")
    explanation: str
    difficulty: Literal["easy", "medium", "hard"]

    @field_validator("difficulty", mode="before")
    @classmethod
    def _lowercase_difficulty(cls, value):
        return value.strip().lower() if isinstance(value, str) else value

    @model_validator(mode="after")
    def _answer_in_options(self) -> "QuizQuestion":
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(
                f"correctAnswer {self.correct_answer} is not an index into "
                f"{len(self.options)} options"
            )
        return self


# ---------- PROMPT TEMPLATES ----------
QUIZ_PROMPT = """
Generate {question_count} quiz questions about {topic} with {difficulty} difficulty.
For each question, provide:
- A clear, concise question
- 4 possible answers (only one correct)
- The index of the correct answer (0-3)
- A brief explanation of why the answer is correct
- The difficulty level (easy, medium, hard)

Format the response as a JSON array with the following structure:
[
  {{
    "question": "Question text",
    "options": ["Option 1", "Option 2", "Option 3", "Option 4"],
    "correctAnswer": 0,
    "explanation": "Explanation text",
    "difficulty": "easy"
  }}
]

Difficulty guidelines:
- Easy: Basic concepts, straightforward questions
- Medium: Some complexity, may require deeper understanding
- Hard: Challenging questions that test advanced knowledge

Return ONLY the JSON array with no additional text or markdown formatting.
"""

_DIFFICULTIES = {d.value for d in QuizDifficulty}


def build_quiz_prompt(topic: str, difficulty: str = "medium", question_count: int = 5) -> str:
    if difficulty not in _DIFFICULTIES:
        _log.warning("prompt.unknown_option", option="difficulty", value=difficulty)

    return QUIZ_PROMPT.format(
        question_count=question_count, topic=topic, difficulty=difficulty
    )
