"""
Quiz attempt scoring.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Sequence


@dataclass
class QuizResult:
    score: int
    total_questions: int
    percentage: int
    answers: List[Optional[int]]
    time_taken: int
    topic: str
    difficulty: str
    taken_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def passed(self) -> bool:
        return self.percentage >= 60


def score_quiz(
    questions: Sequence,
    answers: Sequence[Optional[int]],
    topic: str,
    difficulty: str,
    time_taken: int = 0,
) -> QuizResult:
    """
    Score a finished quiz attempt.

    Args:
        questions: Generated questions; each must expose ``correct_answer``
        answers: Selected option index per question, ``None`` when unanswered
        topic: Quiz topic, stored with the result
        difficulty: Requested difficulty, stored with the result
        time_taken: Seconds spent on the attempt

    Returns:
        QuizResult with the score and rounded percentage
    """
    total = len(questions)
    padded = list(answers[:total]) + [None] * max(0, total - len(answers))

    score = sum(
        1
        for question, answer in zip(questions, padded)
        if answer is not None and answer == question.correct_answer
    )
    percentage = round(score / total * 100) if total else 0

    return QuizResult(
        score=score,
        total_questions=total,
        percentage=percentage,
        answers=padded,
        time_taken=time_taken,
        topic=topic,
        difficulty=difficulty,
    )
