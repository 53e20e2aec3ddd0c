"""
Quiz endpoints: generate questions, score an attempt, list past results.
"""

from typing import List

from fastapi import APIRouter, Depends

from edumorph.api.schemas import (
    GenerateQuizRequest,
    QuizResponse,
    QuizResultResponse,
    SubmitQuizRequest,
)
from edumorph.application.ports import HistoryRepositoryPort
from edumorph.application.use_cases import GenerateQuizUseCase
from edumorph.domain.entities import score_quiz
from edumorph.infra.config.dependencies import (
    get_current_user_id,
    get_history_repository,
    get_quiz_use_case,
)
from edumorph.infra.config.logging_config import get_logger

router = APIRouter(prefix="/quizzes", tags=["quizzes"])
log = get_logger("api.quizzes")


@router.post("", response_model=QuizResponse)
async def generate_quiz(
    request: GenerateQuizRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: GenerateQuizUseCase = Depends(get_quiz_use_case),
) -> QuizResponse:
    questions = await use_case.execute(
        request.topic, request.difficulty.value, request.question_count
    )
    return QuizResponse(
        topic=request.topic,
        difficulty=request.difficulty.value,
        questions=questions,
    )


@router.post("/results", response_model=QuizResultResponse)
async def submit_quiz_result(
    request: SubmitQuizRequest,
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> QuizResultResponse:
    """Score a finished attempt and append it to the learner's quiz history."""
    result = score_quiz(
        request.questions,
        request.answers,
        topic=request.topic,
        difficulty=request.difficulty.value,
        time_taken=request.time_taken,
    )
    await history.add_quiz_result(current_user_id, result)

    log.info(
        "quiz.result.saved",
        topic=result.topic,
        score=result.score,
        total=result.total_questions,
    )
    return QuizResultResponse.from_entity(result)


@router.get("/history", response_model=List[QuizResultResponse])
async def get_quiz_history(
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> List[QuizResultResponse]:
    results = await history.get_quiz_results(current_user_id)
    return [QuizResultResponse.from_entity(r) for r in results]
