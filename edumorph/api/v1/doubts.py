"""
Doubt-resolver chat endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends

from edumorph.api.schemas import (
    AskDoubtRequest,
    AskDoubtResponse,
    ChatMessageResponse,
    RateMessageRequest,
)
from edumorph.application.ports import HistoryRepositoryPort
from edumorph.application.use_cases import ResolveDoubtUseCase
from edumorph.domain.entities import ChatMessage, build_conversation_context
from edumorph.infra.config.dependencies import (
    get_current_user_id,
    get_doubt_use_case,
    get_history_repository,
)
from edumorph.infra.config.logging_config import get_logger
from edumorph.infra.config.settings import get_settings

router = APIRouter(prefix="/doubts", tags=["doubts"])
log = get_logger("api.doubts")


@router.post("", response_model=AskDoubtResponse)
async def ask_doubt(
    request: AskDoubtRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: ResolveDoubtUseCase = Depends(get_doubt_use_case),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> AskDoubtResponse:
    """
    Answer a question using the last few chat messages as context.

    Nothing is stored when generation fails, so the question can be resubmitted.
    """
    previous = await history.get_messages(current_user_id)
    context = build_conversation_context(
        previous, limit=get_settings().doubt_context_messages
    )

    answer = await use_case.execute(request.question, context, request.subject)

    question_message = ChatMessage(
        content=request.question, is_user=True, subject=request.subject
    )
    answer_message = ChatMessage(content=answer, is_user=False, subject=request.subject)
    await history.append_messages(current_user_id, [question_message, answer_message])

    log.info("doubt.resolved", subject=request.subject, history_size=len(previous) + 2)
    return AskDoubtResponse(
        question=ChatMessageResponse.from_entity(question_message),
        answer=ChatMessageResponse.from_entity(answer_message),
    )


@router.get("/history", response_model=List[ChatMessageResponse])
async def get_doubt_history(
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> List[ChatMessageResponse]:
    messages = await history.get_messages(current_user_id)
    return [ChatMessageResponse.from_entity(m) for m in messages]


@router.post("/messages/{message_id}/rating", response_model=ChatMessageResponse)
async def rate_message(
    message_id: str,
    request: RateMessageRequest,
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> ChatMessageResponse:
    """Thumbs up or down on a tutor answer; ``null`` clears the rating."""
    message = await history.rate_message(current_user_id, message_id, request.rating)
    log.info("doubt.message.rated", message_id=message_id, rating=request.rating)
    return ChatMessageResponse.from_entity(message)
