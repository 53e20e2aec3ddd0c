"""
Concept-explainer endpoints.

``/concepts/stream`` relays fragments to the client as they arrive; ``/concepts``
waits for all depths, which are generated concurrently.
"""

import asyncio
from typing import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from edumorph.api.schemas import (
    ConceptSessionResponse,
    ExplainAnswerRequest,
    ExplainConceptRequest,
    ExplanationResponse,
    StreamConceptRequest,
)
from edumorph.application.ports import HistoryRepositoryPort
from edumorph.application.use_cases import ExplainConceptUseCase
from edumorph.domain.entities import ConceptSession
from edumorph.domain.exceptions import GenerationFailed, NotFoundError
from edumorph.infra.config.dependencies import (
    get_concept_use_case,
    get_current_user_id,
    get_history_repository,
)
from edumorph.infra.config.logging_config import get_logger

router = APIRouter(prefix="/concepts", tags=["concepts"])
log = get_logger("api.concepts")

_END_OF_STREAM = object()
_STREAM_MEDIA_TYPE = "text/plain; charset=utf-8"

# Appended to a streamed body when generation fails after text was sent.
STREAM_FAILED_MARKER = "\n\n[GENERATION_FAILED]"


def _session_response(session: ConceptSession) -> ConceptSessionResponse:
    return ConceptSessionResponse(
        topic=session.topic,
        mode=session.mode,
        responses=session.responses,
        timestamp=session.timestamp,
    )


async def _remember(
    history: HistoryRepositoryPort,
    user_id: str,
    topic: str,
    mode: str,
    depth: str,
    text: str,
) -> None:
    """Add one depth to the current session, starting a new one on topic/mode change."""
    session = await history.get_concept_session(user_id)
    if session is None or session.topic != topic or session.mode != mode:
        session = ConceptSession(topic=topic, mode=mode)
    session.responses[depth] = text
    await history.save_concept_session(user_id, session)


@router.post("", response_model=ConceptSessionResponse)
async def explain_concept(
    request: ExplainConceptRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: ExplainConceptUseCase = Depends(get_concept_use_case),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> ConceptSessionResponse:
    """TL;DR, ELI5 and deep-dive explanations of one topic."""
    responses = await use_case.explain_all(request.topic, request.mode.value)

    session = ConceptSession(
        topic=request.topic, mode=request.mode.value, responses=responses
    )
    await history.save_concept_session(current_user_id, session)
    return _session_response(session)


@router.post("/stream")
async def stream_concept(
    request: StreamConceptRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: ExplainConceptUseCase = Depends(get_concept_use_case),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> StreamingResponse:
    """
    Stream one explanation depth as plain-text chunks.

    The response starts only once the first fragment has arrived, so a stream
    that fails before producing text is answered with 502 like any other
    generation failure. A failure after that ends the body with
    ``STREAM_FAILED_MARKER``.
    """
    queue: asyncio.Queue = asyncio.Queue()
    depth, mode = request.depth.value, request.mode.value

    async def produce() -> None:
        try:
            text = await use_case.execute(
                request.topic, depth, mode, on_fragment=queue.put
            )
            await _remember(history, current_user_id, request.topic, mode, depth, text)
        finally:
            await queue.put(_END_OF_STREAM)

    log.info("concept.stream.start", depth=depth, mode=mode)
    task = asyncio.create_task(produce())

    first = await queue.get()
    if first is _END_OF_STREAM:
        await task
        return StreamingResponse(iter(()), media_type=_STREAM_MEDIA_TYPE)

    async def relay() -> AsyncIterator[str]:
        item = first
        try:
            while item is not _END_OF_STREAM:
                yield item
                item = await queue.get()
            await task
        except GenerationFailed as e:
            log.warning("concept.stream.failed", depth=depth, error=str(e.cause))
            yield STREAM_FAILED_MARKER
        finally:
            if not task.done():
                task.cancel()

    return StreamingResponse(relay(), media_type=_STREAM_MEDIA_TYPE)


@router.get("/current", response_model=ConceptSessionResponse)
async def get_current_concept(
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> ConceptSessionResponse:
    session = await history.get_concept_session(current_user_id)
    if session is None:
        raise NotFoundError("concept session", current_user_id)
    return _session_response(session)


@router.post("/explain-answer", response_model=ExplanationResponse)
async def explain_answer(
    request: ExplainAnswerRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: ExplainConceptUseCase = Depends(get_concept_use_case),
) -> ExplanationResponse:
    """Deep-dive explanation behind a quiz question."""
    explanation = await use_case.explain_for_question(
        request.concept, request.question, request.mode.value
    )
    return ExplanationResponse(explanation=explanation)
