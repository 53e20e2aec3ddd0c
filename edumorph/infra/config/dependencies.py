"""
FastAPI dependency injection configuration.

The LLM client and the history repository are process-wide and created lazily;
use cases are built per request around them.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status

from edumorph.application.ports import HistoryRepositoryPort, LLMServicePort
from edumorph.application.use_cases import (
    ApplicationVisionUseCase,
    CreateRoadmapUseCase,
    ExplainConceptUseCase,
    GenerateQuizUseCase,
    ResolveDoubtUseCase,
)
from edumorph.infra.config.logging_config import bind_context, get_logger
from edumorph.infra.config.settings import get_settings
from edumorph.infra.repositories import MemoryHistoryRepository

DEV_USER_ID = "dev-user"

_llm_client: Optional[LLMServicePort] = None
_history_repo: Optional[HistoryRepositoryPort] = None


async def get_current_user_id(
    x_user_id: Annotated[Optional[str], Header()] = None,
) -> str:
    """User id as asserted by the identity provider in front of this service."""
    settings = get_settings()
    logger = get_logger("auth")

    if settings.disable_auth:
        user_id = x_user_id or DEV_USER_ID
        logger.info("auth.disabled", user_id=user_id)
    elif not x_user_id or not x_user_id.strip():
        logger.info("auth.missing_header")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header required",
        )
    else:
        user_id = x_user_id.strip()

    bind_context(user_id=user_id)
    return user_id


def get_llm_client() -> LLMServicePort:
    """Dependency for the LLM client."""
    global _llm_client
    if _llm_client is None:
        settings = get_settings()
        logger = get_logger("infra.llm")

        # No credential configured: answer from canned responses
        if not settings.get_llm_api_key():
            from edumorph.infra.llm.mock_client import MockLLMClient

            logger.warning("llm.mock_client", provider=settings.llm_provider)
            _llm_client = MockLLMClient()
        else:
            from edumorph.infra.llm.langchain_client import LangChainClient

            _llm_client = LangChainClient.from_settings(settings)
            logger.info("llm.client.ready", **_llm_client.get_model_info())
    return _llm_client


def get_history_repository() -> HistoryRepositoryPort:
    """Dependency for the per-user history store."""
    global _history_repo
    if _history_repo is None:
        _history_repo = MemoryHistoryRepository()
    return _history_repo


def get_application_vision_use_case(
    llm_client: LLMServicePort = Depends(get_llm_client),
) -> ApplicationVisionUseCase:
    return ApplicationVisionUseCase(llm_client)


def get_roadmap_use_case(
    llm_client: LLMServicePort = Depends(get_llm_client),
) -> CreateRoadmapUseCase:
    return CreateRoadmapUseCase(llm_client)


def get_doubt_use_case(
    llm_client: LLMServicePort = Depends(get_llm_client),
) -> ResolveDoubtUseCase:
    return ResolveDoubtUseCase(llm_client)


def get_concept_use_case(
    llm_client: LLMServicePort = Depends(get_llm_client),
) -> ExplainConceptUseCase:
    return ExplainConceptUseCase(llm_client)


def get_quiz_use_case(
    llm_client: LLMServicePort = Depends(get_llm_client),
) -> GenerateQuizUseCase:
    return GenerateQuizUseCase(llm_client)
