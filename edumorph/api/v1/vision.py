"""
Application-vision endpoint.
"""

from fastapi import APIRouter, Depends

from edumorph.api.schemas import ApplicationVisionRequest
from edumorph.application.prompts import ApplicationVision
from edumorph.application.use_cases import ApplicationVisionUseCase
from edumorph.infra.config.dependencies import (
    get_application_vision_use_case,
    get_current_user_id,
)
from edumorph.infra.config.logging_config import get_logger

router = APIRouter(prefix="/vision", tags=["application-vision"])
log = get_logger("api.vision")


@router.post("", response_model=ApplicationVision)
async def generate_application_vision(
    request: ApplicationVisionRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: ApplicationVisionUseCase = Depends(get_application_vision_use_case),
) -> ApplicationVision:
    """Real-world use cases, a mini project, tools and industries for a concept."""
    log.info("vision.request", persona=request.persona.value)
    return await use_case.execute(request.concept, request.persona.value)
