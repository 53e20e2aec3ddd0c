"""
Learning-roadmap endpoints: generate, fetch and track progress.
"""

from fastapi import APIRouter, Depends

from edumorph.api.schemas import CreateRoadmapRequest, RoadmapResponse
from edumorph.application.ports import HistoryRepositoryPort
from edumorph.application.use_cases import CreateRoadmapUseCase
from edumorph.domain.entities import RoadmapProgress
from edumorph.domain.exceptions import NotFoundError
from edumorph.infra.config.dependencies import (
    get_current_user_id,
    get_history_repository,
    get_roadmap_use_case,
)
from edumorph.infra.config.logging_config import get_logger

router = APIRouter(prefix="/roadmaps", tags=["roadmaps"])
log = get_logger("api.roadmaps")


@router.post("", response_model=RoadmapResponse)
async def create_roadmap(
    request: CreateRoadmapRequest,
    current_user_id: str = Depends(get_current_user_id),
    use_case: CreateRoadmapUseCase = Depends(get_roadmap_use_case),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> RoadmapResponse:
    """Generate a roadmap and make it the learner's current one."""
    roadmap = await use_case.execute(
        request.learning_goal, request.level.value, request.time_commitment.value
    )
    progress = RoadmapProgress.from_roadmap(roadmap)
    await history.save_roadmap(current_user_id, progress)

    log.info("roadmap.created", milestones=progress.total_milestones)
    return RoadmapResponse.from_entity(progress)


@router.get("/current", response_model=RoadmapResponse)
async def get_current_roadmap(
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> RoadmapResponse:
    progress = await history.get_roadmap(current_user_id)
    if progress is None:
        raise NotFoundError("roadmap", current_user_id)
    return RoadmapResponse.from_entity(progress)


@router.post("/current/milestones/{milestone_id}/toggle", response_model=RoadmapResponse)
async def toggle_milestone(
    milestone_id: str,
    current_user_id: str = Depends(get_current_user_id),
    history: HistoryRepositoryPort = Depends(get_history_repository),
) -> RoadmapResponse:
    """Mark a milestone done, or undone if it already was."""
    progress = await history.get_roadmap(current_user_id)
    if progress is None:
        raise NotFoundError("roadmap", current_user_id)

    milestone = progress.toggle(milestone_id)
    await history.save_roadmap(current_user_id, progress)

    log.info(
        "roadmap.milestone.toggled",
        milestone_id=milestone_id,
        completed=milestone.completed,
    )
    return RoadmapResponse.from_entity(progress)
