"""API v1 routers"""

from fastapi import APIRouter

from .concepts import router as concepts_router
from .doubts import router as doubts_router
from .quizzes import router as quizzes_router
from .roadmaps import router as roadmaps_router
from .vision import router as vision_router

v1_router = APIRouter(prefix="/v1")

v1_router.include_router(vision_router)
v1_router.include_router(roadmaps_router)
v1_router.include_router(doubts_router)
v1_router.include_router(concepts_router)
v1_router.include_router(quizzes_router)
