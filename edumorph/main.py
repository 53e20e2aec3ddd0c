"""
EduMorph API application.

Run with ``edumorph`` (console script) or ``uvicorn edumorph.main:app``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from edumorph import __version__
from edumorph.api.errors import setup_error_handlers
from edumorph.api.v1 import v1_router
from edumorph.infra.config.logging_config import get_logger, setup_logging
from edumorph.infra.config.settings import get_settings
from edumorph.infra.middleware.request_context import RequestContextMiddleware

settings = get_settings()


def _llm_backend() -> str:
    """Name of the backend requests will reach: the provider, or "mock" without a key."""
    return settings.llm_provider if settings.get_llm_api_key() else "mock"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    log = get_logger("app")
    log.info(
        "app.startup",
        version=__version__,
        environment=settings.environment,
        llm_backend=_llm_backend(),
        auth_disabled=settings.disable_auth,
    )
    yield
    log.info("app.shutdown")


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_name,
        description="Application visions, learning roadmaps, doubt resolution, "
        "concept explanations and quizzes generated on demand.",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestContextMiddleware)
    setup_error_handlers(app)

    app.include_router(v1_router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root():
        return {"service": settings.app_name, "version": __version__, "docs": "/docs"}

    @app.get("/health", tags=["system"])
    async def health():
        return {
            "status": "healthy",
            "version": __version__,
            "environment": settings.environment,
            "llm_backend": _llm_backend(),
        }

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run(
        "edumorph.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
