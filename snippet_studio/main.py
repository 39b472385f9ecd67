from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from snippet_studio import __version__
from snippet_studio.core.config import get_settings
from snippet_studio.infrastructure.database import dispose_engine, init_db
from snippet_studio.interfaces.http.routers import create_api_router
from snippet_studio.modules.editing import PreviewSessionRegistry

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    app.state.preview_sessions.close_all()
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Sandboxed previews and entitlement-gated export of UI component snippets",
        version=__version__,
        lifespan=lifespan,
    )

    # Edit buffers live only in this process; nothing is persisted.
    app.state.preview_sessions = PreviewSessionRegistry(max_sessions=settings.preview.max_sessions)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", tags=["health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
