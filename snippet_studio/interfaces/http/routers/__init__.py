from fastapi import APIRouter

from . import me, previews, templates


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(templates.router, prefix="/templates", tags=["templates"])
    router.include_router(previews.router, prefix="/previews", tags=["previews"])
    router.include_router(me.router, prefix="/me", tags=["account"])
    return router


__all__ = [
    "create_api_router",
]
