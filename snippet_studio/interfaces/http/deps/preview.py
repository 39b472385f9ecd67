"""Template store, export gate and preview session providers."""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from snippet_studio.core.config import Settings, get_settings
from snippet_studio.infrastructure.database.repositories import SqlTemplateRepository
from snippet_studio.modules.editing import PreviewSessionRegistry
from snippet_studio.modules.exports import ExportGate
from snippet_studio.modules.templates import TemplateStore

from .database import get_db_session


def get_template_store(db: AsyncSession = Depends(get_db_session)) -> TemplateStore:
    return SqlTemplateRepository(db)


def get_export_gate(
    store: TemplateStore = Depends(get_template_store),
    settings: Settings = Depends(get_settings),
) -> ExportGate:
    return ExportGate(
        store,
        mime_type=settings.export.mime_type,
        file_extension=settings.export.file_extension,
        fallback_filename=settings.export.fallback_filename,
    )


def get_preview_registry(request: Request) -> PreviewSessionRegistry:
    return request.app.state.preview_sessions


__all__ = [
    "get_export_gate",
    "get_preview_registry",
    "get_template_store",
]
