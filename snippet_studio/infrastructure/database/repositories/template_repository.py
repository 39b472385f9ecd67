"""SQLAlchemy implementation of the canonical template store."""

from __future__ import annotations

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from snippet_studio.infrastructure.database.models import UiTemplate
from snippet_studio.modules.templates import (
    Template,
    TemplateNotFoundError,
    TemplateStoreUnavailableError,
    TemplateSummary,
)

logger = logging.getLogger(__name__)


class SqlTemplateRepository:
    """Read side of the template catalog.

    Rows are converted to frozen domain objects before they leave the
    repository, so callers never hold a live ORM instance they could flush.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_template(self, template_id: int) -> Template:
        stmt = select(UiTemplate).where(UiTemplate.id == template_id)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Template store query failed for %s: %s", template_id, exc)
            raise TemplateStoreUnavailableError(str(exc)) from exc
        model = result.scalars().first()
        if model is None:
            raise TemplateNotFoundError(template_id)
        return self._to_domain(model)

    async def list_templates(self, category: str | None = None) -> Sequence[TemplateSummary]:
        stmt = select(UiTemplate).order_by(UiTemplate.created_at.desc(), UiTemplate.id.desc())
        if category is not None:
            stmt = stmt.where(UiTemplate.category == category)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            logger.error("Template store listing failed: %s", exc)
            raise TemplateStoreUnavailableError(str(exc)) from exc
        return [self._to_summary(model) for model in result.scalars().all()]

    async def create(
        self,
        *,
        title: str,
        category: str,
        description: str,
        code_html: str,
        code_css: str = "",
        code_js: str = "",
        tags: list[str] | None = None,
        created_by: int | None = None,
        preview_image: str | None = None,
    ) -> Template:
        """Insert a template. Used by seeding and tests, never by the preview core."""
        model = UiTemplate(
            title=title,
            category=category,
            description=description,
            code_html=code_html,
            code_css=code_css,
            code_js=code_js,
            tags=tags,
            created_by=created_by,
            preview_image=preview_image,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: UiTemplate) -> Template:
        return Template(
            id=model.id,
            title=model.title,
            category=model.category,
            description=model.description,
            code_html=model.code_html or "",
            code_css=model.code_css or "",
            code_js=model.code_js or "",
            tags=tuple(model.tags or ()),
            created_by=model.created_by,
            created_at=model.created_at,
            preview_image=model.preview_image,
        )

    @staticmethod
    def _to_summary(model: UiTemplate) -> TemplateSummary:
        return TemplateSummary(
            id=model.id,
            title=model.title,
            category=model.category,
            description=model.description,
            tags=tuple(model.tags or ()),
            created_at=model.created_at,
        )
