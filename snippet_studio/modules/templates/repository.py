"""Repository protocol for the canonical template store."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Template, TemplateSummary


class TemplateStore(Protocol):
    """Read-only access to canonical template fragments.

    ``get_template`` raises ``TemplateNotFoundError`` when the id does not
    resolve and ``TemplateStoreUnavailableError`` when the backing store
    cannot be reached.
    """

    async def get_template(self, template_id: int) -> Template:
        ...

    async def list_templates(self, category: str | None = None) -> Sequence[TemplateSummary]:
        ...
