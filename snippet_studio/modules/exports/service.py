"""Entitlement-gated export of canonical templates."""

from __future__ import annotations

import re
from dataclasses import dataclass

from snippet_studio.modules.composer import compose
from snippet_studio.modules.entitlements import AccessContext, evaluate
from snippet_studio.modules.templates import TemplateStore

from .exceptions import ExportDeniedError
from .models import ExportArtifact

_WHITESPACE = re.compile(r"\s+")


def export_filename(title: str, *, extension: str = ".html", fallback: str = "template") -> str:
    """``"Fancy Card"`` -> ``"fancy-card.html"``."""
    stem = _WHITESPACE.sub("-", title.strip().lower()) or fallback
    return f"{stem}{extension}"


@dataclass(slots=True)
class ExportGate:
    """Builds downloadable documents for entitled callers.

    Must run on the server side, next to the template store: it is the only
    path by which code leaves the system. Artifacts are always composed from
    the store's canonical fragments, never from an edit buffer.
    """

    store: TemplateStore
    mime_type: str = "text/html"
    file_extension: str = ".html"
    fallback_filename: str = "template"

    async def request_export(self, template_id: int, ctx: AccessContext) -> ExportArtifact:
        decision = evaluate(ctx)
        if not decision.authorized:
            raise ExportDeniedError(decision.reason)

        template = await self.store.get_template(template_id)
        document = compose(
            template.code_html,
            template.code_css,
            template.code_js,
            title=template.title.strip() or "Template",
        )
        return ExportArtifact(
            filename=export_filename(
                template.title,
                extension=self.file_extension,
                fallback=self.fallback_filename,
            ),
            mime_type=self.mime_type,
            content=document.markup,
            template_id=template.id,
            authorization=decision,
        )
