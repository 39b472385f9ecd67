"""Catalog read endpoints, canonical previews and the gated download."""
from __future__ import annotations

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import HTMLResponse, Response

from snippet_studio.core.config import Settings, get_settings
from snippet_studio.core.security import get_access_context, get_current_account
from snippet_studio.interfaces.http.deps import get_export_gate, get_template_store
from snippet_studio.modules.accounts import Account
from snippet_studio.modules.composer import FrameMode, compose, frame_markup, sandbox_headers
from snippet_studio.modules.entitlements import AccessContext
from snippet_studio.modules.exports import ExportDeniedError, ExportGate
from snippet_studio.modules.templates import (
    CATEGORIES,
    Template,
    TemplateNotFoundError,
    TemplateStore,
    TemplateStoreUnavailableError,
)
from snippet_studio.schemas import TemplateDetailResponse, TemplateListResponse, TemplateSummaryResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def _load_template(store: TemplateStore, template_id: int) -> Template:
    try:
        return await store.get_template(template_id)
    except TemplateNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found") from exc
    except TemplateStoreUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Template store unavailable, please retry",
        ) from exc


@router.get("", response_model=TemplateListResponse, summary="List templates")
async def list_templates(
    category: str | None = Query(default=None),
    store: TemplateStore = Depends(get_template_store),
) -> TemplateListResponse:
    if category is not None and category not in CATEGORIES:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Unknown category: {category}")
    try:
        summaries = await store.list_templates(category)
    except TemplateStoreUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Template store unavailable, please retry",
        ) from exc
    return TemplateListResponse(
        total=len(summaries),
        templates=[TemplateSummaryResponse.model_validate(summary) for summary in summaries],
    )


@router.get("/{template_id}", response_model=TemplateDetailResponse, summary="Get a template with its code")
async def get_template(
    template_id: int,
    store: TemplateStore = Depends(get_template_store),
) -> TemplateDetailResponse:
    template = await _load_template(store, template_id)
    return TemplateDetailResponse(
        id=template.id,
        title=template.title,
        category=template.category,
        description=template.description,
        tags=list(template.tags),
        created_at=template.created_at,
        code_html=template.code_html,
        code_css=template.code_css,
        code_js=template.code_js,
        preview_image=template.preview_image,
        created_by=template.created_by,
    )


@router.get("/{template_id}/preview", response_class=HTMLResponse, summary="Sandboxed preview of the published code")
async def preview_template(
    template_id: int,
    store: TemplateStore = Depends(get_template_store),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    template = await _load_template(store, template_id)
    document = compose(template.code_html, template.code_css, template.code_js)
    return HTMLResponse(document.markup, headers=sandbox_headers(settings.preview.sandbox_policy))


@router.get("/{template_id}/thumbnail", response_class=HTMLResponse, summary="Card thumbnail embed")
async def template_thumbnail(
    template_id: int,
    store: TemplateStore = Depends(get_template_store),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    template = await _load_template(store, template_id)
    document = compose(template.code_html, template.code_css, template.code_js)
    embed = frame_markup(
        document,
        title=f"Preview of {template.title}",
        policy=settings.preview.sandbox_policy,
        mode=FrameMode.THUMBNAIL,
        scale=settings.preview.thumbnail_scale,
    )
    return HTMLResponse(embed)


@router.get("/{template_id}/download", summary="Download the published template as a standalone file")
async def download_template(
    template_id: int,
    account: Account = Depends(get_current_account),
    ctx: AccessContext = Depends(get_access_context),
    gate: ExportGate = Depends(get_export_gate),
) -> Response:
    try:
        artifact = await gate.request_export(template_id, ctx)
    except ExportDeniedError as exc:
        logger.info("Export of template %s denied for account %s: %s", template_id, account.id, exc.reason)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=exc.reason.capitalize()) from exc
    except TemplateNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found") from exc
    except TemplateStoreUnavailableError as exc:
        logger.warning("Export of template %s failed, store unavailable: %s", template_id, exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Template store unavailable, please retry",
        ) from exc

    logger.info("Template %s exported by account %s (%s)", template_id, account.id, artifact.authorization.reason)
    return Response(
        content=artifact.content,
        media_type=artifact.mime_type,
        headers={
            "Content-Disposition": _content_disposition(
                artifact.filename,
                extension=gate.file_extension,
                fallback_stem=gate.fallback_filename,
            )
        },
    )


def _content_disposition(filename: str, *, extension: str, fallback_stem: str) -> str:
    # Browsers without RFC 5987 support only see the ASCII name.
    ascii_name = filename.encode("ascii", "ignore").decode("ascii").replace('"', "")
    if not ascii_name.removesuffix(extension).strip("-"):
        ascii_name = f"{fallback_stem}{extension}"
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"
