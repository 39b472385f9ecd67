"""Preview session endpoints: edit buffer lifecycle and sandboxed rendering."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import HTMLResponse

from snippet_studio.core.config import Settings, get_settings
from snippet_studio.interfaces.http.deps import get_preview_registry, get_template_store
from snippet_studio.modules.composer import sandbox_headers
from snippet_studio.modules.editing import (
    EditSession,
    EditSessionClosedError,
    EditSessionNotFoundError,
    FragmentKind,
    PreviewSessionRegistry,
)
from snippet_studio.modules.templates import TemplateNotFoundError, TemplateStore, TemplateStoreUnavailableError
from snippet_studio.schemas import FragmentSetResponse, FragmentUpdate, PreviewSessionCreate, PreviewSessionResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _session_or_404(registry: PreviewSessionRegistry, session_id: str) -> EditSession:
    try:
        return registry.get(session_id)
    except EditSessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preview session not found") from exc


def _to_response(session: EditSession) -> PreviewSessionResponse:
    return PreviewSessionResponse(
        session_id=session.id,
        template_id=session.template_id,
        fragments=FragmentSetResponse.model_validate(session.snapshot()),
    )


@router.post(
    "",
    response_model=PreviewSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a preview session seeded from a template",
)
async def open_preview(
    payload: PreviewSessionCreate,
    store: TemplateStore = Depends(get_template_store),
    registry: PreviewSessionRegistry = Depends(get_preview_registry),
) -> PreviewSessionResponse:
    try:
        session = await registry.open(store, payload.template_id)
    except TemplateNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template not found") from exc
    except TemplateStoreUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Template store unavailable, please retry",
        ) from exc
    logger.debug("Opened preview session %s for template %s", session.id, session.template_id)
    return _to_response(session)


@router.get("/{session_id}", response_model=PreviewSessionResponse, summary="Current drafts")
async def get_preview(
    session_id: str,
    registry: PreviewSessionRegistry = Depends(get_preview_registry),
) -> PreviewSessionResponse:
    return _to_response(_session_or_404(registry, session_id))


@router.put("/{session_id}/fragments/{kind}", response_model=PreviewSessionResponse, summary="Replace one draft")
async def update_fragment(
    session_id: str,
    kind: FragmentKind,
    payload: FragmentUpdate,
    registry: PreviewSessionRegistry = Depends(get_preview_registry),
) -> PreviewSessionResponse:
    session = _session_or_404(registry, session_id)
    session.set_fragment(kind, payload.text)
    return _to_response(session)


@router.post("/{session_id}/reset", response_model=PreviewSessionResponse, summary="Discard drafts")
async def reset_preview(
    session_id: str,
    store: TemplateStore = Depends(get_template_store),
    registry: PreviewSessionRegistry = Depends(get_preview_registry),
) -> PreviewSessionResponse:
    session = _session_or_404(registry, session_id)
    try:
        await session.reset(store)
    except EditSessionClosedError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Preview session was closed") from exc
    except TemplateNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Template no longer exists") from exc
    except TemplateStoreUnavailableError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Template store unavailable, please retry",
        ) from exc
    return _to_response(session)


@router.get("/{session_id}/document", response_class=HTMLResponse, summary="Sandboxed render of the drafts")
async def render_preview(
    session_id: str,
    registry: PreviewSessionRegistry = Depends(get_preview_registry),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    session = _session_or_404(registry, session_id)
    document = session.render()
    return HTMLResponse(document.markup, headers=sandbox_headers(settings.preview.sandbox_policy))


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Close a preview session")
async def close_preview(
    session_id: str,
    registry: PreviewSessionRegistry = Depends(get_preview_registry),
) -> Response:
    try:
        registry.close(session_id)
    except EditSessionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Preview session not found") from exc
    logger.debug("Closed preview session %s", session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
