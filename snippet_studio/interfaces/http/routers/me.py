"""Caller-facing account endpoints."""
from fastapi import APIRouter, Depends

from snippet_studio.core.security import get_access_context
from snippet_studio.modules.entitlements import AccessContext, evaluate
from snippet_studio.schemas import EntitlementResponse

router = APIRouter()


@router.get("/entitlement", response_model=EntitlementResponse, summary="Whether the caller may download code")
async def my_entitlement(ctx: AccessContext = Depends(get_access_context)) -> EntitlementResponse:
    # Informational only; the download endpoint evaluates again.
    return EntitlementResponse.model_validate(evaluate(ctx))
