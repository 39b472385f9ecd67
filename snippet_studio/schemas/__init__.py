"""Pydantic schemas used across the project."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TokenData(BaseModel):
    account_id: int


class TemplateSummaryResponse(BaseModel):
    id: int
    title: str
    category: str
    description: str
    tags: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class TemplateListResponse(BaseModel):
    total: int
    templates: list[TemplateSummaryResponse]


class TemplateDetailResponse(TemplateSummaryResponse):
    code_html: str
    code_css: str
    code_js: str
    preview_image: Optional[str] = None
    created_by: Optional[int] = None


class FragmentSetResponse(BaseModel):
    html: str
    css: str
    js: str

    model_config = ConfigDict(from_attributes=True)


class PreviewSessionCreate(BaseModel):
    template_id: int


class PreviewSessionResponse(BaseModel):
    session_id: str
    template_id: int
    fragments: FragmentSetResponse


class FragmentUpdate(BaseModel):
    # Arbitrary text, including the empty string; no syntax checks.
    text: str


class EntitlementResponse(BaseModel):
    authorized: bool
    reason: str

    model_config = ConfigDict(from_attributes=True)
