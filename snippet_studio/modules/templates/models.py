"""Domain models for UI component templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

CATEGORIES: tuple[str, ...] = (
    "Cards",
    "Buttons",
    "Forms",
    "Navigation",
    "Modals",
    "Inputs",
    "Loaders",
    "Animations",
)


@dataclass(frozen=True, slots=True)
class Template:
    """Store-of-record snapshot of a template; never modified by this service."""

    id: int
    title: str
    category: str
    description: str
    code_html: str
    code_css: str
    code_js: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    created_by: Optional[int] = None
    created_at: Optional[datetime] = None
    preview_image: Optional[str] = None


@dataclass(frozen=True, slots=True)
class TemplateSummary:
    id: int
    title: str
    category: str
    description: str
    tags: tuple[str, ...] = field(default_factory=tuple)
    created_at: Optional[datetime] = None
