"""Reusable FastAPI dependencies."""

from .account import get_account_repository, get_account_service
from .database import get_db_session
from .preview import get_export_gate, get_preview_registry, get_template_store

__all__ = [
    "get_db_session",
    "get_account_repository",
    "get_account_service",
    "get_export_gate",
    "get_preview_registry",
    "get_template_store",
]
