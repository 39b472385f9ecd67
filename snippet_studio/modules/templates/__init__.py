"""Canonical template models and the store interface."""

from .exceptions import TemplateError, TemplateNotFoundError, TemplateStoreUnavailableError
from .models import CATEGORIES, Template, TemplateSummary
from .repository import TemplateStore

__all__ = [
    "CATEGORIES",
    "Template",
    "TemplateSummary",
    "TemplateStore",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateStoreUnavailableError",
]
