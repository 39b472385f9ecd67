"""Entitlement-gated export."""

from .exceptions import ExportDeniedError, ExportError
from .models import ExportArtifact
from .service import ExportGate, export_filename

__all__ = [
    "ExportArtifact",
    "ExportDeniedError",
    "ExportError",
    "ExportGate",
    "export_filename",
]
