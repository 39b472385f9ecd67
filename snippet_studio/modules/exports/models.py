"""Export artifact value objects."""

from __future__ import annotations

from dataclasses import dataclass

from snippet_studio.modules.entitlements import EntitlementDecision


@dataclass(frozen=True, slots=True)
class ExportArtifact:
    filename: str
    mime_type: str
    content: str
    template_id: int
    authorization: EntitlementDecision
