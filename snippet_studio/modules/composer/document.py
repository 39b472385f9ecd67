"""Composition of HTML, CSS and JS fragments into one standalone document."""

from __future__ import annotations

import html as html_lib
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class RenderableDocument:
    markup: str


def compose(html: str, css: str, js: str, *, title: Optional[str] = None) -> RenderableDocument:
    """Build a minimal document: style block, body markup, then script block.

    Fragments are inserted verbatim. Nothing is escaped or sanitized; the
    result is only safe to display inside a sandboxed frame (see
    :mod:`snippet_studio.modules.composer.hosting`). The optional title is
    document metadata, not a fragment, and is HTML-escaped.

    Identical arguments always produce byte-identical markup.
    """
    head = [
        '<meta charset="UTF-8">',
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">',
    ]
    if title is not None:
        head.append(f"<title>{html_lib.escape(title, quote=False)}</title>")

    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        *head,
        "<style>",
        css,
        "</style>",
        "</head>",
        "<body>",
        html,
        "<script>",
        js,
        "</script>",
        "</body>",
        "</html>",
    ]
    return RenderableDocument(markup="\n".join(parts) + "\n")
