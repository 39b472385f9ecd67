"""Sandbox boundary for displaying composed documents.

Composed documents carry arbitrary user script. They may only be shown
inside a restricted browsing context: scripts run, but the document gets an
opaque origin, so it cannot read the embedding page's storage or cookies,
navigate the top-level window, or submit forms. That boundary is applied here,
where the document is served or embedded, never inside the composer.
"""

from __future__ import annotations

import html as html_lib
from enum import Enum

from .document import RenderableDocument


class FrameMode(str, Enum):
    LIVE = "live"
    THUMBNAIL = "thumbnail"


def sandbox_headers(policy: str) -> dict[str, str]:
    """Response headers for serving a composed document directly."""
    return {
        "Content-Security-Policy": f"sandbox {policy}".strip(),
        "X-Content-Type-Options": "nosniff",
        "Referrer-Policy": "no-referrer",
        "Cache-Control": "no-store",
    }


def frame_markup(
    document: RenderableDocument,
    *,
    title: str,
    policy: str,
    mode: FrameMode = FrameMode.LIVE,
    scale: float = 1.0,
) -> str:
    """Embed ``document`` in a sandboxed iframe through ``srcdoc``.

    Thumbnails reuse the same document; scaling and disabling pointer
    events are frame styles, the document markup is left untouched.
    """
    styles = ["width:100%", "height:100%", "border:0"]
    if mode is FrameMode.THUMBNAIL:
        styles.append("pointer-events:none")
        styles.append(f"transform:scale({scale:g})")
        styles.append("transform-origin:center")
    return (
        "<iframe"
        f' srcdoc="{html_lib.escape(document.markup, quote=True)}"'
        f' sandbox="{html_lib.escape(policy, quote=True)}"'
        f' title="{html_lib.escape(title, quote=True)}"'
        f' style="{";".join(styles)}"'
        ' loading="lazy"'
        "></iframe>"
    )
