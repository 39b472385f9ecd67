"""Document composition and the sandbox hosting contract."""

from .document import RenderableDocument, compose
from .hosting import FrameMode, frame_markup, sandbox_headers

__all__ = [
    "FrameMode",
    "RenderableDocument",
    "compose",
    "frame_markup",
    "sandbox_headers",
]
