"""Edit buffers and preview sessions."""

from .exceptions import EditSessionClosedError, EditSessionError, EditSessionNotFoundError
from .models import EditBuffer, FragmentKind, FragmentSet, set_fragment, snapshot
from .session import EditSession, PreviewSessionRegistry

__all__ = [
    "EditBuffer",
    "EditSession",
    "EditSessionClosedError",
    "EditSessionError",
    "EditSessionNotFoundError",
    "FragmentKind",
    "FragmentSet",
    "PreviewSessionRegistry",
    "set_fragment",
    "snapshot",
]
