"""Edit sessions: one mutable scratch buffer per open preview view."""

from __future__ import annotations

import uuid
from collections import OrderedDict

from snippet_studio.modules.composer import RenderableDocument, compose
from snippet_studio.modules.templates import TemplateStore

from .exceptions import EditSessionClosedError, EditSessionNotFoundError
from .models import EditBuffer, FragmentKind, FragmentSet, set_fragment, snapshot


class EditSession:
    """Owns exactly one :class:`EditBuffer`.

    Sessions share nothing with each other, so two sessions opened on the
    same template id evolve independently.
    """

    def __init__(self, buffer: EditBuffer, session_id: str | None = None) -> None:
        self.id = session_id or uuid.uuid4().hex
        self._buffer = buffer
        self._closed = False

    @classmethod
    async def open(cls, store: TemplateStore, template_id: int) -> "EditSession":
        # Raises TemplateNotFoundError before any session exists.
        template = await store.get_template(template_id)
        return cls(EditBuffer.seeded_from(template))

    @property
    def buffer(self) -> EditBuffer:
        return self._buffer

    @property
    def template_id(self) -> int:
        return self._buffer.original_ref

    @property
    def closed(self) -> bool:
        return self._closed

    def set_fragment(self, kind: FragmentKind | str, text: str) -> EditBuffer:
        self._ensure_open()
        self._buffer = set_fragment(self._buffer, kind, text)
        return self._buffer

    async def reset(self, store: TemplateStore) -> EditBuffer:
        """Discard all drafts and reload the canonical fragments."""
        self._ensure_open()
        template = await store.get_template(self._buffer.original_ref)
        # The view may have closed while the fetch was in flight.
        self._ensure_open()
        self._buffer = EditBuffer.seeded_from(template)
        return self._buffer

    def snapshot(self) -> FragmentSet:
        return snapshot(self._buffer)

    def render(self) -> RenderableDocument:
        fragments = self.snapshot()
        return compose(fragments.html, fragments.css, fragments.js)

    def close(self) -> None:
        self._closed = True

    def _ensure_open(self) -> None:
        if self._closed:
            raise EditSessionClosedError(self.id)


class PreviewSessionRegistry:
    """In-process table of open edit sessions, keyed by session id.

    Nothing is persisted. When more than ``max_sessions`` are open the
    least recently used session is closed and dropped. Every lookup through
    :meth:`get` counts as a use.
    """

    def __init__(self, max_sessions: int = 1000) -> None:
        self._max_sessions = max_sessions
        self._sessions: OrderedDict[str, EditSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    async def open(self, store: TemplateStore, template_id: int) -> EditSession:
        session = await EditSession.open(store, template_id)
        self._sessions[session.id] = session
        while len(self._sessions) > self._max_sessions:
            _, evicted = self._sessions.popitem(last=False)
            evicted.close()
        return session

    def get(self, session_id: str) -> EditSession:
        try:
            session = self._sessions[session_id]
        except KeyError:
            raise EditSessionNotFoundError(session_id) from None
        self._sessions.move_to_end(session_id)
        return session

    def close(self, session_id: str) -> None:
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise EditSessionNotFoundError(session_id)
        session.close()

    def close_all(self) -> None:
        while self._sessions:
            _, session = self._sessions.popitem()
            session.close()
