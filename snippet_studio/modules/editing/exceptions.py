"""Preview session errors."""


class EditSessionError(Exception):
    """Base class for preview session errors."""


class EditSessionNotFoundError(EditSessionError):
    """Raised when a preview session id is unknown or already closed."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"preview session not found: {session_id}")


class EditSessionClosedError(EditSessionError):
    """Raised when a fetch completes after its session was closed.

    The fetched fragments are discarded; no buffer is touched.
    """
