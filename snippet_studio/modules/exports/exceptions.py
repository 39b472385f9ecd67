"""Export specific exceptions."""


class ExportError(Exception):
    """Base class for export errors."""


class ExportDeniedError(ExportError):
    """Raised when the caller is not entitled to export code."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
