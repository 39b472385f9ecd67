"""Template store specific exceptions."""


class TemplateError(Exception):
    """Base class for template store errors."""


class TemplateNotFoundError(TemplateError):
    """Raised when a template id does not resolve to a stored template."""

    def __init__(self, template_id: int) -> None:
        self.template_id = template_id
        super().__init__(f"template not found: {template_id}")


class TemplateStoreUnavailableError(TemplateError):
    """Raised when the template store cannot be reached."""
