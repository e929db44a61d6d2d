"""Configuration and template lookup exceptions."""

from .base import QRStudioException


class ConfigurationError(QRStudioException):
    """Raised when a configuration value is invalid."""

    pass


class TemplateNotFoundError(QRStudioException):
    """Raised when an unknown template id is requested."""

    def __init__(self, template_id: str):
        super().__init__(f"Unknown template: {template_id!r}")
        self.template_id = template_id
