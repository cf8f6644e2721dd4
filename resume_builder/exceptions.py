"""
Exception hierarchy for the resume builder.

Every error carries a message that is safe to show in the error banner;
transport and library details stay in the logs.
"""


class ResumeBuilderError(Exception):
    """Base class for all resume builder errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ResumeBuilderError):
    """Missing credential or invalid setting. Fatal at startup."""


class InputValidationError(ResumeBuilderError):
    """Local validation failed before any work was started."""


class AIServiceError(ResumeBuilderError):
    """A call to the text-generation model failed."""


class ExportError(ResumeBuilderError):
    """An exporter could not produce its artifact."""

    def __init__(self, message: str, export_format: str = ""):
        self.export_format = export_format
        super().__init__(message)
