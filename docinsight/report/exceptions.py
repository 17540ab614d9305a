class ReportError(Exception):
    """Raised when report generation fails."""


class ReportInputError(ReportError):
    """Raised when the text handed to the generator cannot be analyzed."""


class ReportValidationError(ReportError):
    """Raised when the AI response does not match the report structure."""


class ReportNetworkError(ReportError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
