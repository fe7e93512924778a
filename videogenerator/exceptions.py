class ValidationError(Exception):
    """Raised when the uploaded form is missing a required field."""


class ConfigurationError(Exception):
    """Raised when a required API key or bot identifier is not configured."""


class UpstreamError(Exception):
    """Raised when the AI or messaging API answers with a non-success status."""


class AnalysisParseError(Exception):
    """Raised when the AI response does not carry the expected JSON object."""
