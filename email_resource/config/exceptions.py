"""Custom exceptions for input configuration handling."""

from typing import List, Optional

from email_resource.exceptions import ResourceError


class ConfigurationError(ResourceError):
    """
    Exception raised when the step input cannot be used.

    Stores optional detail lines and suggestions and formats them in a
    human-readable way below the primary message.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: Primary error message
            errors: List of specific problems found in the input
            suggestions: List of helpful suggestions to fix the input
        """
        self.message = message
        self.errors = errors or []
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with all errors and suggestions."""
        parts = [self.message]

        if self.errors:
            parts.append("\nInput Errors:")
            for i, error in enumerate(self.errors, 1):
                parts.append(f"  {i}. {error}")

        if self.suggestions:
            parts.append("\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"  - {suggestion}")

        return "\n".join(parts)


class MissingArgumentError(ConfigurationError):
    """Raised when the build-sources root directory is not supplied."""

    def __init__(self):
        super().__init__("expected path to build sources as first argument")


class MalformedInputError(ConfigurationError):
    """Raised when the JSON payload on stdin cannot be decoded into a request."""

    pass


class ValidationError(ConfigurationError):
    """Raised on the first required field missing from the request.

    Attributes:
        field: Dotted name of the missing field (e.g. "source.smtp.host")
    """

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(message or f'missing required field "{field}"')
