"""Exceptions for reading message files from the build sources."""

from email_resource.exceptions import ResourceError


class FileReadError(ResourceError):
    """Raised when a file referenced by params cannot be read.

    The underlying OSError or UnicodeDecodeError is chained as __cause__.

    Attributes:
        path: Absolute path that was attempted
    """

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to read {path}: {cause}")
