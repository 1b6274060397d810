"""Reading message files relative to the build-sources root."""

from .exceptions import FileReadError
from .models import ResolvedMessage
from .reader import SourceReader, resolve_message

__all__ = [
    "FileReadError",
    "ResolvedMessage",
    "SourceReader",
    "resolve_message",
]
