"""Utility helpers for token substitution and timestamps."""

from .timestamps import format_rfc3339, utc_now
from .tokens import substitute_tokens

__all__ = [
    "format_rfc3339",
    "substitute_tokens",
    "utc_now",
]
