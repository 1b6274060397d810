"""Input configuration module for the out step."""

from .environment import (
    RuntimeSettings,
    load_build_tokens,
    load_runtime_settings,
)
from .exceptions import (
    ConfigurationError,
    MalformedInputError,
    MissingArgumentError,
    ValidationError,
)
from .loader import load_request, parse_request, validate_request
from .models import OutRequest, ParamsConfig, SMTPConfig, SourceConfig

__all__ = [
    # Loader functions
    "load_request",
    "parse_request",
    "validate_request",
    "load_build_tokens",
    "load_runtime_settings",
    # Request models
    "OutRequest",
    "SourceConfig",
    "SMTPConfig",
    "ParamsConfig",
    "RuntimeSettings",
    # Exceptions
    "ConfigurationError",
    "MissingArgumentError",
    "MalformedInputError",
    "ValidationError",
]
