"""Environment variable loading.

Two groups of variables are read:
- build metadata exported by the CI runner, captured once per invocation as
  an immutable token mapping used for substitution in message files;
- settings for the step itself (log level, log format, environment label).
"""

import os
from types import MappingProxyType
from typing import Mapping, Optional

from .exceptions import ConfigurationError

# Environment variables exported by the CI runner for every build
BUILD_METADATA_VARIABLES = (
    "BUILD_ID",
    "BUILD_NAME",
    "BUILD_JOB_NAME",
    "BUILD_PIPELINE_NAME",
    "ATC_EXTERNAL_URL",
    "BUILD_TEAM_NAME",
)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_LOG_FORMATS = ["json", "key-value"]


def placeholder_for(variable: str) -> str:
    """Return the literal placeholder for a build variable, e.g. ${BUILD_ID}."""
    return "${" + variable + "}"


def load_build_tokens(environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """
    Capture build metadata as a read-only placeholder -> value mapping.

    Unset variables resolve to an empty string.

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Returns:
        Read-only mapping such as {"${BUILD_ID}": "42", ...}
    """
    source = os.environ if environ is None else environ
    return MappingProxyType(
        {placeholder_for(name): source.get(name, "") for name in BUILD_METADATA_VARIABLES}
    )


class RuntimeSettings:
    """Settings for the step process itself."""

    def __init__(
        self,
        log_level: Optional[str] = None,
        log_format: Optional[str] = None,
        environment: Optional[str] = None,
    ):
        """Initialize runtime settings."""
        self.log_level = (log_level or "INFO").upper()
        self.log_format = log_format or "key-value"
        self.environment = environment or "local"


def load_runtime_settings(environ: Optional[Mapping[str, str]] = None) -> RuntimeSettings:
    """
    Load and validate the step's own environment variables.

    Optional environment variables:
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL (default INFO)
    - LOG_FORMAT: json or key-value (default key-value)
    - ENVIRONMENT: label attached to every log record (default local)

    Returns:
        RuntimeSettings with validated values

    Raises:
        ConfigurationError: If a variable holds an unsupported value
    """
    source = os.environ if environ is None else environ
    errors = []

    log_level = source.get("LOG_LEVEL")
    log_format = source.get("LOG_FORMAT")
    environment = source.get("ENVIRONMENT")

    if log_level and log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"Invalid LOG_LEVEL: '{log_level}'. Must be one of: {', '.join(VALID_LOG_LEVELS)}"
        )

    if log_format and log_format not in VALID_LOG_FORMATS:
        errors.append(
            f"Invalid LOG_FORMAT: '{log_format}'. Must be one of: {', '.join(VALID_LOG_FORMATS)}"
        )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=["Unset the variable to use the default"],
        )

    return RuntimeSettings(
        log_level=log_level,
        log_format=log_format,
        environment=environment,
    )
