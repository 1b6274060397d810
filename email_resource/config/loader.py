"""Request decoding and validation for the out step."""

from typing import Union

from pydantic import ValidationError as PydanticValidationError

from email_resource.logging import get_logger

from .exceptions import MalformedInputError, ValidationError
from .models import OutRequest
from .validators import check_for_warnings, emit_warnings

logger = get_logger(__name__, component="config")

ANONYMOUS_HINT = "if anonymous specify anonymous: true"


def parse_request(raw_input: Union[bytes, str]) -> OutRequest:
    """
    Decode the JSON document sent by the CI runner.

    Only the shape and value types are checked here.

    Args:
        raw_input: Raw JSON payload read from stdin

    Returns:
        Decoded OutRequest

    Raises:
        MalformedInputError: If the payload is not JSON or has the wrong shape
    """
    try:
        return OutRequest.model_validate_json(raw_input)
    except PydanticValidationError as e:
        errors = []
        for error in e.errors():
            field_path = ".".join(str(loc) for loc in error["loc"])
            error_type = error["type"]

            if error_type == "json_invalid":
                errors.append(f"Invalid JSON: {error['msg']}")
            elif error_type in ["string_type", "bool_type", "list_type", "model_type"]:
                expected_type = error_type.replace("_type", "").replace("model", "object")
                errors.append(
                    f"Invalid type for '{field_path or 'input'}': expected {expected_type}, "
                    f"got {error.get('input')!r}"
                )
            else:
                errors.append(f"{field_path or 'input'}: {error['msg']}")

        raise MalformedInputError(
            "Failed to decode input JSON",
            errors=errors,
            suggestions=[
                "Check that source.smtp.port is quoted as a string",
                "Check that source.to is a list and params.to is a file path",
            ],
        ) from e


def validate_request(request: OutRequest) -> None:
    """
    Check required fields, stopping at the first one that is missing.

    The order is fixed: source.smtp.host, source.smtp.port, source.from,
    source.to or params.to, params.subject, then (non-anonymous only)
    source.smtp.username and source.smtp.password.

    Args:
        request: Decoded request

    Raises:
        ValidationError: Naming the first missing field
    """
    source = request.source
    params = request.params

    if not source.smtp.host:
        raise ValidationError("source.smtp.host")

    if not source.smtp.port:
        raise ValidationError("source.smtp.port")

    if not source.from_:
        raise ValidationError("source.from")

    if not source.to and not params.to:
        raise ValidationError(
            "source.to",
            'missing required field "source.to" or "params.to". Must specify at least one',
        )

    if not params.subject:
        raise ValidationError("params.subject")

    if source.smtp.anonymous is False:
        if not source.smtp.username:
            raise ValidationError(
                "source.smtp.username",
                f'missing required field "source.smtp.username" {ANONYMOUS_HINT}',
            )

        if not source.smtp.password:
            raise ValidationError(
                "source.smtp.password",
                f'missing required field "source.smtp.password" {ANONYMOUS_HINT}',
            )


def load_request(raw_input: Union[bytes, str]) -> OutRequest:
    """
    Decode and validate a request, logging any non-fatal warnings.

    Args:
        raw_input: Raw JSON payload read from stdin

    Returns:
        Validated OutRequest

    Raises:
        MalformedInputError: If the payload cannot be decoded
        ValidationError: If a required field is missing
    """
    request = parse_request(raw_input)
    validate_request(request)

    warnings = check_for_warnings(request)
    if warnings:
        emit_warnings(warnings)

    logger.debug(
        "Request validated",
        extra={
            "event": "config.validated",
            "smtp_address": request.source.smtp.address,
            "anonymous": request.source.smtp.anonymous,
            "static_recipient_count": len(request.static_recipients()),
        },
    )
    return request
