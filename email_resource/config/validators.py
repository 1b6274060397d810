"""Additional, non-fatal checks on a decoded request."""

from typing import List

from email_validator import EmailNotValidError, validate_email

from email_resource.logging import get_logger

from .models import OutRequest

logger = get_logger(__name__, component="config")


def check_for_warnings(request: OutRequest) -> List[str]:
    """
    Check a request for likely mistakes that do not stop the step.

    Args:
        request: Decoded request

    Returns:
        List of warning messages
    """
    warning_messages = []
    smtp = request.source.smtp

    # Credentials are ignored in anonymous mode
    if smtp.anonymous and (smtp.username or smtp.password):
        warning_messages.append(
            "source.smtp.username/password are set but anonymous is true; "
            "credentials will not be sent"
        )

    # Without a body file the step can only refuse
    if not request.params.body and not request.params.send_empty_body:
        warning_messages.append(
            "params.body is not set and send_empty_body is false; "
            "the message will not be sent"
        )

    for address in request.static_recipients():
        if not looks_like_address(address):
            warning_messages.append(f"source.to entry does not look like an email address: '{address}'")

    if request.source.from_ and not looks_like_address(request.source.from_):
        warning_messages.append(
            f"source.from does not look like an email address: '{request.source.from_}'"
        )

    return warning_messages


def looks_like_address(address: str) -> bool:
    """Return True if address is a syntactically valid mailbox."""
    try:
        validate_email(address, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Log warning messages.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        logger.warning(message, extra={"event": "config.warning"})
