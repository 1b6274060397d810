"""Exceptions for message assembly and delivery."""

from email_resource.exceptions import ResourceError

EMPTY_BODY_MESSAGE = (
    "Message not sent because the message body is empty and send_empty_body "
    "parameter was set to false. Github readme: https://github.com/pivotal-cf/email-resource"
)


class MailError(ResourceError):
    """Base exception for mail-related errors."""

    pass


class EmptyBodyRefusal(MailError):
    """Raised when the body is empty and send_empty_body is false.

    Unlike every other error it still carries the serialized output record,
    so the runner can report what would have been sent.

    Attributes:
        payload: Serialized output record built before the refusal
    """

    def __init__(self, payload: str):
        self.payload = payload
        super().__init__(EMPTY_BODY_MESSAGE)


class TransmissionError(MailError):
    """Raised when connecting, authenticating or sending over SMTP fails."""

    pass
