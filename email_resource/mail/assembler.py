"""Assembly of the raw message handed to the SMTP server.

The message is plain text built line by line; no MIME encoding or header
folding is applied, so file contents are expected to be ASCII-safe.
"""

from email_resource.logging import get_logger
from email_resource.sources.models import ResolvedMessage

logger = get_logger(__name__, component="mail")


def assemble_message(sender: str, message: ResolvedMessage) -> bytes:
    """Build the raw message bytes.

    Layout, one item per line: To, From, the custom header block (only if
    non-empty), Subject, a blank line, then the body exactly as read.

    Args:
        sender: Address for the From header
        message: Resolved message parts

    Returns:
        UTF-8 encoded message
    """
    lines = [
        "To: " + ", ".join(message.recipients),
        "From: " + sender,
    ]
    if message.headers:
        lines.append(message.headers)
    lines.append("Subject: " + message.subject)

    data = "\n".join(lines) + "\n\n" + message.body

    logger.debug(
        "Message assembled",
        extra={"event": "mail.assembled", "bytes": len(data.encode("utf-8"))},
    )
    return data.encode("utf-8")
