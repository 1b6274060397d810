"""Message assembly and SMTP delivery.

- assemble_message: builds the raw To/From/headers/Subject/body payload
- SMTPClient: smtplib wrapper for anonymous and authenticated delivery
"""

from .assembler import assemble_message
from .models import EmptyBodyRefusal, MailError, TransmissionError
from .smtp_client import SMTPClient

__all__ = [
    "assemble_message",
    "SMTPClient",
    # Exceptions
    "MailError",
    "EmptyBodyRefusal",
    "TransmissionError",
]
