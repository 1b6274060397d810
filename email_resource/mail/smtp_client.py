"""SMTP client wrapper for message delivery.

This module provides a thin wrapper around Python's smtplib covering the two
delivery modes of the step: anonymous (no AUTH) and authenticated (AUTH PLAIN
with username/password). STARTTLS is used whenever the server offers it.
"""

import re
import smtplib
import ssl
from typing import Callable, List, Optional

from email_resource.config.models import SMTPConfig
from email_resource.logging import get_logger

from .models import TransmissionError

logger = get_logger(__name__, component="smtp")

LOCAL_HOSTS = {"localhost", "127.0.0.1", "::1"}


def normalize_line_endings(payload: bytes) -> bytes:
    """Convert bare LF and CRLF line endings to CRLF as SMTP requires."""
    return re.sub(rb"\r?\n", b"\r\n", payload)


def parse_port(port: str) -> int:
    """Parse the configured port string.

    Raises:
        ValueError: If port is not an integer between 1 and 65535
    """
    value = int(port)
    if value < 1 or value > 65535:
        raise ValueError(f"port out of range: {value}")
    return value


class SMTPClient:
    """Wrapper around smtplib for sending one assembled message.

    Handles connection lifecycle, opportunistic STARTTLS and optional
    authentication. The connection factory can be injected for testing.
    """

    def __init__(
        self,
        smtp_factory: Optional[Callable] = None,
        ssl_context_factory: Optional[Callable] = None,
    ):
        """Initialize SMTP client with optional factory injection.

        Args:
            smtp_factory: Factory function for creating SMTP instances (for mocking)
            ssl_context_factory: Factory for the SSL context used by STARTTLS
        """
        self.smtp_factory = smtp_factory or smtplib.SMTP
        self.ssl_context_factory = ssl_context_factory or ssl.create_default_context

    def send(
        self,
        smtp_config: SMTPConfig,
        sender: str,
        recipients: List[str],
        payload: bytes,
    ) -> None:
        """Send an assembled message via SMTP.

        In authenticated mode the credentials are only sent over a TLS
        connection, or to a server on the local host.

        Args:
            smtp_config: Host, port, credentials and anonymous flag
            sender: Envelope sender address
            recipients: Envelope recipient addresses
            payload: Raw message bytes

        Raises:
            TransmissionError: If connecting, authenticating or sending fails
        """
        host = smtp_config.host
        try:
            port = parse_port(smtp_config.port)
        except (TypeError, ValueError) as e:
            error_msg = f"Invalid SMTP port '{smtp_config.port}': {e}"
            logger.error(error_msg, extra={"event": "smtp.failed"})
            raise TransmissionError(error_msg) from e

        smtp = None
        try:
            logger.debug(f"Connecting to {host}:{port}")
            smtp = self.smtp_factory(host, port)
            smtp.ehlo()

            encrypted = False
            if smtp.has_extn("starttls"):
                logger.debug("Upgrading connection with STARTTLS")
                smtp.starttls(context=self.ssl_context_factory())
                smtp.ehlo()
                encrypted = True

            if smtp_config.anonymous:
                logger.debug("Anonymous mode, proceeding without auth")
            else:
                if not encrypted and host not in LOCAL_HOSTS:
                    raise TransmissionError(
                        f"refusing to authenticate to {host}: unencrypted connection"
                    )
                self._authenticate(smtp, smtp_config)

            refused = smtp.sendmail(sender, recipients, normalize_line_endings(payload))
            if refused:
                raise TransmissionError(
                    f"SMTP server refused recipients: {', '.join(sorted(refused))}"
                )

            logger.info(
                f"Message sent to {len(recipients)} recipient(s) via {host}:{port}",
                extra={
                    "event": "smtp.sent",
                    "smtp_host": host,
                    "recipient_count": len(recipients),
                    "anonymous": smtp_config.anonymous,
                },
            )

        except TransmissionError as e:
            logger.error(str(e), extra={"event": "smtp.failed"})
            raise
        except smtplib.SMTPException as e:
            error_msg = f"SMTP error during message delivery: {e}"
            logger.error(error_msg, extra={"event": "smtp.failed"})
            raise TransmissionError(error_msg) from e
        except OSError as e:
            error_msg = f"Network error during SMTP connection: {e}"
            logger.error(error_msg, extra={"event": "smtp.failed"})
            raise TransmissionError(error_msg) from e
        except Exception as e:
            error_msg = f"Unexpected error during SMTP delivery: {e}"
            logger.error(error_msg, extra={"event": "smtp.failed"})
            raise TransmissionError(error_msg) from e
        finally:
            # Always close connection
            if smtp is not None:
                try:
                    smtp.quit()
                except (smtplib.SMTPException, OSError) as e:
                    logger.warning(f"Error closing SMTP connection: {e}")

    def _authenticate(self, smtp: smtplib.SMTP, smtp_config: SMTPConfig) -> None:
        """Authenticate with the PLAIN mechanism only.

        SMTP.login() would pick CRAM-MD5 or LOGIN when the server prefers
        them; the resource always performs a PLAIN handshake.
        """
        if not smtp.has_extn("auth"):
            raise TransmissionError("SMTP server does not support AUTH")

        logger.debug(f"Authenticating as {smtp_config.username} with AUTH PLAIN")
        smtp.user = smtp_config.username
        smtp.password = smtp_config.password
        smtp.auth("PLAIN", smtp.auth_plain)
