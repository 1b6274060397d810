"""Orchestration of the out step.

One invocation runs the stages in order: validate the request, read and
resolve the message files, build the output record, assemble the message,
check the empty-body guard, then transmit.
"""

from datetime import datetime
from pathlib import Path
from typing import Callable, Mapping, Optional, Union

from email_resource.config.environment import load_build_tokens, placeholder_for
from email_resource.config.exceptions import MissingArgumentError
from email_resource.config.loader import load_request
from email_resource.exceptions import ResourceError
from email_resource.logging import get_logger
from email_resource.logging.context import log_context
from email_resource.mail.assembler import assemble_message
from email_resource.mail.models import EmptyBodyRefusal
from email_resource.mail.smtp_client import SMTPClient
from email_resource.sources.reader import SourceReader, resolve_message
from email_resource.utils.timestamps import utc_now

from .models import OutputRecord, StepResult

logger = get_logger(__name__, component="pipeline")


class OutStep:
    """
    Sends one email notification for a build.

    Every call to execute() is independent: build tokens are captured from
    the environment at the start of the call and nothing is kept between
    calls.
    """

    def __init__(
        self,
        smtp_client: Optional[SMTPClient] = None,
        environ: Optional[Mapping[str, str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize the step.

        Args:
            smtp_client: SMTP client instance (creates default if None)
            environ: Environment mapping for build tokens (os.environ if None)
            clock: Source of the output record timestamp (utc_now if None)
        """
        self.smtp_client = smtp_client or SMTPClient()
        self.environ = environ
        self.clock = clock or utc_now

    def execute(
        self,
        sources_root: Optional[Union[str, Path]],
        version: str,
        raw_input: Union[bytes, str],
    ) -> StepResult:
        """
        Run the step and capture its outcome.

        Args:
            sources_root: Build-sources directory
            version: Version string reported in the output metadata
            raw_input: JSON request read from stdin

        Returns:
            StepResult: "sent" with the payload, "refused" with the payload
            and an EmptyBodyRefusal, or "failed" with the error
        """
        try:
            payload = self.run(sources_root, version, raw_input)
        except EmptyBodyRefusal as e:
            logger.warning(
                "Message not sent: empty body",
                extra={"event": "mail.refused", "reason": "empty_body"},
            )
            return StepResult.refused(e.payload, e)
        except ResourceError as e:
            logger.error(
                f"Out step failed: {e}",
                extra={"event": "step.failed", "error_type": type(e).__name__},
            )
            return StepResult.failed(e)

        return StepResult.sent(payload)

    def run(
        self,
        sources_root: Optional[Union[str, Path]],
        version: str,
        raw_input: Union[bytes, str],
    ) -> str:
        """
        Run the step, raising on any error.

        Returns:
            Serialized OutputRecord

        Raises:
            MissingArgumentError: If sources_root is empty
            MalformedInputError: If the request cannot be decoded
            ValidationError: If a required field is missing
            FileReadError: If a referenced file cannot be read
            EmptyBodyRefusal: If the body is empty and send_empty_body is false
            TransmissionError: If SMTP delivery fails
        """
        tokens = load_build_tokens(self.environ)

        if not sources_root:
            raise MissingArgumentError()

        request = load_request(raw_input)

        with log_context(
            build_id=tokens[placeholder_for("BUILD_ID")],
            pipeline=tokens[placeholder_for("BUILD_PIPELINE_NAME")],
            job=tokens[placeholder_for("BUILD_JOB_NAME")],
        ):
            logger.info(
                f"Preparing notification via {request.source.smtp.address}",
                extra={"event": "step.started", "sources_root": str(sources_root)},
            )

            reader = SourceReader(sources_root, tokens)
            message = resolve_message(request, reader)

            record = OutputRecord.build(
                smtp_host=request.source.smtp.host,
                subject=message.subject,
                version=version,
                time=self.clock(),
            )
            payload = record.to_json()

            data = assemble_message(request.source.from_, message)

            if not request.params.send_empty_body and not message.has_body():
                raise EmptyBodyRefusal(payload)

            self.smtp_client.send(
                request.source.smtp,
                request.source.from_,
                message.recipients,
                data,
            )

            logger.info(
                "Out step completed",
                extra={"event": "step.completed", "subject": message.subject},
            )

        return payload
