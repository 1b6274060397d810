"""Reading message files from the build sources with token substitution.

Paths in params are relative to the build-sources root handed to the step
unless they are absolute. File contents have build-metadata placeholders
(``${BUILD_ID}`` and friends) replaced before use.
"""

import os
from pathlib import Path
from typing import List, Mapping, Union

from email_resource.config.models import OutRequest
from email_resource.logging import get_logger
from email_resource.utils.tokens import substitute_tokens

from .exceptions import FileReadError
from .models import ResolvedMessage

logger = get_logger(__name__, component="sources")


class SourceReader:
    """Reads files under a build-sources root and substitutes build tokens."""

    def __init__(self, sources_root: Union[str, Path], tokens: Mapping[str, str]):
        """Initialize the reader.

        Args:
            sources_root: Directory relative paths are resolved against
            tokens: Placeholder -> value mapping captured for this invocation
        """
        self.sources_root = Path(sources_root)
        self.tokens = tokens

    def resolve_path(self, path: str) -> Path:
        """Return path unchanged if absolute, else joined under the sources root."""
        if os.path.isabs(path):
            return Path(path)
        return self.sources_root / path

    def read(self, path: str) -> str:
        """Read a file and substitute build tokens in its contents.

        Args:
            path: File path from params

        Returns:
            File contents with placeholders replaced

        Raises:
            FileReadError: If the file cannot be read or is not valid UTF-8
        """
        resolved = self.resolve_path(path)
        try:
            content = resolved.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                f"Failed to read {resolved}: {e}",
                extra={"event": "sources.read_failed", "path": str(resolved)},
            )
            raise FileReadError(str(resolved), e) from e

        logger.debug(
            f"Read {resolved}",
            extra={"event": "sources.file_read", "path": str(resolved), "chars": len(content)},
        )
        return substitute_tokens(content, self.tokens)

    def read_subject(self, path: str) -> str:
        return self.read(path).strip("\n")

    def read_headers(self, path: str) -> str:
        return self.read(path).strip("\n")

    def read_body(self, path: str) -> str:
        return self.read(path)

    def read_recipients(self, path: str) -> List[str]:
        """Read a comma-separated recipient file.

        Each entry is stripped of surrounding whitespace; blank entries
        (e.g. from a trailing comma) are skipped. File order is kept.
        """
        content = self.read(path)
        recipients = []
        for entry in content.split(","):
            address = entry.strip()
            if address:
                recipients.append(address)
        return recipients


def resolve_message(request: OutRequest, reader: SourceReader) -> ResolvedMessage:
    """
    Read every file referenced by the request and build the message parts.

    The subject is always read; headers, body and the recipient file only
    when their paths are set. Recipients from source.to come first, followed
    by entries from the params.to file.

    Args:
        request: Validated request
        reader: Reader bound to the build-sources root

    Returns:
        ResolvedMessage ready for assembly

    Raises:
        FileReadError: If any referenced file cannot be read
    """
    params = request.params

    subject = reader.read_subject(params.subject)

    headers = ""
    if params.headers:
        headers = reader.read_headers(params.headers)

    body = ""
    if params.body:
        body = reader.read_body(params.body)

    recipients = request.static_recipients()
    if params.to:
        recipients.extend(reader.read_recipients(params.to))

    logger.info(
        f"Resolved message for {len(recipients)} recipient(s)",
        extra={
            "event": "sources.message_resolved",
            "recipient_count": len(recipients),
            "has_headers": bool(headers),
            "body_chars": len(body),
        },
    )

    return ResolvedMessage(
        subject=subject,
        headers=headers,
        body=body,
        recipients=recipients,
    )
