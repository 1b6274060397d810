"""Data models for message content resolved from the build sources."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ResolvedMessage:
    """Message parts after file reading and token substitution.

    Attributes:
        subject: Subject line, leading/trailing newlines removed
        headers: Extra header block, leading/trailing newlines removed ("" if none)
        body: Body text exactly as read
        recipients: source.to entries followed by entries from the params.to file
    """

    subject: str
    headers: str = ""
    body: str = ""
    recipients: List[str] = field(default_factory=list)

    def has_body(self) -> bool:
        return len(self.body) > 0
