"""Data models for the step's output record and result."""

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, field_serializer

from email_resource.exceptions import ResourceError
from email_resource.utils.timestamps import format_rfc3339


class VersionStamp(BaseModel):
    """The `version` object reported to the CI runner."""

    time: datetime

    @field_serializer("time")
    def serialize_time(self, value: datetime) -> str:
        return format_rfc3339(value)


class MetadataItem(BaseModel):
    """One name/value pair shown by the CI runner next to the build output."""

    name: str
    value: str


class OutputRecord(BaseModel):
    """JSON document printed on stdout after the step runs."""

    version: VersionStamp
    metadata: List[MetadataItem]

    @classmethod
    def build(cls, smtp_host: str, subject: str, version: str, time: datetime) -> "OutputRecord":
        """Build the record with metadata in the order smtp_host, subject, version."""
        return cls(
            version=VersionStamp(time=time),
            metadata=[
                MetadataItem(name="smtp_host", value=smtp_host),
                MetadataItem(name="subject", value=subject),
                MetadataItem(name="version", value=version),
            ],
        )

    def metadata_value(self, name: str) -> Optional[str]:
        """Return the value of a metadata entry, or None if absent."""
        for item in self.metadata:
            if item.name == name:
                return item.value
        return None

    def to_json(self) -> str:
        return self.model_dump_json()


@dataclass
class StepResult:
    """Outcome of one invocation of the out step.

    Three variants, distinguished by status:
    - "sent": message delivered; payload set, error None
    - "refused": empty body not sent; payload AND error set
    - "failed": any other error; payload None, error set

    Attributes:
        status: "sent", "refused" or "failed"
        payload: Serialized OutputRecord, when one was produced
        error: The error that stopped the step, if any
    """

    status: str
    payload: Optional[str] = None
    error: Optional[ResourceError] = None

    @classmethod
    def sent(cls, payload: str) -> "StepResult":
        return cls(status="sent", payload=payload)

    @classmethod
    def refused(cls, payload: str, error: ResourceError) -> "StepResult":
        return cls(status="refused", payload=payload, error=error)

    @classmethod
    def failed(cls, error: ResourceError) -> "StepResult":
        return cls(status="failed", error=error)

    def is_success(self) -> bool:
        """Check if the message was delivered.

        Returns:
            True if status is "sent", False otherwise
        """
        return self.status == "sent"

    def exit_code(self) -> int:
        return 0 if self.is_success() else 1
