"""Orchestration of one out-step invocation."""

from .models import MetadataItem, OutputRecord, StepResult, VersionStamp
from .runner import OutStep

__all__ = [
    "OutStep",
    "OutputRecord",
    "MetadataItem",
    "VersionStamp",
    "StepResult",
]
