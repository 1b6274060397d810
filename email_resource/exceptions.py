"""Base exception shared by every stage of the out step.

Each package defines its own errors on top of ResourceError:
- config.exceptions: MissingArgumentError, MalformedInputError, ValidationError
- sources.exceptions: FileReadError
- mail.models: EmptyBodyRefusal, TransmissionError

The step runner catches ResourceError and turns it into a failed (or refused)
StepResult. Anything else is a bug and propagates.
"""


class ResourceError(Exception):
    """Base exception for all errors reported back to the CI runner."""

    pass
