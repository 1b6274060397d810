"""Request schema models using Pydantic.

The models only describe the shape of the JSON the CI runner sends on stdin.
Every value is optional at this level; presence of required values is checked
separately by validate_request() so that missing fields are reported one at a
time, in a fixed order.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, StrictBool, field_validator


class SMTPConfig(BaseModel):
    """Connection settings for the SMTP server."""

    host: Optional[str] = Field(None, description="SMTP server hostname")
    port: Optional[str] = Field(None, description="SMTP server port, as a string")
    username: Optional[str] = Field(None, description="Username for authenticated mode")
    password: Optional[str] = Field(None, description="Password for authenticated mode")
    anonymous: StrictBool = Field(False, description="Send without authenticating")

    @field_validator("anonymous", mode="before")
    @classmethod
    def null_is_false(cls, v):
        """Treat an explicit null like an omitted flag."""
        return False if v is None else v

    @property
    def address(self) -> str:
        """host:port pair used in log records."""
        return f"{self.host}:{self.port}"


class SourceConfig(BaseModel):
    """The `source` block: server, sender and static recipients."""

    smtp: SMTPConfig = Field(default_factory=SMTPConfig)
    from_: Optional[str] = Field(None, alias="from", description="Sender address")
    to: Optional[List[str]] = Field(None, description="Static recipient list")

    @field_validator("smtp", mode="before")
    @classmethod
    def null_is_empty(cls, v):
        return {} if v is None else v

    model_config = {"populate_by_name": True}


class ParamsConfig(BaseModel):
    """The `params` block: paths of the files making up the message."""

    subject: Optional[str] = Field(None, description="Path to the subject file")
    body: Optional[str] = Field(None, description="Path to the body file")
    headers: Optional[str] = Field(None, description="Path to a file of extra headers")
    to: Optional[str] = Field(
        None, description="Path to a file of comma-separated recipients"
    )
    send_empty_body: StrictBool = Field(
        False, description="Send even when the resolved body is empty"
    )

    @field_validator("send_empty_body", mode="before")
    @classmethod
    def null_is_false(cls, v):
        """Treat an explicit null like an omitted flag."""
        return False if v is None else v


class OutRequest(BaseModel):
    """Root object of the JSON document read from stdin."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    params: ParamsConfig = Field(default_factory=ParamsConfig)

    @field_validator("source", "params", mode="before")
    @classmethod
    def null_is_empty(cls, v):
        return {} if v is None else v

    def static_recipients(self) -> List[str]:
        """Recipients listed directly under source.to."""
        return list(self.source.to or [])
