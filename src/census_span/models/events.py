"""
Value types recorded on spans: enumerations, annotations, links, message events,
status and the span context projection.
"""

from enum import Enum
from typing import Dict, Optional, Any
from pydantic import BaseModel, Field


class SpanKind(str, Enum):
    """Role of a span in a remote call."""
    UNSPECIFIED = "UNSPECIFIED"
    SERVER = "SERVER"
    CLIENT = "CLIENT"


class LinkType(str, Enum):
    """Relationship between a span and the span a link points to."""
    UNSPECIFIED = "UNSPECIFIED"
    CHILD_LINKED_SPAN = "CHILD_LINKED_SPAN"
    PARENT_LINKED_SPAN = "PARENT_LINKED_SPAN"


class MessageEventType(str, Enum):
    """Direction of a message event."""
    UNSPECIFIED = "UNSPECIFIED"
    SENT = "SENT"
    RECEIVED = "RECEIVED"


class Annotation(BaseModel):
    """A timestamped text note attached to a span."""
    description: str = Field(..., description="Free-text description")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Annotation attributes")
    timestamp: float = Field(..., description="Monotonic time in milliseconds")


class Link(BaseModel):
    """A reference from a span to another span, possibly in another trace."""
    trace_id: str = Field(..., description="Trace identifier of the linked span")
    span_id: str = Field(..., description="Identifier of the linked span")
    type: LinkType = Field(..., description="Relationship to the linked span")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Link attributes")


class MessageEvent(BaseModel):
    """A message sent or received while the span was active."""
    type: MessageEventType = Field(..., description="Whether the message was sent or received")
    id: int = Field(..., description="Message identifier, unique within the span per direction")
    timestamp: float = Field(..., description="Monotonic time in milliseconds")
    uncompressed_size: Optional[int] = Field(None, description="Uncompressed payload size in bytes")
    compressed_size: Optional[int] = Field(None, description="Compressed payload size in bytes")


class Status(BaseModel):
    """Final status of a span. Code 0 means OK."""
    code: int = Field(0, description="Canonical status code")
    message: Optional[str] = Field(None, description="Developer-facing error message")


class SpanContext(BaseModel):
    """Identifying projection of a span, as passed across boundaries."""
    trace_id: str = Field(..., description="Trace identifier")
    span_id: str = Field(..., description="Span identifier")
    options: int = Field(..., description="Trace options bit field; 1 means sampled")
    trace_state: str = Field("", description="Vendor-specific trace state")

    class Config:
        """Pydantic configuration."""
        frozen = True
