"""
Read-only view of an ended span, handed to exporters.
"""

from typing import Dict, List
from datetime import datetime
from pydantic import BaseModel, Field

from .events import Annotation, Link, MessageEvent, SpanContext, SpanKind, Status
from ..utils import AttributeValue


class FinishedSpan(BaseModel):
    """Snapshot of an ended span with wall-clock times and duration resolved."""
    id: str = Field(..., description="Span identifier")
    trace_id: str = Field(..., description="Trace identifier")
    trace_state: str = Field("", description="Vendor-specific trace state")
    parent_span_id: str = Field("", description="Identifier of the parent span, empty for a root span")
    name: str = Field(..., description="Name of the span")
    kind: SpanKind = Field(..., description="Kind of the span")
    status: Status = Field(default_factory=Status, description="Status of the span")
    start_time: datetime = Field(..., description="Start time of the span")
    end_time: datetime = Field(..., description="End time of the span")
    duration: float = Field(..., description="Duration of the span in milliseconds")
    attributes: Dict[str, AttributeValue] = Field(default_factory=dict, description="Span attributes")
    annotations: List[Annotation] = Field(default_factory=list, description="Annotations")
    message_events: List[MessageEvent] = Field(default_factory=list, description="Message events")
    links: List[Link] = Field(default_factory=list, description="Links")
    span_context: SpanContext = Field(..., description="Identifying projection of the span")

    class Config:
        """Pydantic configuration."""
        frozen = True

    @property
    def is_root_span(self) -> bool:
        return self.parent_span_id == ""
