"""
census_span - the in-process span model of a distributed-tracing client.

This package provides:
- A mutable Span record with random identity and a monotonic time base
- Parent/child trace tree construction
- Attributes, annotations, links and message events attached to spans
- A read-only FinishedSpan view for exporters
- An injectable time source so timestamps can be controlled in tests
"""

__version__ = "0.1.0"

from .models import (
    Span,
    SpanOptions,
    FinishedSpan,
    Annotation,
    Link,
    LinkType,
    MessageEvent,
    MessageEventType,
    SpanContext,
    SpanKind,
    Status,
)
from .exceptions import SpanModelError, InvalidStateError, SerializationError
from .time_source import (
    TimeSource,
    PerformanceTimeSource,
    get_default_time_source,
    set_default_time_source,
)

__all__ = [
    "Span",
    "SpanOptions",
    "FinishedSpan",
    # Events
    "Annotation",
    "Link",
    "MessageEvent",
    "Status",
    "SpanContext",
    "SpanKind",
    "LinkType",
    "MessageEventType",
    # Errors
    "SpanModelError",
    "InvalidStateError",
    "SerializationError",
    # Time
    "TimeSource",
    "PerformanceTimeSource",
    "get_default_time_source",
    "set_default_time_source",
]
