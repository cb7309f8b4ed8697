"""
Core data models for the in-process span tree.
"""

from .span import Span, SpanOptions
from .finished_span import FinishedSpan
from .events import (
    Annotation,
    Link,
    LinkType,
    MessageEvent,
    MessageEventType,
    SpanContext,
    SpanKind,
    Status,
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
    # Enums
    "SpanKind",
    "LinkType",
    "MessageEventType",
]
