"""
Span model for representing one unit of traced work inside a trace tree.
"""

from typing import Dict, List, Optional, Any, Mapping, Union
from datetime import datetime
import logging
from pydantic import BaseModel, Field, PrivateAttr

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
from .finished_span import FinishedSpan
from ..exceptions import InvalidStateError
from ..time_source import TimeSource, get_default_time_source
from ..utils import AttributeValue, generate_span_id, perf_time_to_datetime, serialize_attribute_value

logger = logging.getLogger(__name__)


class SpanOptions(BaseModel):
    """Options accepted when starting a child span."""
    name: str = Field("", description="Name of the child span")
    kind: SpanKind = Field(SpanKind.UNSPECIFIED, description="Kind of the child span")
    attributes: Dict[str, Any] = Field(default_factory=dict, description="Initial attributes")

    class Config:
        """Pydantic configuration."""
        extra = "allow"


class Span(BaseModel):
    """
    A mutable record of one traced operation.

    Wall-clock times, duration and the span context are never stored; they are
    derived from the perf-time fields and identifiers each time they are read.
    Ending a span does not freeze it: mutation stays legal afterwards.
    """
    id: str = Field(default_factory=generate_span_id, description="16 hex character span identifier")
    trace_id: str = Field("", description="32 hex character trace identifier")
    trace_state: str = Field("", description="Vendor-specific trace state")
    parent_span_id: str = Field("", description="Identifier of the parent span, empty for a root span")
    name: str = Field("", description="Name of the span")
    kind: SpanKind = Field(SpanKind.UNSPECIFIED, description="Kind of the span")
    status: Status = Field(default_factory=Status, description="Status of the span")
    sampled: bool = Field(True, description="Sampling flag exposed through the span context options")
    start_perf_time: Optional[float] = Field(None, description="Monotonic start time in milliseconds")
    end_perf_time: Optional[float] = Field(None, description="Monotonic end time in milliseconds")
    attributes: Dict[str, AttributeValue] = Field(default_factory=dict, description="Span attributes")
    annotations: List[Annotation] = Field(default_factory=list, description="Annotations in insertion order")
    message_events: List[MessageEvent] = Field(default_factory=list, description="Message events in insertion order")
    links: List[Link] = Field(default_factory=list, description="Links in insertion order")
    spans: List["Span"] = Field(default_factory=list, description="Child spans started from this span")

    _time_source: Optional[TimeSource] = PrivateAttr(None)

    def __init__(self, id: Optional[str] = None, *, time_source: Optional[TimeSource] = None, **data: Any):
        """
        Create a span.

        Args:
            id: Span identifier; a random one is generated when omitted
            time_source: Clock to read timestamps from; defaults to the process-wide source
            **data: Any other span field
        """
        if id is not None:
            data["id"] = id
        super().__init__(**data)
        if time_source is not None:
            self._time_source = time_source

    @property
    def time_source(self) -> TimeSource:
        """The span's own clock, or the process-wide default as of this read."""
        if self._time_source is not None:
            return self._time_source
        return get_default_time_source()

    # Lifecycle

    def start(self) -> None:
        """Record the start time, overwriting any earlier one."""
        self.start_perf_time = self.time_source.now()

    def end(self) -> None:
        """Record the end time unless the span has already ended."""
        if self.end_perf_time is not None:
            logger.debug(f"Span '{self.id}' already ended at {self.end_perf_time}; ignoring end()")
            return
        self.end_perf_time = self.time_source.now()

    def truncate(self) -> None:
        """Force the end time to now, whatever the span's prior end state."""
        if self.end_perf_time is not None:
            logger.debug(f"Truncating span '{self.id}' previously ended at {self.end_perf_time}")
        self.end_perf_time = self.time_source.now()

    # Derived state

    @property
    def ended(self) -> bool:
        return self.end_perf_time is not None

    @property
    def start_time(self) -> datetime:
        if self.start_perf_time is None:
            raise InvalidStateError(f"Span '{self.id}' has not started")
        return perf_time_to_datetime(self.time_source.time_origin(), self.start_perf_time)

    @property
    def end_time(self) -> datetime:
        if self.end_perf_time is None:
            raise InvalidStateError(f"Span '{self.id}' has not ended")
        return perf_time_to_datetime(self.time_source.time_origin(), self.end_perf_time)

    @property
    def duration(self) -> float:
        """Elapsed milliseconds between start and end."""
        if self.end_perf_time is None:
            raise InvalidStateError(f"Span '{self.id}' has not ended; duration is undefined")
        if self.start_perf_time is None:
            raise InvalidStateError(f"Span '{self.id}' has not started; duration is undefined")
        return self.end_perf_time - self.start_perf_time

    @property
    def is_root_span(self) -> bool:
        return self.parent_span_id == ""

    @property
    def number_of_children(self) -> int:
        return len(self.spans)

    @property
    def span_context(self) -> SpanContext:
        return SpanContext(
            trace_id=self.trace_id,
            span_id=self.id,
            options=1 if self.sampled else 0,
            trace_state=self.trace_state,
        )

    # Mutation

    def add_attribute(self, key: str, value: Any) -> None:
        """
        Set an attribute, replacing any earlier value for the key.

        Args:
            key: Attribute name
            value: Primitive value, or any JSON-encodable value to store as JSON text

        Raises:
            SerializationError: If the value is a non-finite float or cannot be JSON encoded
        """
        self.attributes[key] = serialize_attribute_value(value)

    def add_link(self, trace_id: str, span_id: str, type: LinkType,
                 attributes: Optional[Dict[str, Any]] = None) -> None:
        self.links.append(Link(trace_id=trace_id, span_id=span_id, type=type, attributes=attributes or {}))

    def add_annotation(self, description: str, attributes: Optional[Dict[str, Any]] = None,
                       timestamp: Optional[float] = None) -> None:
        """
        Append an annotation.

        Args:
            description: Free-text note
            attributes: Annotation attributes
            timestamp: Monotonic time in milliseconds; defaults to now
        """
        if timestamp is None:
            timestamp = self.time_source.now()
        self.annotations.append(
            Annotation(description=description, attributes=attributes or {}, timestamp=timestamp)
        )

    def add_message_event(self, type: MessageEventType, id: int, timestamp: Optional[float] = None,
                          uncompressed_size: Optional[int] = None,
                          compressed_size: Optional[int] = None) -> None:
        """
        Append a message event.

        Args:
            type: Whether the message was sent or received
            id: Message identifier
            timestamp: Monotonic time in milliseconds; defaults to now
            uncompressed_size: Uncompressed payload size in bytes, if known
            compressed_size: Compressed payload size in bytes, if known
        """
        if timestamp is None:
            timestamp = self.time_source.now()
        self.message_events.append(
            MessageEvent(
                type=type,
                id=id,
                timestamp=timestamp,
                uncompressed_size=uncompressed_size,
                compressed_size=compressed_size,
            )
        )

    def set_status(self, code: int, message: Optional[str] = None) -> None:
        self.status = Status(code=code, message=message)

    # Tree

    def start_child_span(self, options: Union[SpanOptions, Mapping[str, Any], str, None] = None,
                         kind: Optional[SpanKind] = None) -> "Span":
        """
        Create a child span and record it under this span.

        The child inherits the trace id, trace state, sampling flag and time
        source. It is not started; the caller owns its lifecycle.

        Args:
            options: SpanOptions, a mapping of the same keys, or just the child's name
            kind: Kind of the child, overriding the one in options

        Returns:
            The new child span

        Raises:
            TypeError: If options is of an unsupported type
        """
        if options is None:
            options = SpanOptions()
        elif isinstance(options, str):
            options = SpanOptions(name=options)
        elif isinstance(options, Mapping):
            options = SpanOptions.model_validate(dict(options))
        elif not isinstance(options, SpanOptions):
            raise TypeError(f"Unsupported span options type: {type(options).__name__}")

        child = Span(
            trace_id=self.trace_id,
            trace_state=self.trace_state,
            parent_span_id=self.id,
            name=options.name,
            kind=kind if kind is not None else options.kind,
            sampled=self.sampled,
            time_source=self._time_source,
        )
        for key, value in options.attributes.items():
            child.add_attribute(key, value)

        self.spans.append(child)
        logger.debug(f"Started child span '{child.id}' ({child.name}) under '{self.id}'")
        return child

    def all_descendants(self) -> List["Span"]:
        """Return every span below this one, depth-first in creation order."""
        descendants = []
        for child in self.spans:
            descendants.append(child)
            descendants.extend(child.all_descendants())
        return descendants

    # Export

    def to_finished(self) -> FinishedSpan:
        """
        Take a read-only snapshot for exporters.

        Returns:
            FinishedSpan built from the current field values

        Raises:
            InvalidStateError: If the span has not both started and ended
        """
        if not self.ended:
            raise InvalidStateError(f"Span '{self.id}' has not ended and cannot be exported")
        return FinishedSpan(
            id=self.id,
            trace_id=self.trace_id,
            trace_state=self.trace_state,
            parent_span_id=self.parent_span_id,
            name=self.name,
            kind=self.kind,
            status=self.status.model_copy(),
            start_time=self.start_time,
            end_time=self.end_time,
            duration=self.duration,
            attributes=dict(self.attributes),
            annotations=[a.model_copy(deep=True) for a in self.annotations],
            message_events=[m.model_copy() for m in self.message_events],
            links=[link.model_copy(deep=True) for link in self.links],
            span_context=self.span_context,
        )
