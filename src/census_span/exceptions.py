"""
Exceptions raised by the span model.
"""


class SpanModelError(Exception):
    """Base class for errors raised by census_span."""


class InvalidStateError(SpanModelError):
    """Raised when a derived value is read before the span reached the state it needs."""


class SerializationError(SpanModelError):
    """Raised when an attribute value cannot be encoded as JSON text."""
