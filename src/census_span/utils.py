"""
Utility functions for span identity, attribute encoding and time conversion.
"""

from typing import Any, Union
from datetime import datetime, timedelta, timezone
import json
import logging
import math
import secrets

from pydantic import BaseModel

from .exceptions import SerializationError

logger = logging.getLogger(__name__)

AttributeValue = Union[str, int, float, bool]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def generate_span_id() -> str:
    """Return 8 random bytes as 16 lowercase hex characters."""
    return secrets.token_hex(8)


def generate_trace_id() -> str:
    """Return 16 random bytes as 32 lowercase hex characters."""
    return secrets.token_hex(16)


def serialize_attribute_value(value: Any) -> AttributeValue:
    """
    Convert a value into something that can be stored as a span attribute.

    Strings, numbers and booleans are kept as they are. Everything else is
    encoded as compact JSON text, keeping mapping key order and non-ASCII
    characters.

    Args:
        value: Attribute value supplied by the caller

    Returns:
        The value itself, or its JSON text

    Raises:
        SerializationError: If the value has no JSON encoding, including NaN
            and infinite floats at any depth
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise SerializationError(f"Cannot store non-finite float attribute value {value!r}")

    if isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, BaseModel):
        value = value.model_dump(mode="json")

    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(
            f"Cannot serialize attribute value of type {type(value).__name__}: {e}"
        ) from e


def perf_time_to_datetime(time_origin_ms: float, perf_time_ms: float) -> datetime:
    """
    Convert a monotonic reading into an absolute UTC timestamp.

    Args:
        time_origin_ms: Epoch milliseconds of monotonic zero
        perf_time_ms: Monotonic reading in milliseconds

    Returns:
        Timezone-aware datetime, truncated to whole milliseconds
    """
    return EPOCH + timedelta(milliseconds=int(time_origin_ms + perf_time_ms))
