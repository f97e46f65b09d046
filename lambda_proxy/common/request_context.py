"""
RequestContext management.
Use ContextVar to share the trace and request ids with log records.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

from .trace import TraceId


_trace_id_var: ContextVar[Optional[str]] = ContextVar("trace_id", default=None)
_request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_trace_id() -> Optional[str]:
    """Get the current Trace ID."""
    return _trace_id_var.get()


def get_request_id() -> Optional[str]:
    """Get the current Request ID."""
    return _request_id_var.get()


def generate_request_id() -> str:
    """
    Generate and set a new Request ID (UUID) for the current context.
    """
    new_id = str(uuid.uuid4())
    _request_id_var.set(new_id)
    return new_id


def set_trace_id(trace_id_str: str) -> str:
    """
    Set the Trace ID.

    Args:
        trace_id_str: X-Amzn-Trace-Id header string

    Returns:
        The normalized Trace ID string that was set

    Raises:
        ValueError: if the header cannot be parsed
    """
    trace = TraceId.parse(trace_id_str)
    _trace_id_var.set(str(trace))
    return str(trace)


def clear_trace_id() -> None:
    """Clear both ids from the current context."""
    _trace_id_var.set(None)
    _request_id_var.set(None)
