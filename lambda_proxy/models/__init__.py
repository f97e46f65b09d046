"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .aws_v1 import InvocationEvent
from .context import InboundRequest
from .result import ErrorKind, InvocationResult, ProxyResult

__all__ = [
    "ErrorKind",
    "InboundRequest",
    "InvocationEvent",
    "InvocationResult",
    "ProxyResult",
]
