"""
Core logic package.

Provides event building, client construction and error types.
"""

from .aws_client import LambdaClientFactory
from .event_builder import EventBuilder, ProxyEventBuilder
from .exceptions import FunctionNotFoundError, LambdaExecutionError, LambdaInvokeError

__all__ = [
    "LambdaClientFactory",
    "EventBuilder",
    "ProxyEventBuilder",
    "FunctionNotFoundError",
    "LambdaExecutionError",
    "LambdaInvokeError",
]
