"""
Invocation result models.

Standardizes the output of the Lambda invocation and of the translator.
"""

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, Field


class InvocationResult(BaseModel):
    """
    Raw outcome of a synchronous Lambda Invoke call.

    headers are the HTTP headers of the Invoke API response, not the ones
    the function may have put into its own payload.
    """

    status_code: int
    payload: str = ""
    headers: Dict[str, str] = Field(default_factory=dict)
    function_error: Optional[str] = None

    @property
    def is_logic_error(self) -> bool:
        """Returns True if the function raised instead of returning (X-Amz-Function-Error)."""
        return self.function_error is not None


class ErrorKind(str, Enum):
    CLIENT_INPUT = "ClientInputError"
    REMOTE_NOT_FOUND = "RemoteNotFound"
    REMOTE_INVOCATION_FAILURE = "RemoteInvocationFailure"
    REMOTE_FUNCTION_ERROR = "RemoteFunctionError"


class ProxyResult(BaseModel):
    """
    Outcome of translating one inbound request.

    Failures are carried in error_kind/error instead of being raised, so the
    HTTP layer only has to copy status, headers and body.
    """

    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error_kind is None
