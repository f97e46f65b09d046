"""
Request Translator - Service Layer

Standardizes the flow: InboundRequest -> Event -> Invoke -> ProxyResult.
Every failure is returned as a ProxyResult carrying an ErrorKind; nothing
raised by the invocation path leaves handle().
"""

import json
import logging
from typing import Optional

from lambda_proxy.core.event_builder import EventBuilder
from lambda_proxy.core.exceptions import FunctionNotFoundError, LambdaInvokeError
from lambda_proxy.models.context import InboundRequest
from lambda_proxy.models.result import ErrorKind, ProxyResult
from lambda_proxy.services.lambda_invoker import LambdaInvoker

logger = logging.getLogger("lambda_proxy.translator")

FUNCTION_NAME_HEADER = "x-lambda-function-name"
MISSING_HEADER_MESSAGE = f"Must provide {FUNCTION_NAME_HEADER} header"
# Legacy body, not valid JSON.
LEGACY_MISSING_HEADER_BODY = "{'Error':'" + MISSING_HEADER_MESSAGE + "'}"


def missing_header_body(strict_json: bool = False) -> str:
    if strict_json:
        return json.dumps({"Error": MISSING_HEADER_MESSAGE})
    return LEGACY_MISSING_HEADER_BODY


def resolve_function_name(request: InboundRequest) -> Optional[str]:
    """Case-insensitive lookup of the target function header. None only when absent."""
    for name, value in request.headers.items():
        if name.lower() == FUNCTION_NAME_HEADER:
            return value
    return None


class RequestTranslator:
    """
    Translates one HTTP request into one synchronous Lambda invocation.

    Holds no per-request state; a single instance serves all requests.
    """

    def __init__(
        self,
        invoker: LambdaInvoker,
        event_builder: EventBuilder,
        strict_json_errors: bool = False,
    ):
        self.invoker = invoker
        self.event_builder = event_builder
        self.strict_json_errors = strict_json_errors

    def handle(self, request: InboundRequest) -> ProxyResult:
        function_name = resolve_function_name(request)
        if function_name is None:
            logger.info(
                f"Rejected {request.method} {request.path}: missing {FUNCTION_NAME_HEADER}"
            )
            return ProxyResult(
                status_code=400,
                headers={"Content-Type": "application/json"},
                body=missing_header_body(self.strict_json_errors),
                error_kind=ErrorKind.CLIENT_INPUT,
                error=MISSING_HEADER_MESSAGE,
            )

        logger.info(f"Processing request for {function_name} ({request.method} {request.path})")

        try:
            event = self.event_builder.build(request)
            payload = json.dumps(event).encode("utf-8")
            result = self.invoker.invoke_function(function_name, payload)
        except FunctionNotFoundError as e:
            return self._failure(404, ErrorKind.REMOTE_NOT_FOUND, str(e))
        except LambdaInvokeError as e:
            return self._failure(500, ErrorKind.REMOTE_INVOCATION_FAILURE, str(e))
        except Exception as e:
            logger.exception(f"Unexpected error in request translator: {e}")
            return self._failure(500, ErrorKind.REMOTE_INVOCATION_FAILURE, str(e))

        if result.is_logic_error:
            logger.warning(
                f"Function {function_name} returned error: {result.function_error}",
                extra={"function_name": function_name, "remote_status": result.status_code},
            )
            return ProxyResult(
                status_code=500,
                headers=result.headers,
                body=result.payload,
                error_kind=ErrorKind.REMOTE_FUNCTION_ERROR,
                error=result.function_error,
            )

        return ProxyResult(
            status_code=result.status_code,
            headers=result.headers,
            body=result.payload,
        )

    def _failure(self, status_code: int, kind: ErrorKind, message: str) -> ProxyResult:
        return ProxyResult(status_code=status_code, body=message, error_kind=kind, error=message)
