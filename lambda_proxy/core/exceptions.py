"""
Custom exception classes.

Represent errors related to Lambda invocation. str(exc) is always the text of
the underlying failure so it can be relayed to the caller unchanged.
"""

import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger("lambda_proxy.exceptions")


class LambdaInvokeError(Exception):
    """Base exception class for Lambda invocation."""

    def __init__(self, function_name: str, cause: Exception):
        self.function_name = function_name
        self.cause = cause
        super().__init__(str(cause))


class FunctionNotFoundError(LambdaInvokeError):
    """Raised when the Lambda service reports that the function does not exist."""


class LambdaExecutionError(LambdaInvokeError):
    """Raised on any other failure talking to the Lambda service."""


# ===========================================
# Exception Handlers
# ===========================================


async def global_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler for unhandled exceptions.
    """
    logger.error(
        f"Global exception handler caught: {exc}",
        exc_info=True,
        extra={
            "path": request.url.path,
            "method": request.method,
        },
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error", "detail": str(exc)},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Handler for HTTPException.
    """
    return JSONResponse(
        status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers
    )

