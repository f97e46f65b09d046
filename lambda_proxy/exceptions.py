"""
Where: lambda_proxy/exceptions.py
What: Exception handler registration for the proxy app.
Why: Keep error handling setup isolated from route and lifecycle concerns.
"""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.exceptions import global_exception_handler, http_exception_handler


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(Exception, global_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
