"""
Where: lambda_proxy/lifecycle.py
What: Proxy startup/shutdown orchestration for shared resources.
Why: Keep main.py focused on app assembly while preserving lifecycle behavior.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from .config import ProxyConfig
from .core.aws_client import LambdaClientFactory
from .core.event_builder import ProxyEventBuilder
from .services.lambda_invoker import LambdaInvoker
from .services.translator import RequestTranslator

logger = logging.getLogger("lambda_proxy.main")


@asynccontextmanager
async def manage_lifespan(app: FastAPI, proxy_config: ProxyConfig) -> AsyncIterator[None]:
    """Manage application lifecycle."""
    client = LambdaClientFactory(proxy_config).create_client()

    try:
        app.state.translator = RequestTranslator(
            LambdaInvoker(client),
            ProxyEventBuilder(),
            strict_json_errors=proxy_config.STRICT_JSON_ERRORS,
        )

        logger.info(
            "Proxy initialized with shared Lambda client (region=%s)", proxy_config.AWS_REGION
        )
        yield
    finally:
        logger.info("Proxy shutting down, closing Lambda client.")
        client.close()
