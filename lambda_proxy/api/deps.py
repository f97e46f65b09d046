"""
Dependency Injection for the proxy API.

Manage request handler dependencies using FastAPI Depends.
"""

from typing import Annotated

from fastapi import Depends, Request

from ..models.context import InboundRequest
from ..services.translator import RequestTranslator


# ==========================================
# 1. Service Accessors
# ==========================================


def get_translator(request: Request) -> RequestTranslator:
    return request.app.state.translator


# Service Dependency Type Aliases
TranslatorDep = Annotated[RequestTranslator, Depends(get_translator)]


# ==========================================
# 2. Request Resolution
# ==========================================


async def build_inbound_request(request: Request) -> InboundRequest:
    """
    Capture the parts of the FastAPI request that are forwarded to the function.

    Header names come from the raw ASGI scope so they keep the form the server
    received them in. Repeated headers and query parameters keep their last value.
    """
    headers = {
        name.decode("latin-1"): value.decode("latin-1") for name, value in request.headers.raw
    }
    query_params = {key: value for key, value in request.query_params.multi_items()}

    return InboundRequest(
        method=request.method,
        path=request.url.path,
        headers=headers,
        query_params=query_params,
        body=await request.body(),
    )


InboundRequestDep = Annotated[InboundRequest, Depends(build_inbound_request)]
