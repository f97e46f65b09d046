"""
Lambda Proxy - HTTP front end for synchronous Lambda invocation

Forwards requests on /function to the Lambda function named by the
x-lambda-function-name header and relays the invocation result.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from .api.deps import InboundRequestDep, TranslatorDep
from .config import config
from .core.logging_config import setup_logging
from .core.utils import relay_headers
from .exceptions import register_exception_handlers
from .lifecycle import manage_lifespan
from .middleware import trace_propagation_middleware

# Logger setup
setup_logging()
logger = logging.getLogger("lambda_proxy.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with manage_lifespan(app, config):
        yield


app = FastAPI(title="Lambda Proxy", version="1.0.0", lifespan=lifespan, root_path=config.root_path)

app.middleware("http")(trace_propagation_middleware)
register_exception_handlers(app)


# ===========================================
# Endpoint definitions.
# ===========================================


@app.get("/healthcheck", response_class=PlainTextResponse)
async def healthcheck():
    """Liveness probe. Never touches the Lambda service."""
    return "OK"


@app.api_route("/function", methods=["GET", "PUT", "POST", "DELETE"])
async def function_proxy(inbound: InboundRequestDep, translator: TranslatorDep):
    """
    Translate the request into a RequestResponse invocation of the function
    named by x-lambda-function-name and relay the result.
    """
    # boto3 blocks; keep it off the event loop.
    result = await run_in_threadpool(translator.handle, inbound)

    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=relay_headers(result.headers),
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.bind_host, port=config.bind_port, log_config=None)
