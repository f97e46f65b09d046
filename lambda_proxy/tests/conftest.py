import io
import os

import boto3
import httpx
import pytest
import pytest_asyncio
from botocore.response import StreamingBody

# Config and logging are initialized at import time, so set env at top level.
os.environ.setdefault("LOG_CONFIG_PATH", "/tmp/lambda-proxy-missing-logging.yml")
os.environ.setdefault("AWS_REGION", "us-east-1")

TEST_REGION = "us-east-1"
TEST_ACCOUNT_ID = "123456789012"


def make_payload(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


def make_invoke_response(
    payload: bytes, status_code: int = 200, function_error=None, headers=None
):
    """Shape of a boto3 Lambda invoke() response."""
    response = {
        "StatusCode": status_code,
        "Payload": make_payload(payload),
        "ResponseMetadata": {
            "HTTPStatusCode": status_code,
            "HTTPHeaders": headers
            or {
                "date": "Mon, 19 Oct 2026 07:00:00 GMT",
                "content-type": "application/json",
                "x-amzn-requestid": "7f3c1c2e-0000-4000-8000-000000000000",
                "x-amz-executed-version": "$LATEST",
            },
        },
    }
    if function_error:
        response["FunctionError"] = function_error
    return response


@pytest.fixture
def lambda_client():
    """Real botocore Lambda client; pair with botocore.stub.Stubber, never hits AWS."""
    client = boto3.client(
        "lambda",
        region_name=TEST_REGION,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )
    yield client
    client.close()


@pytest.fixture
def main_app():
    from lambda_proxy.main import app

    yield app
    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def async_client(main_app):
    transport = httpx.ASGITransport(app=main_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def invoke_response():
    return make_invoke_response
