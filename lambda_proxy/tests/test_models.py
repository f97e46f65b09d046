import pytest
from pydantic import ValidationError

from lambda_proxy.models import (
    ErrorKind,
    InboundRequest,
    InvocationEvent,
    InvocationResult,
    ProxyResult,
)


class TestInvocationEventModel:
    """Type validation tests for the InvocationEvent Pydantic model."""

    def test_required_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            InvocationEvent()

        missing_fields = {e["loc"][0] for e in exc_info.value.errors() if e["type"] == "missing"}
        assert missing_fields == {"httpMethod", "path"}

    def test_rejects_non_string_header_values(self):
        with pytest.raises(ValidationError):
            InvocationEvent(httpMethod="GET", path="/function", headers={"Content-Type": 123})

    def test_dump_contains_exactly_the_forwarded_fields(self):
        event = InvocationEvent(httpMethod="GET", path="/function")

        assert event.model_dump() == {
            "httpMethod": "GET",
            "path": "/function",
            "headers": {},
            "queryStringParameters": {},
            "body": "",
        }


class TestResults:
    def test_invocation_result_logic_error(self):
        assert InvocationResult(status_code=200).is_logic_error is False
        assert InvocationResult(status_code=200, function_error="Handled").is_logic_error is True

    def test_proxy_result_success_flag(self):
        assert ProxyResult(status_code=200).success is True
        failed = ProxyResult(status_code=404, error_kind=ErrorKind.REMOTE_NOT_FOUND)
        assert failed.success is False

    def test_error_kind_values(self):
        assert ErrorKind.CLIENT_INPUT.value == "ClientInputError"
        assert ErrorKind.REMOTE_FUNCTION_ERROR.value == "RemoteFunctionError"


def test_inbound_request_defaults():
    request = InboundRequest(method="GET", path="/function")

    assert request.headers == {}
    assert request.query_params == {}
    assert request.body == b""
