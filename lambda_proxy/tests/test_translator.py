import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from lambda_proxy.core.event_builder import ProxyEventBuilder
from lambda_proxy.core.exceptions import FunctionNotFoundError, LambdaExecutionError
from lambda_proxy.models.context import InboundRequest
from lambda_proxy.models.result import ErrorKind, InvocationResult
from lambda_proxy.services.lambda_invoker import LambdaInvoker
from lambda_proxy.services.translator import (
    LEGACY_MISSING_HEADER_BODY,
    RequestTranslator,
    resolve_function_name,
)

NOT_FOUND_MESSAGE = (
    "An error occurred (ResourceNotFoundException) when calling the Invoke operation: "
    "Function not found: arn:aws:lambda:us-east-1:123456789012:function:echo-fn"
)


def _client_error(code: str, message: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "Invoke")


@pytest.fixture
def invoker():
    return MagicMock()


@pytest.fixture
def translator(invoker):
    return RequestTranslator(invoker, ProxyEventBuilder())


def _request(**overrides) -> InboundRequest:
    fields = {
        "method": "GET",
        "path": "/function",
        "headers": {"x-lambda-function-name": "echo-fn", "content-type": "application/json"},
        "query_params": {},
        "body": b'{"a":"b"}',
    }
    fields.update(overrides)
    return InboundRequest(**fields)


def test_missing_header_returns_400_without_invoking(translator, invoker):
    result = translator.handle(_request(headers={"content-type": "application/json"}))

    assert result.status_code == 400
    assert result.body == "{'Error':'Must provide x-lambda-function-name header'}"
    assert result.error_kind == ErrorKind.CLIENT_INPUT
    invoker.invoke_function.assert_not_called()


def test_empty_header_is_forwarded_to_invoker(translator, invoker):
    invoker.invoke_function.return_value = InvocationResult(status_code=200, payload="{}")

    result = translator.handle(_request(headers={"x-lambda-function-name": ""}))

    assert result.status_code == 200
    function_name, _ = invoker.invoke_function.call_args.args
    assert function_name == ""


def test_empty_header_fails_remotely_with_500(lambda_client):
    translator = RequestTranslator(LambdaInvoker(lambda_client), ProxyEventBuilder())

    result = translator.handle(_request(headers={"x-lambda-function-name": ""}))

    assert result.status_code == 500
    assert result.error_kind == ErrorKind.REMOTE_INVOCATION_FAILURE
    assert "FunctionName" in result.body
    assert result.body == result.error


def test_missing_header_strict_json_body(invoker):
    translator = RequestTranslator(invoker, ProxyEventBuilder(), strict_json_errors=True)

    result = translator.handle(_request(headers={}))

    assert result.status_code == 400
    assert json.loads(result.body) == {"Error": "Must provide x-lambda-function-name header"}
    assert result.body != LEGACY_MISSING_HEADER_BODY


def test_header_lookup_is_case_insensitive():
    request = _request(headers={"X-Lambda-Function-Name": "echo-fn"})

    assert resolve_function_name(request) == "echo-fn"


def test_echo_scenario_relays_status_and_body(translator, invoker):
    invoker.invoke_function.return_value = InvocationResult(
        status_code=200,
        payload='{"a":"b"}',
        headers={"content-type": "application/json"},
    )

    result = translator.handle(_request())

    assert result.status_code == 200
    assert result.body == '{"a":"b"}'
    assert result.headers == {"content-type": "application/json"}
    assert result.success is True


def test_event_mirrors_inbound_request(translator, invoker):
    invoker.invoke_function.return_value = InvocationResult(status_code=200)
    request = _request(
        method="DELETE",
        headers={"x-lambda-function-name": "echo-fn", "X-Custom": "Value"},
        query_params={"page": "2", "sort": "asc"},
        body=b"plain text",
    )

    translator.handle(request)

    function_name, payload = invoker.invoke_function.call_args.args
    event = json.loads(payload)
    assert function_name == "echo-fn"
    assert event == {
        "httpMethod": "DELETE",
        "path": "/function",
        "headers": {"x-lambda-function-name": "echo-fn", "X-Custom": "Value"},
        "queryStringParameters": {"page": "2", "sort": "asc"},
        "body": "plain text",
    }


def test_function_error_overrides_status_to_500(translator, invoker):
    error_payload = '{"errorMessage": "boom", "errorType": "RuntimeError"}'
    invoker.invoke_function.return_value = InvocationResult(
        status_code=200,
        payload=error_payload,
        headers={"x-amz-function-error": "Unhandled"},
        function_error="Unhandled",
    )

    result = translator.handle(_request())

    assert result.status_code == 500
    assert result.body == error_payload
    assert result.error_kind == ErrorKind.REMOTE_FUNCTION_ERROR
    assert result.error == "Unhandled"


def test_not_found_maps_to_404_with_failure_text(translator, invoker):
    cause = _client_error(
        "ResourceNotFoundException",
        "Function not found: arn:aws:lambda:us-east-1:123456789012:function:echo-fn",
    )
    invoker.invoke_function.side_effect = FunctionNotFoundError("echo-fn", cause)

    result = translator.handle(_request())

    assert result.status_code == 404
    assert result.body == NOT_FOUND_MESSAGE
    assert result.error_kind == ErrorKind.REMOTE_NOT_FOUND


@pytest.mark.parametrize(
    "code",
    ["TooManyRequestsException", "AccessDeniedException", "InvalidRequestContentException"],
)
def test_other_failures_map_to_500_with_failure_text(translator, invoker, code):
    cause = _client_error(code, "nope")
    invoker.invoke_function.side_effect = LambdaExecutionError("echo-fn", cause)

    result = translator.handle(_request())

    assert result.status_code == 500
    assert result.body == str(cause)
    assert result.error_kind == ErrorKind.REMOTE_INVOCATION_FAILURE


def test_unexpected_exception_is_contained(invoker):
    event_builder = MagicMock()
    event_builder.build.side_effect = Exception("Surprise error")
    translator = RequestTranslator(invoker, event_builder)

    result = translator.handle(_request())

    assert result.status_code == 500
    assert result.body == "Surprise error"
    invoker.invoke_function.assert_not_called()


def test_header_lookup_returns_none_only_when_absent():
    assert resolve_function_name(_request(headers={"content-type": "text/plain"})) is None
    assert resolve_function_name(_request(headers={"x-lambda-function-name": ""})) == ""
