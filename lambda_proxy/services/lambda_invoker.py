"""
Lambda Invoker Service

Sends a synchronous (RequestResponse) Invoke request to the Lambda service
through a shared boto3 client and normalizes the outcome.
"""

import logging

from botocore.exceptions import BotoCoreError, ClientError

from lambda_proxy.core.exceptions import FunctionNotFoundError, LambdaExecutionError
from lambda_proxy.models.result import InvocationResult

logger = logging.getLogger("lambda_proxy.lambda_invoker")

NOT_FOUND_ERROR_CODE = "ResourceNotFoundException"


class LambdaInvoker:
    def __init__(self, client):
        """
        Args:
            client: Shared boto3 Lambda client. Only read after construction.
        """
        self.client = client

    def invoke_function(self, function_name: str, payload: bytes) -> InvocationResult:
        """
        Invoke a Lambda function and wait for its result.

        Args:
            function_name: name, partial ARN or full ARN of the function
            payload: JSON event

        Returns:
            InvocationResult with the Invoke API status, HTTP headers, decoded
            payload and function error indicator

        Raises:
            FunctionNotFoundError: the function does not exist
            LambdaExecutionError: any other failure reaching the Lambda service
        """
        logger.info(f"Invoking {function_name}", extra={"function_name": function_name})

        try:
            response = self.client.invoke(
                FunctionName=function_name,
                InvocationType="RequestResponse",
                Payload=payload,
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code")
            logger.error(
                f"Lambda invocation failed for function '{function_name}'",
                extra={
                    "function_name": function_name,
                    "error_type": error_code or type(e).__name__,
                    "error_detail": str(e),
                },
                exc_info=True,
            )
            if error_code == NOT_FOUND_ERROR_CODE:
                raise FunctionNotFoundError(function_name, e) from e
            raise LambdaExecutionError(function_name, e) from e
        except BotoCoreError as e:
            logger.error(
                f"Lambda invocation failed for function '{function_name}'",
                extra={
                    "function_name": function_name,
                    "error_type": type(e).__name__,
                    "error_detail": str(e),
                },
                exc_info=True,
            )
            raise LambdaExecutionError(function_name, e) from e

        raw_payload = response["Payload"].read() if "Payload" in response else b""
        headers = response.get("ResponseMetadata", {}).get("HTTPHeaders", {})

        return InvocationResult(
            status_code=response["StatusCode"],
            payload=raw_payload.decode("utf-8", errors="replace"),
            headers={str(k): str(v) for k, v in headers.items()},
            function_error=response.get("FunctionError"),
        )
