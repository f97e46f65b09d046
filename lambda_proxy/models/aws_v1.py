# lambda_proxy/models/aws_v1.py

"""
Pydantic model for the proxy event delivered to Lambda functions.

Follows the subset of the API Gateway v1 (REST API) proxy integration input
format that the proxy forwards:
https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html#api-gateway-simple-proxy-for-lambda-input-format
"""

from typing import Dict

from pydantic import BaseModel, Field


class InvocationEvent(BaseModel):
    """
    Event payload sent to the target function.

    Use model_dump() to convert to a dict; every field is always present.
    """

    httpMethod: str
    path: str
    headers: Dict[str, str] = Field(default_factory=dict)
    queryStringParameters: Dict[str, str] = Field(default_factory=dict)
    body: str = ""
