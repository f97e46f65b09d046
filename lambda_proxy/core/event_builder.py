import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from lambda_proxy.models.aws_v1 import InvocationEvent
from lambda_proxy.models.context import InboundRequest

logger = logging.getLogger("lambda_proxy.event_builder")


class EventBuilder(ABC):
    @abstractmethod
    def build(self, request: InboundRequest) -> Dict[str, Any]:
        """
        Build an event dictionary from an InboundRequest.
        """
        pass


class ProxyEventBuilder(EventBuilder):
    """Builds the event forwarded to the target function."""

    def build(self, request: InboundRequest) -> Dict[str, Any]:
        """
        Mirror method, path, headers, query parameters and body of the inbound
        request. The body is forwarded as text; undecodable bytes are replaced.
        """
        body_content = request.body.decode("utf-8", errors="replace")

        event_model = InvocationEvent(
            httpMethod=request.method,
            path=request.path,
            headers=dict(request.headers),
            queryStringParameters=dict(request.query_params),
            body=body_content,
        )

        return event_model.model_dump()
