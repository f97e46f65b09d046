import logging

import boto3
from botocore.config import Config as BotoConfig

from lambda_proxy.config import ProxyConfig

logger = logging.getLogger("lambda_proxy.aws_client")


class LambdaClientFactory:
    """
    Lambda client factory for centralized region/endpoint handling.

    Clients make a single attempt per call (retries disabled).
    Timeouts stay at the botocore defaults.
    """

    def __init__(self, config: ProxyConfig):
        self.config = config

    def create_client(self, **kwargs):
        """
        Create a boto3 Lambda client.

        Args:
            **kwargs: Additional arguments for boto3.client
        """
        kwargs.setdefault("region_name", self.config.AWS_REGION)
        if self.config.LAMBDA_ENDPOINT_URL:
            kwargs.setdefault("endpoint_url", self.config.LAMBDA_ENDPOINT_URL)
        kwargs.setdefault(
            "config", BotoConfig(retries={"total_max_attempts": 1, "mode": "standard"})
        )

        logger.debug(
            "Creating Lambda client",
            extra={
                "region": kwargs["region_name"],
                "endpoint_url": kwargs.get("endpoint_url"),
            },
        )
        return boto3.client("lambda", **kwargs)
