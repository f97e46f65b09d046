"""
Proxy configuration definition.

Loads configuration from environment variables and provides a Pydantic model.
Uses pydantic-settings for type safety and defaults.
"""

import sys
from typing import Optional

from pydantic import Field

from .common.config import BaseAppConfig


class ProxyConfig(BaseAppConfig):
    """
    Configuration management for the Lambda proxy.
    """

    # Server settings
    PROXY_BIND_ADDR: str = Field(default="0.0.0.0:4567", description="Listen address")

    # Lambda service
    AWS_REGION: str = Field(default="us-east-1", description="Region of the Lambda service")
    LAMBDA_ENDPOINT_URL: Optional[str] = Field(
        default=None, description="Endpoint override for the Lambda API (local emulators)"
    )

    # Missing-header body: legacy single-quoted text unless strict JSON is requested
    STRICT_JSON_ERRORS: bool = Field(
        default=False, description="Emit valid JSON for the missing-header error body"
    )

    # FastAPI settings
    root_path: str = Field(default="", description="API root path (for proxy)")

    @property
    def bind_host(self) -> str:
        return self.PROXY_BIND_ADDR.rsplit(":", 1)[0]

    @property
    def bind_port(self) -> int:
        return int(self.PROXY_BIND_ADDR.rsplit(":", 1)[1])


# Load config as a singleton.
# pydantic-settings reads environment variables during instantiation.
try:
    config = ProxyConfig()
except Exception as e:
    sys.stderr.write(f"Failed to load configuration: {e}\n")
    raise
