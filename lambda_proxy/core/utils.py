"""
Proxy Utility Module
"""

from typing import Dict

# Framing headers are recomputed by the ASGI server for the relayed body.
# Date and Server are always emitted by the ASGI server itself.
HOP_BY_HOP_HEADERS = frozenset(
    {"connection", "keep-alive", "transfer-encoding", "content-length", "date", "server"}
)


def relay_headers(remote_headers: Dict[str, str]) -> Dict[str, str]:
    """
    Select the remote headers that can be copied onto the HTTP response.

    Args:
        remote_headers: headers of the Lambda Invoke API response

    Returns:
        The same mapping without hop-by-hop, framing and server-generated headers
    """
    return {k: v for k, v in remote_headers.items() if k.lower() not in HOP_BY_HOP_HEADERS}
