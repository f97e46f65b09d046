"""
Input context models.

Encapsulates all data required to translate an inbound request.
"""

from typing import Dict

from pydantic import BaseModel, Field


class InboundRequest(BaseModel):
    """
    Inbound HTTP request as seen by the translator.

    This model decouples the service layer from FastAPI's Request object.
    Header keys are kept as received; duplicated headers and query
    parameters keep their last value.
    """

    method: str
    path: str
    headers: Dict[str, str] = Field(default_factory=dict)
    query_params: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""
