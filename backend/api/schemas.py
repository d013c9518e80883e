"""Pydantic models for the API layer.

Defines request/response schemas for the query endpoint.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """Single chat message forwarded to the model."""
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"]
    content: str = Field(..., description="Message text, may be empty")


class QueryRequest(BaseModel):
    """Incoming prompt from the frontend."""
    messages: list[Message] = Field(..., min_length=1, description="Ordered chat messages")


class QueryResponse(BaseModel):
    """Full model output, buffered from the stream."""
    response: str


class ErrorResponse(BaseModel):
    error: str
