"""
Palindrome API — Pydantic Request/Response Schemas
===================================================

What:  Pydantic models defining the JSON contract of every endpoint.
How:   Route handlers return these; FastAPI serializes them and documents
       them in the OpenAPI schema.

Error bodies are always a single field: {"error": "<message>"}.
"""

from typing import List

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CheckResponse(BaseModel):
    """Returned by GET /ispalindrome."""
    message: bool = Field(description="Whether the word is a palindrome")


class WordResponse(BaseModel):
    """
    What:  One stored word.
    Who:   Items of GET /words.
    """
    id: int = Field(description="Identifier assigned by the store")
    word: str = Field(description="Word exactly as submitted")
    palindrome: bool = Field(description="Palindrome flag computed at creation")

    model_config = {"from_attributes": True}


class WordListResponse(BaseModel):
    """Returned by GET /words."""
    words: List[WordResponse] = Field(description="Every stored word")


class SaveResponse(BaseModel):
    """
    What:  Result of POST /savepalindrome.

    Example:
        {"message": "Word saved successfully", "word": "Level", "palindrome": true}
    """
    message: str = Field(default="Word saved successfully")
    word: str = Field(description="Word exactly as submitted")
    palindrome: bool = Field(description="Whether the word is a palindrome")


class MessageResponse(BaseModel):
    """Plain confirmation message (DELETE /words/{id})."""
    message: str


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every endpoint.

    Example:
        {"error": "Failed to fetch words"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """
    What:  Health check response for monitoring and load balancer checks.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
