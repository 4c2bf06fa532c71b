"""Schema for the greeting endpoint."""
from __future__ import annotations

from pydantic import BaseModel, Field


class GreetingResponse(BaseModel):
    message: str = Field(description="Greeting addressed to the resolved name")
    timestamp: str = Field(description="Local ISO-8601 date-time without offset")
    version: str = Field(description="API version")
