"""Schema for the service status probe."""
from __future__ import annotations

from pydantic import BaseModel


class StatusResponse(BaseModel):
    status: str
    service: str
