"""Greeting endpoint."""
from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Query

from ...schemas.greeting import GreetingResponse

API_VERSION = "1.0.0"
DEFAULT_NAME = "World"

router = APIRouter(tags=["greeting"])


def local_now() -> datetime:
    """Return the naive local wall-clock time."""
    return datetime.now()


def resolve_name(values: list[str] | None) -> str:
    """Collapse the ``name`` query values; repeated values are comma-joined."""
    if values is None:
        return DEFAULT_NAME
    return ",".join(values)


@router.get("/hello", summary="Greet a caller by name", response_model=GreetingResponse)
def read_hello(
    name: list[str] | None = Query(default=None, description="Name to greet, defaults to World"),
    now: datetime = Depends(local_now),
) -> GreetingResponse:
    """Return a greeting for ``name`` stamped with the request time."""
    return GreetingResponse(
        message=f"Hello, {resolve_name(name)}!",
        timestamp=now.isoformat(),
        version=API_VERSION,
    )
