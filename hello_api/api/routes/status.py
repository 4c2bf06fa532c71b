"""Status probe for monitoring."""

from fastapi import APIRouter

from ...schemas.status import StatusResponse

SERVICE_NAME = "Hello World API"

router = APIRouter(tags=["status"])


@router.get("/", summary="Service status probe", response_model=StatusResponse)
def read_status() -> StatusResponse:
    """Return a static payload indicating the service is running."""
    return StatusResponse(status="UP", service=SERVICE_NAME)
