"""Response schemas exposed by the API."""

from .greeting import GreetingResponse
from .status import StatusResponse

__all__ = ["GreetingResponse", "StatusResponse"]
