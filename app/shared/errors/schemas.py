"""
Wire format of every error response.
"""

from datetime import datetime

from pydantic import BaseModel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ExceptionResponse(BaseModel):
    """Standard error body returned by all error handlers.

    Attributes:
        timestamp: Moment the error response was built, ``YYYY-MM-DD HH:MM:SS``.
        status: HTTP status code, always equal to the response status line.
        message: Human-readable description safe to show to clients.
    """

    timestamp: str
    status: int
    message: str

    @classmethod
    def build(cls, status: int, message: str) -> "ExceptionResponse":
        return cls(
            timestamp=datetime.now().strftime(TIMESTAMP_FORMAT),
            status=status,
            message=message,
        )
