"""Uniform response envelope.

Every response body, success or failure, has the same shape:

    {"code": 200, "message": "success", "data": {...}, "timestamp": 1718000000000}

``timestamp`` is milliseconds since the Unix epoch.
"""

import time
from typing import Generic, TypeVar

from quill.domain.value.common import WireModel

T = TypeVar("T")


class Envelope(WireModel, Generic[T]):
    """Response envelope."""

    code: int
    message: str
    data: T | None = None
    timestamp: int


def now_ms() -> int:
    """Current time in epoch milliseconds."""
    return int(time.time() * 1000)


def ok(data: T | None = None, message: str = "success", code: int = 200) -> Envelope[T]:
    """Wrap a successful result."""
    return Envelope(code=code, message=message, data=data, timestamp=now_ms())


def failure(code: int, message: str) -> Envelope[None]:
    """Wrap an error; ``data`` is always null."""
    return Envelope(code=code, message=message, data=None, timestamp=now_ms())
