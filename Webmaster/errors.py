from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .models import CRITICAL_ERROR, KIND_MALFORMED, KIND_TRANSPORT, KIND_VALIDATION


class WebmasterError(Exception):
    """Client-detected failure. Converted to an `Err` result before leaving the client."""

    kind = KIND_TRANSPORT

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportFailure(WebmasterError):
    kind = KIND_TRANSPORT


class MalformedResponse(WebmasterError):
    kind = KIND_MALFORMED


class ValidationFailure(WebmasterError, ValueError):
    kind = KIND_VALIDATION


@dataclass(frozen=True)
class WebmasterAPIError(Exception):
    message: str
    error_code: str = CRITICAL_ERROR
    status_code: Optional[int] = None
    error_data: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        prefix = f"HTTP {self.status_code}: " if self.status_code is not None else ""
        return f"{prefix}{self.error_code}: {self.message}"
