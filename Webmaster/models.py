from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar, Union

CRITICAL_ERROR = "CRITICAL_ERROR"

KIND_TRANSPORT = "transport"
KIND_MALFORMED = "malformed_response"
KIND_VALIDATION = "validation"
KIND_UPSTREAM = "upstream"

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call. `data` is the service's JSON object (None for 204 No Content)."""

    data: T
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return True

    @property
    def no_content(self) -> bool:
        return self.status_code == 204

    @property
    def error_code(self) -> Optional[str]:
        return None

    @property
    def error_message(self) -> Optional[str]:
        return None

    def unwrap(self) -> T:
        return self.data

    def to_dict(self) -> Dict[str, Any]:
        if isinstance(self.data, dict):
            return dict(self.data)
        return {}


@dataclass(frozen=True)
class Err:
    """
    Failed call.

    `kind` tells client-detected failures (transport, malformed_response, validation)
    apart from errors reported by the service itself (upstream). For upstream errors
    `data` holds the service's JSON object unchanged.
    """

    kind: str
    message: str
    error_code: str = CRITICAL_ERROR
    status_code: Optional[int] = None
    data: Optional[Dict[str, Any]] = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def no_content(self) -> bool:
        return False

    @property
    def error_message(self) -> str:
        return self.message

    def unwrap(self) -> Any:
        from .errors import WebmasterAPIError

        raise WebmasterAPIError(
            message=self.message,
            error_code=self.error_code,
            status_code=self.status_code,
            error_data=self.data,
        )

    def to_dict(self) -> Dict[str, Any]:
        if self.kind == KIND_UPSTREAM and self.data is not None:
            return dict(self.data)
        return {"error_code": self.error_code, "error_message": self.message}

    @staticmethod
    def from_upstream(payload: Dict[str, Any], status_code: Optional[int] = None) -> "Err":
        return Err(
            kind=KIND_UPSTREAM,
            message=str(payload.get("error_message") or ""),
            error_code=str(payload.get("error_code")),
            status_code=status_code,
            data=payload,
        )


Result = Union[Ok[Any], Err]
