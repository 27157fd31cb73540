"""Base classes for API namespace endpoints."""
from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, TypeVar
from urllib.parse import quote

from .._validators import require
from ..errors import WebmasterError
from ..models import Result

if TYPE_CHECKING:
    from ..client import QueryValue, WebmasterClient

F = TypeVar("F", bound=Callable[..., Result])


def shaped(method: F) -> F:
    """Turn validation failures raised before the request into a critical `Err`."""

    @functools.wraps(method)
    def wrapper(self: "BaseAPI", *args: Any, **kwargs: Any) -> Result:
        try:
            return method(self, *args, **kwargs)
        except WebmasterError as exc:
            return self._client._fail(exc)

    return wrapper  # type: ignore[return-value]


def segment(value: Any) -> str:
    """Percent-encode an identifier for use as a single path segment. Colons stay as they are."""
    return quote(str(value), safe=":")


def path_id(value: Any, param_name: str) -> str:
    """Required identifier, encoded as one path segment."""
    return segment(require(value, param_name))


@dataclass(frozen=True)
class BaseAPI:
    """Base class for API namespace endpoints."""

    _client: "WebmasterClient"

    def _get(self, resource: str, params: Optional[Mapping[str, "QueryValue"]] = None) -> Result:
        return self._client._get(resource, params)

    def _post(
        self,
        resource: str,
        data: Dict[str, Any],
        *,
        params: Optional[Mapping[str, "QueryValue"]] = None,
    ) -> Result:
        return self._client._post(resource, data, params=params)

    def _delete(self, resource: str) -> Result:
        return self._client._delete(resource)
