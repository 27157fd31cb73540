from .client import DEFAULT_BASE_URL, WebmasterClient, get_access_token, init_api, log_diagnostics
from .errors import MalformedResponse, TransportFailure, ValidationFailure, WebmasterAPIError, WebmasterError
from .models import (
    CRITICAL_ERROR,
    KIND_MALFORMED,
    KIND_TRANSPORT,
    KIND_UPSTREAM,
    KIND_VALIDATION,
    Err,
    Ok,
    Result,
)
from ._validators import coerce_timestamp, date_window, validate_page
from .version import __version__


__all__ = [
    "CRITICAL_ERROR",
    "DEFAULT_BASE_URL",
    "Err",
    "KIND_MALFORMED",
    "KIND_TRANSPORT",
    "KIND_UPSTREAM",
    "KIND_VALIDATION",
    "MalformedResponse",
    "Ok",
    "Result",
    "TransportFailure",
    "ValidationFailure",
    "WebmasterAPIError",
    "WebmasterClient",
    "WebmasterError",
    "__version__",
    "coerce_timestamp",
    "date_window",
    "get_access_token",
    "init_api",
    "log_diagnostics",
    "validate_page",
]
