from __future__ import annotations

import json
import logging
import os
import warnings
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import httpx

from .errors import MalformedResponse, TransportFailure, ValidationFailure, WebmasterError
from .models import KIND_UPSTREAM, Err, Ok, Result
from .version import __version__

logger = logging.getLogger("Webmaster")


DEFAULT_BASE_URL = "https://api.webmaster.yandex.net/v4.1"
OAUTH_TOKEN_URL = "https://oauth.yandex.ru/token"
USER_RESOURCE = "/user/"

# Widest integer that survives a round trip through a signed 64-bit slot.
_MAX_EXACT_INT = 2 ** 63 - 1

Diagnostics = Callable[[str, str], None]
QueryValue = Union[str, int, float, Sequence[Union[str, int, float]], None]


def _noop_diagnostics(severity: str, message: str) -> None:
    return None


def log_diagnostics(severity: str, message: str) -> None:
    """Diagnostics sink forwarding to the package logger."""
    if severity == "warning":
        logger.warning(message)
    else:
        logger.error(message)


def _parse_int(raw: str) -> Union[int, str]:
    value = int(raw)
    if abs(value) > _MAX_EXACT_INT:
        return raw
    return value


def _decode_json(text: str) -> Any:
    return json.loads(text, parse_int=_parse_int)


def _parse_user_id(raw: Any) -> int:
    """Positive user id from an int or a digit-only string, 0 for anything else."""
    if isinstance(raw, bool):
        return 0
    if isinstance(raw, int):
        return raw if raw > 0 else 0
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        return int(raw)
    return 0


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _encode_query(
    params: Mapping[str, QueryValue],
    on_skip: Callable[[str], None],
) -> List[Tuple[str, str]]:
    """
    Flatten params into query pairs.

    A list value repeats its key once per element, in order. None is omitted.
    Anything else that is not a string or number is skipped through `on_skip`.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if _is_scalar(value):
            pairs.append((key, str(value)))
        elif isinstance(value, (list, tuple)) and all(_is_scalar(item) for item in value):
            pairs.extend((key, str(item)) for item in value)
        else:
            on_skip(f"Bad type of key {key}. Value must be string, number or list of them")
    return pairs


def _normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/")


def _check_scheme(base_url: str) -> None:
    scheme = base_url.split("://", 1)[0].lower() if "://" in base_url else ""
    if scheme not in ("http", "https"):
        raise ValidationFailure(f"Unsupported protocol in base URL {base_url!r}: only http and https are allowed")


def _parse_body(response: httpx.Response, url: str) -> Dict[str, Any]:
    status = response.status_code
    if 300 <= status < 400:
        location = response.headers.get("Location", "")
        raise TransportFailure(f"Redirect from [{url}] to [{location}] is not allowed (HTTP {status})")
    if not response.content.strip():
        raise TransportFailure(f"Empty response from [{url}] (HTTP {status})")
    try:
        payload = _decode_json(response.text)
    except ValueError as exc:
        raise MalformedResponse(f"Unknown error in response: {exc}") from exc
    if not isinstance(payload, dict):
        raise MalformedResponse("Unknown error in response: Not object given")
    return payload


def _shape(payload: Dict[str, Any], status_code: int) -> Result:
    if payload.get("error_code"):
        logger.debug("Service error %s: %s", payload.get("error_code"), payload.get("error_message"))
        return Err.from_upstream(payload, status_code=status_code)
    return Ok(payload, status_code=status_code)


@dataclass
class _ClientConfig:
    access_token: Optional[str]
    base_url: str
    timeout: Union[float, httpx.Timeout, None]

    def auth_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {
            "Accept": "application/json",
            "Content-type": "application/json",
            "User-Agent": f"Webmaster-Python/{__version__}",
        }
        if self.access_token:
            headers["Authorization"] = f"OAuth {self.access_token}"
        return headers


class WebmasterClient:
    """
    Client for the Webmaster REST API.

    Prefer `init_api()`, which resolves the account's user id before handing out
    a client. Passing `user_id` directly skips that bootstrap call.

    Every operation returns `Ok` or `Err`; client-side failures never raise.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        *,
        user_id: Optional[int] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: Union[float, httpx.Timeout, None] = 30.0,
        report_errors: bool = True,
        diagnostics: Optional[Diagnostics] = None,
        event_hooks: Optional[Dict[str, Any]] = None,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        env_base_url = os.getenv("WEBMASTER_BASE_URL")
        resolved_base_url = _normalize_base_url(
            env_base_url if (env_base_url and base_url == DEFAULT_BASE_URL) else base_url
        )
        _check_scheme(resolved_base_url)
        resolved_token = access_token if access_token is not None else os.getenv("WEBMASTER_ACCESS_TOKEN")
        self._config = _ClientConfig(
            access_token=resolved_token,
            base_url=resolved_base_url,
            timeout=timeout,
        )
        self._user_id = user_id
        self._last_error: Optional[str] = None
        self.report_errors = report_errors
        self._diagnostics: Diagnostics = diagnostics or _noop_diagnostics

        if client is not None:
            self._client = client
            self._owns_client = False
        else:
            self._client = httpx.Client(
                timeout=self._config.timeout,
                headers=self._config.auth_headers(),
                event_hooks=event_hooks,
                transport=transport,
                follow_redirects=False,
            )
            self._owns_client = True

        from .endpoints import (
            HostsAPI, ImportantUrlsAPI, IndexingAPI, LinksAPI,
            OriginalTextsAPI, QueriesAPI, RecrawlAPI, SitemapsAPI,
        )

        self.hosts = HostsAPI(self)
        self.sitemaps = SitemapsAPI(self)
        self.indexing = IndexingAPI(self)
        self.recrawl = RecrawlAPI(self)
        self.links = LinksAPI(self)
        self.queries = QueriesAPI(self)
        self.original_texts = OriginalTextsAPI(self)
        self.important_urls = ImportantUrlsAPI(self)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "WebmasterClient":
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> Optional[bool]:
        self.close()
        return None

    @property
    def user_id(self) -> Optional[int]:
        return self._user_id

    @property
    def access_token(self) -> Optional[str]:
        return self._config.access_token

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    # -- error shaping -----------------------------------------------------

    def _report(self, severity: str, message: str) -> None:
        self._last_error = message
        logger.debug("%s: %s", severity, message)
        if self.report_errors:
            self._diagnostics(severity, message)

    def _warn(self, message: str) -> None:
        self._report("warning", message)

    def _fail(self, exc: WebmasterError) -> Err:
        self._report("critical", exc.message)
        return Err(kind=exc.kind, message=exc.message)

    # -- transport ---------------------------------------------------------

    def get_api_url(self, resource: str) -> str:
        """Full URL of a resource; everything but /user/ is scoped under the user id."""
        url = self._config.base_url
        if resource != USER_RESOURCE:
            if not self._user_id:
                raise ValidationFailure(f"Can't get hand {resource} without userID")
            url += f"/user/{self._user_id}"
        return url + resource

    def _request(
        self,
        method: str,
        resource: str,
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Result:
        try:
            url = self.get_api_url(resource)
            query = _encode_query(params or {}, self._warn)
            logger.debug("Request: %s %s", method, url)
            try:
                response = self._client.request(
                    method,
                    url,
                    params=query or None,
                    json=json_body,
                )
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise TransportFailure(f"Error in transport when {method} [{url}] {exc}") from exc
            logger.debug("Response: %d", response.status_code)
            if method == "DELETE" and response.status_code == 204:
                return Ok(None, status_code=204)
            return _shape(_parse_body(response, url), response.status_code)
        except WebmasterError as exc:
            return self._fail(exc)

    def _get(self, resource: str, params: Optional[Mapping[str, QueryValue]] = None) -> Result:
        return self._request("GET", resource, params=params)

    def _post(
        self,
        resource: str,
        data: Dict[str, Any],
        *,
        params: Optional[Mapping[str, QueryValue]] = None,
    ) -> Result:
        return self._request("POST", resource, params=params, json_body=data)

    def _delete(self, resource: str, data: Optional[Dict[str, Any]] = None) -> Result:
        return self._request("DELETE", resource, json_body=data or {})

    # -- identity ----------------------------------------------------------

    def get_user(self) -> Result:
        """Raw /user/ response for the current token."""
        return self._get(USER_RESOURCE)

    def _resolve_user_id(self) -> Result:
        response = self.get_user()
        raw = response.data.get("user_id") if isinstance(response, Ok) and isinstance(response.data, dict) else None
        user_id = _parse_user_id(raw)
        if user_id <= 0:
            message = "Can't resolve USER ID"
            if response.error_message:
                message += ". " + response.error_message
            return self._fail(ValidationFailure(message))
        self._user_id = user_id
        return Ok(user_id, status_code=response.status_code)


def init_api(access_token: Optional[str] = None, **kwargs: Any) -> Union[Ok[WebmasterClient], Err]:
    """
    Build a client and resolve the account's user id.

    Returns `Ok(client)` or `Err` when the token could not be resolved to a user id.
    Keyword arguments are passed to `WebmasterClient(...)`.

    Example:
        result = init_api(token)
        if not result.ok:
            print(result.error_message)
        else:
            hosts = result.data.hosts.list()
    """
    try:
        client = WebmasterClient(access_token, **kwargs)
    except ValidationFailure as exc:
        return Err(kind=exc.kind, message=exc.message)
    resolved = client._resolve_user_id()
    if isinstance(resolved, Err):
        client.close()
        return resolved
    return Ok(client)


def get_access_token(
    code: str,
    client_id: str,
    client_secret: str,
    *,
    token_url: str = OAUTH_TOKEN_URL,
    timeout: Union[float, httpx.Timeout, None] = 30.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> Result:
    """
    Exchange an authorization code for an access token.

    Deprecated: meant for one-off token acquisition while setting up an application.
    How to get a code:
        1. Register an application at https://oauth.yandex.ru/client/new with
           Webmaster access and callback https://oauth.yandex.ru/verification_code
        2. Open https://oauth.yandex.ru/authorize?response_type=code&client_id=<client id>
        3. Pass the code shown there together with the client id and secret.
    """
    warnings.warn(
        "get_access_token() is deprecated and intended for debugging only",
        DeprecationWarning,
        stacklevel=2,
    )
    form = {
        "grant_type": "authorization_code",
        "code": code,
        "client_id": client_id,
        "client_secret": client_secret,
    }
    logger.debug("Request: POST %s", token_url)
    try:
        _check_scheme(token_url)
        with httpx.Client(timeout=timeout, transport=transport, follow_redirects=False) as http:
            try:
                response = http.post(token_url, data=form, headers={"Accept": "application/json"})
            except (httpx.HTTPError, httpx.InvalidURL) as exc:
                raise TransportFailure(f"Error in transport when POST [{token_url}] {exc}") from exc
        logger.debug("Response: %d", response.status_code)
        payload = _parse_body(response, token_url)
    except WebmasterError as exc:
        return Err(kind=exc.kind, message=exc.message)
    if payload.get("error"):
        # The OAuth server reports errors as {"error", "error_description"}.
        return Err(
            kind=KIND_UPSTREAM,
            message=str(payload.get("error_description") or payload["error"]),
            error_code=str(payload["error"]),
            status_code=response.status_code,
            data=payload,
        )
    return _shape(payload, response.status_code)
