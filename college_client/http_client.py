"""Shared HTTP client, one connection pool for every facade.

HttpClient wraps a single httpx.AsyncClient with the API base URL, JSON
headers, and the auth interceptor installed as event hooks. Non-2xx responses
raise HttpError; transport failures raise NetworkError.

Usage:
    http = HttpClient(settings.api_base_url, interceptor=interceptor)
    resp = await http.get("/admin/users", params={"role": "teacher"})
    resp = await http.request(RequestDescriptor("POST", "/messages", body=fields, files=files))
"""

import json
import secrets
from dataclasses import dataclass
from typing import Any

import httpx
from loguru import logger

from .config import APP_VERSION, settings
from .exceptions import HttpError, NetworkError
from .interceptors import RETRY_FLAG, AuthTokenInterceptor

_LIMITS = httpx.Limits(
    max_connections=50,
    max_keepalive_connections=20,
    keepalive_expiry=30,
)

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "User-Agent": f"college-admin-client/{APP_VERSION}",
}


@dataclass
class RequestDescriptor:
    method: str
    path: str
    params: dict[str, Any] | None = None
    body: Any = None
    files: Any = None
    multipart: bool = False
    retry: bool = False

    @property
    def is_multipart(self) -> bool:
        return self.multipart or bool(self.files)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None}


def _form_fields(body: dict[str, Any] | None) -> dict[str, str]:
    """Form-encode a body: drop None and "", JSON-encode lists and dicts, lowercase bools."""
    fields = {}
    for key, value in (body or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            fields[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple, dict)):
            fields[key] = json.dumps(value)
        else:
            fields[key] = str(value)
    return fields


def _response_body(resp: httpx.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return resp.text[:500]


class HttpClient:
    def __init__(
        self,
        base_url: str,
        *,
        interceptor: AuthTokenInterceptor | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.interceptor = interceptor
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=JSON_HEADERS,
            timeout=settings.request_timeout if timeout is None else timeout,
            limits=_LIMITS,
            follow_redirects=False,
            event_hooks=interceptor.event_hooks() if interceptor else None,
            transport=transport,
        )

    def _build(self, d: RequestDescriptor) -> httpx.Request:
        kwargs: dict[str, Any] = {"params": _clean_params(d.params)}
        if d.is_multipart:
            # Explicit boundary replaces the client's JSON content type
            boundary = secrets.token_hex(16)
            kwargs["headers"] = {"Content-Type": f"multipart/form-data; boundary={boundary}"}
            fields = _form_fields(d.body)
            files = list(d.files.items()) if isinstance(d.files, dict) else list(d.files or [])
            if files:
                kwargs["data"] = fields
            else:
                # httpx only emits multipart when parts exist; send fields as filename-less parts
                files = [(k, (None, v)) for k, v in fields.items()]
            kwargs["files"] = files
        elif d.body is not None:
            kwargs["json"] = d.body

        request = self._client.build_request(d.method.upper(), d.path, **kwargs)
        if d.retry:
            request.extensions[RETRY_FLAG] = True
        return request

    async def request(self, descriptor: RequestDescriptor) -> httpx.Response:
        request = self._build(descriptor)
        try:
            resp = await self._client.send(request)
        except httpx.TransportError as e:
            logger.warning("{} {} failed before reaching server: {}", request.method, request.url.path, e)
            raise NetworkError(f"Network error: {e.__class__.__name__}") from e

        if resp.is_error:
            body = _response_body(resp)
            logger.debug("{} {} -> {}", request.method, request.url.path, resp.status_code)
            raise HttpError(resp.status_code, body, url=str(request.url))
        return resp

    async def get(self, path: str, params: dict | None = None) -> httpx.Response:
        return await self.request(RequestDescriptor("GET", path, params=params))

    async def post(self, path: str, body: Any = None, *, params: dict | None = None,
                   files: Any = None, multipart: bool = False) -> httpx.Response:
        return await self.request(
            RequestDescriptor("POST", path, params=params, body=body, files=files, multipart=multipart)
        )

    async def put(self, path: str, body: Any = None) -> httpx.Response:
        return await self.request(RequestDescriptor("PUT", path, body=body))

    async def patch(self, path: str, body: Any = None) -> httpx.Response:
        return await self.request(RequestDescriptor("PATCH", path, body=body))

    async def delete(self, path: str) -> httpx.Response:
        return await self.request(RequestDescriptor("DELETE", path))

    async def aclose(self) -> None:
        """Shut down the pool. Safe to call twice."""
        try:
            await self._client.aclose()
        except RuntimeError:
            pass

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
