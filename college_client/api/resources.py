"""Generic REST resource client for list/get/create/update/remove on one path.

Every facade is built from resource_client() instances sharing the one
HttpClient. Entity-specific behaviour (student/teacher defaults) lives in thin
wrappers such as RoleScopedUsers, not in copies of this class.

Errors are never caught here: HttpError/NetworkError reach the caller as-is.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..http_client import HttpClient
from ..schemas.responses import ListPage
from ..schemas.session import VALID_ROLES
from ..utils import extract_items

log = logging.getLogger(__name__)

PostFilter = Callable[[list], list]


def _json_or_empty(resp) -> Any:
    """Decoded body, or {} for an empty (204) response."""
    return resp.json() if resp.content else {}


class ResourceClient:
    def __init__(self, http: HttpClient, base_path: str, *,
                 collection_key: str | None = None, entity_key: str | None = None):
        self.http = http
        self.base_path = "/" + base_path.strip("/")
        self.collection_key = collection_key
        self.entity_key = entity_key

    def path(self, *parts: Any) -> str:
        """/base[/part...] with each part interpolated as a path segment."""
        segments = [self.base_path] + [str(p).strip("/") for p in parts]
        return "/".join(segments)

    async def list(self, params: dict | None = None,
                   post_filter: PostFilter | None = None) -> ListPage:
        resp = await self.http.get(self.base_path, params=params or {})
        body = resp.json()
        items = extract_items(body, self.collection_key)
        if post_filter is not None:
            items = post_filter(items)
        page = ListPage(items=items)
        if isinstance(body, dict):
            page.pagination = body.get("pagination")
            page.filters = body.get("filters")
        return page

    async def get(self, item_id: Any) -> dict:
        return _json_or_empty(await self.http.get(self.path(item_id)))

    async def create(self, data: dict, files: Any = None) -> dict:
        if files:
            resp = await self.http.post(self.base_path, data, files=files)
        else:
            resp = await self.http.post(self.base_path, data)
        return _json_or_empty(resp)

    async def update(self, item_id: Any, data: dict) -> dict:
        return _json_or_empty(await self.http.put(self.path(item_id), data))

    async def remove(self, item_id: Any) -> dict:
        resp = await self.http.delete(self.path(item_id))
        return _json_or_empty(resp)

    async def action(self, method: str, *parts: Any, body: Any = None,
                     params: dict | None = None) -> Any:
        """Call a sub-path such as /academic/admissions/{id}/status."""
        method = method.upper()
        path = self.path(*parts)
        if method == "GET":
            resp = await self.http.get(path, params=params)
        elif method == "POST":
            resp = await self.http.post(path, body, params=params)
        elif method == "PUT":
            resp = await self.http.put(path, body)
        elif method == "PATCH":
            resp = await self.http.patch(path, body)
        elif method == "DELETE":
            resp = await self.http.delete(path)
        else:
            raise ValueError(f"Unsupported method {method}")
        return _json_or_empty(resp)


def resource_client(http: HttpClient, base_path: str, *, collection_key: str | None = None,
                    entity_key: str | None = None) -> ResourceClient:
    return ResourceClient(http, base_path, collection_key=collection_key, entity_key=entity_key)


class RoleScopedUsers:
    """Users resource narrowed to one role (students, teachers).

    Lists send `role` to the server and also drop other roles client-side,
    since not every deployment filters /admin/users by role. Creation injects
    username (= email when absent), the placeholder password, the role, and a
    college id.
    """

    def __init__(self, users: ResourceClient, role: str, *, default_password: str,
                 college_id_provider: Callable[[], Any] | None = None):
        if role not in VALID_ROLES:
            raise ValueError(f"Unknown role '{role}'")
        self.users = users
        self.role = role
        self.default_password = default_password
        self.college_id_provider = college_id_provider
        self.entity_key = users.entity_key

    def with_defaults(self, data: dict) -> dict:
        payload = dict(data)
        if not payload.get("username"):
            payload["username"] = payload.get("email")
        payload["password"] = self.default_password
        payload["role"] = self.role
        college_id = payload.get("college_id")
        if not college_id and self.college_id_provider is not None:
            college_id = self.college_id_provider()
        payload["college_id"] = college_id or None
        return payload

    async def list(self, params: dict | None = None,
                   post_filter: PostFilter | None = None) -> ListPage:
        def _only_role(items: list) -> list:
            scoped = [u for u in items if isinstance(u, dict) and u.get("role") == self.role]
            return post_filter(scoped) if post_filter else scoped

        return await self.users.list({**(params or {}), "role": self.role}, post_filter=_only_role)

    async def get(self, user_id: Any) -> dict:
        return await self.users.get(user_id)

    async def create(self, data: dict) -> dict:
        payload = self.with_defaults(data)
        log.info("Creating %s %s", self.role, payload.get("email"))
        return await self.users.create(payload)

    async def update(self, user_id: Any, data: dict) -> dict:
        return await self.users.update(user_id, data)

    async def remove(self, user_id: Any) -> dict:
        return await self.users.remove(user_id)
