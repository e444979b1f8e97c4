"""
conftest.py — Shared Test Fixtures for the college API client

Provides an in-memory fake backend served through httpx.MockTransport, a
memory-backed session store, and a fully wired CollegeClient.

Business Rules:
- No test touches the network; every request hits FakeBackend
- Every request is recorded so tests can assert on headers and bodies
- Each test gets a fresh backend, storage and client

Called by: all test files via pytest autodiscovery
Depends on: college_client.client, college_client.storage
"""

import json

import httpx
import pytest

from college_client.client import CollegeClient
from college_client.navigation import Navigator
from college_client.session_store import SessionStore
from college_client.storage import MemoryStorage

BASE_URL = "http://testserver/api"

ADMIN_USER = {
    "id": 1,
    "role": "college_admin",
    "email": "admin@college.edu",
    "first_name": "Ada",
    "last_name": "Admin",
    "college_id": 7,
}

_SINGULAR = {"classes": "class", "student_fees": "student_fee", "academic_years": "academic_year"}


class FakeBackend:
    """Tiny REST server: generic collections plus the auth endpoints."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.collections: dict[str, list[dict]] = {}
        self.overrides: dict[tuple[str, str], object] = {}
        self.password = "secret"
        self._next_id = 100

    # ── Test helpers ─────────────────────────────────────────────────

    def respond(self, method: str, path: str, status: int = 200, json_body=None, content: bytes | None = None):
        self.overrides[(method.upper(), path)] = (status, json_body, content)

    def fail(self, method: str, path: str, exc: Exception):
        self.overrides[(method.upper(), path)] = exc

    def seed(self, path: str, items: list[dict]):
        self.collections[path] = [dict(i) for i in items]

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    # ── Transport handler ────────────────────────────────────────────

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        method = request.method

        override = self.overrides.get((method, path))
        if isinstance(override, Exception):
            raise override
        if override is not None:
            status, body, content = override
            if content is not None:
                return httpx.Response(status, content=content, headers={"Content-Type": "text/csv"})
            return httpx.Response(status, json=body)

        if path == "/auth/login":
            creds = json.loads(request.content)
            if creds.get("password") != self.password:
                return httpx.Response(401, json={"error": "Invalid credentials"})
            return httpx.Response(200, json={"token": "tok-123", "user": ADMIN_USER, "message": "Login successful"})
        if path == "/auth/register":
            data = json.loads(request.content)
            user = {"id": self._new_id(), "role": data.get("role", "super_admin"), "email": data["email"]}
            return httpx.Response(201, json={"token": "tok-new", "user": user})

        return self._collection(method, path, request)

    def _new_id(self) -> int:
        self._next_id += 1
        return self._next_id

    def _collection(self, method: str, path: str, request: httpx.Request) -> httpx.Response:
        base, _, item_id = path.rpartition("/")
        if not item_id.isdigit():
            base, item_id = path, ""

        key = base.rsplit("/", 1)[-1].replace("-", "_")
        singular = _SINGULAR.get(key, key.rstrip("s"))
        items = self.collections.setdefault(base, [])

        if not item_id and method == "GET":
            return httpx.Response(200, json={key: items, "pagination": {"total": len(items)}})
        if not item_id and method in ("PUT", "PATCH", "DELETE"):
            # Action endpoint such as /admin/change-password
            body = json.loads(request.content) if request.content else {}
            return httpx.Response(200, json={"message": "ok", "received": body})

        if method == "POST":
            data = json.loads(request.content) if request.content else {}
            item = {"id": self._new_id(), **data}
            items.append(item)
            return httpx.Response(201, json={"message": f"{singular} created", singular: item})

        found = next((i for i in items if str(i.get("id")) == item_id), None)
        if found is None:
            return httpx.Response(404, json={"message": f"{singular} not found"})
        if method == "GET":
            return httpx.Response(200, json={singular: found})
        if method == "PUT":
            found.update(json.loads(request.content))
            return httpx.Response(200, json={"message": f"{singular} updated", singular: found})
        if method == "DELETE":
            items.remove(found)
            return httpx.Response(200, json={"message": f"{singular} deleted"})
        return httpx.Response(405, json={"error": "method not allowed"})


@pytest.fixture()
def backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def session_store(storage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture()
def navigator() -> Navigator:
    return Navigator("/dashboard")


@pytest.fixture()
def client(backend, storage, navigator) -> CollegeClient:
    """CollegeClient wired to FakeBackend, starting logged out."""
    return CollegeClient(
        base_url=BASE_URL,
        storage=storage,
        navigator=navigator,
        transport=httpx.MockTransport(backend),
    )


@pytest.fixture()
def logged_in(client) -> CollegeClient:
    """Same client with a college-admin session already stored."""
    client.session.save_session("tok-123", ADMIN_USER)
    return client
