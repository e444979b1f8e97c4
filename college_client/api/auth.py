"""Auth facade. Login and register persist the session, logout clears it."""

import logging

from ..exceptions import HttpError
from ..http_client import HttpClient
from ..schemas.session import SessionUser
from ..session_store import SessionStore

log = logging.getLogger(__name__)


class AuthAPI:
    def __init__(self, http: HttpClient, session_store: SessionStore):
        self.http = http
        self.session_store = session_store

    def _store(self, body: dict) -> dict:
        token = body.get("token") if isinstance(body, dict) else None
        user = body.get("user") if isinstance(body, dict) else None
        if not token or not user:
            # 2xx without a usable session is still a failed login for the caller
            raise HttpError(502, {"error": "Login response missing token or user"})
        self.session_store.save_session(token, user)
        return body

    async def login(self, email: str, password: str) -> dict:
        resp = await self.http.post("/auth/login", {"email": email, "password": password})
        body = self._store(resp.json())
        log.info("Logged in as %s", email)
        return body

    async def register(self, user_data: dict) -> dict:
        resp = await self.http.post("/auth/register", user_data)
        return self._store(resp.json())

    async def get_profile(self) -> dict:
        return (await self.http.get("/auth/profile")).json()

    def logout(self) -> None:
        self.session_store.clear_session()
        log.info("Logged out")

    def is_authenticated(self) -> bool:
        return self.session_store.is_authenticated()

    def get_current_user(self) -> SessionUser | None:
        return self.session_store.get_current_user()
