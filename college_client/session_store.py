"""
session_store.py — Persisted auth session (token + user)

Business Rules:
- Token and user are written together and cleared together
- is_authenticated() checks token presence only; the server validates the
  token on every request
- A corrupt persisted user reads back as None, never raises

Called by: interceptors.py (every request / every 401), api/auth.py
Depends on: storage.py, schemas/session.py
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from .schemas.session import SessionUser
from .storage import Storage

log = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
USER_KEY = "user"


class SessionStore:
    def __init__(self, storage: Storage):
        self.storage = storage

    def save_session(self, token: str, user: SessionUser | dict[str, Any]) -> None:
        """Persist token and user in one write. Both are required."""
        if not token:
            raise ValueError("token is required")
        if not user:
            raise ValueError("user is required")
        if isinstance(user, SessionUser):
            payload = user.model_dump(mode="json", exclude_none=True)
        else:
            payload = dict(user)
        # Serialize before touching storage so a bad user never leaves a lone token
        user_json = json.dumps(payload, default=str)
        self.storage.set_many({TOKEN_KEY: token, USER_KEY: user_json})
        log.info("Session saved for user id=%s role=%s", payload.get("id"), payload.get("role"))

    def clear_session(self) -> None:
        self.storage.remove_many([TOKEN_KEY, USER_KEY])

    def get_token(self) -> str | None:
        return self.storage.get(TOKEN_KEY) or None

    def get_current_user(self) -> SessionUser | None:
        raw = self.storage.get(USER_KEY)
        if not raw:
            return None
        try:
            return SessionUser.model_validate(json.loads(raw))
        except (ValueError, TypeError, ValidationError) as e:
            log.warning("Stored user unreadable: %s", e)
            return None

    def is_authenticated(self) -> bool:
        return bool(self.get_token())
