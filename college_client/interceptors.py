"""
interceptors.py — Bearer-token attachment and 401 session teardown

Installed as httpx event hooks on the shared AsyncClient, so it runs for
every request any facade sends.

Business Rules:
- Token present → Authorization: Bearer <token>; absent → no header
- Any 401 clears token + user, every time (repeat 401s are no-ops on an
  already empty store)
- A 401 on a request flagged as a retry clears the session but emits no
  SessionInvalidated event, so a redirect can't loop
- Listener failures are logged; the caller still gets the HttpError

Called by: http_client.HttpClient (event_hooks)
Depends on: session_store.py, navigation.py
"""

from collections.abc import Callable

import httpx
from loguru import logger

from .navigation import SessionInvalidated
from .session_store import SessionStore

RETRY_FLAG = "college_client.retry"

SessionListener = Callable[[SessionInvalidated], object]


class AuthTokenInterceptor:
    def __init__(self, session_store: SessionStore):
        self.session_store = session_store
        self._listeners: list[SessionListener] = []

    def add_listener(self, listener: SessionListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def event_hooks(self) -> dict[str, list]:
        return {"request": [self.on_request], "response": [self.on_response]}

    async def on_request(self, request: httpx.Request) -> None:
        token = self.session_store.get_token()
        if token:
            request.headers["Authorization"] = f"Bearer {token}"
        else:
            request.headers.pop("Authorization", None)

    async def on_response(self, response: httpx.Response) -> None:
        if response.status_code != 401:
            return

        request = response.request
        self.session_store.clear_session()

        if request.extensions.get(RETRY_FLAG):
            logger.debug("401 on retry request {} {}, session cleared", request.method, request.url.path)
            return

        logger.warning("401 from {} {}, session cleared", request.method, request.url.path)
        event = SessionInvalidated(status_code=401, url=str(request.url))
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Session listener {!r} failed", listener)
