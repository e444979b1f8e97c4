"""Error taxonomy for the college API client.

NetworkError and HttpError are raised by HttpClient and propagate through the
facades untouched. ClientValidationError is raised before any network call.
FormValidationService.submit is the only place these are caught.
"""

from typing import Any


class CollegeClientError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NetworkError(CollegeClientError):
    """The request never reached the server (DNS, refused, timeout)."""


class HttpError(CollegeClientError):
    """The server answered with a 4xx/5xx status."""

    def __init__(self, status_code: int, body: Any = None, url: str = ""):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(self._message_from_body(body) or f"HTTP {status_code}")

    @staticmethod
    def _message_from_body(body: Any) -> str:
        if isinstance(body, dict):
            for key in ("error", "message"):
                value = body.get(key)
                if isinstance(value, str) and value:
                    return value
        return ""

    @property
    def server_message(self) -> str:
        """Message from the response body (`error`, then `message`), or ''."""
        return self._message_from_body(self.body)

    @property
    def is_auth_failure(self) -> bool:
        return self.status_code == 401

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500


class ClientValidationError(CollegeClientError):
    """Required-field check failed; no request was sent."""

    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__("Validation failed: " + ", ".join(errors.values()))
