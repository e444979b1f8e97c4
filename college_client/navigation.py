"""Navigation side of session invalidation.

The interceptor only emits SessionInvalidated events. LoginRedirect is the
listener that decides whether to move the Navigator to the login entry point.

Usage:
    nav = Navigator("/dashboard")
    interceptor.add_listener(LoginRedirect(nav, login_path="/login"))
"""

from dataclasses import dataclass, field

from loguru import logger


@dataclass(frozen=True)
class SessionInvalidated:
    status_code: int
    url: str = ""
    reason: str = "authentication rejected"


@dataclass
class Navigator:
    """Current location plus the history of navigations made through it."""

    location: str = "/"
    history: list[str] = field(default_factory=list)

    def navigate(self, path: str) -> None:
        self.history.append(path)
        self.location = path
        logger.debug("Navigated to {}", path)


class LoginRedirect:
    """Send the navigator to the login path unless it is already there."""

    def __init__(self, navigator: Navigator, login_path: str = "/login"):
        self.navigator = navigator
        self.login_path = login_path

    def __call__(self, event: SessionInvalidated) -> bool:
        if self.login_path in self.navigator.location:
            return False
        logger.info("Session invalidated ({}), redirecting to {}", event.reason, self.login_path)
        self.navigator.navigate(self.login_path)
        return True
