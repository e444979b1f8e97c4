"""Tests for Navigator and the LoginRedirect session listener."""

from college_client.navigation import LoginRedirect, Navigator, SessionInvalidated

EVENT = SessionInvalidated(status_code=401, url="http://testserver/api/admin/users")


def test_redirects_from_protected_page():
    nav = Navigator("/admin/users")
    assert LoginRedirect(nav)(EVENT) is True
    assert nav.location == "/login"


def test_no_redirect_when_already_on_login():
    nav = Navigator("/login")
    assert LoginRedirect(nav)(EVENT) is False
    assert nav.history == []


def test_redirect_is_idempotent():
    nav = Navigator("/dashboard")
    redirect = LoginRedirect(nav)
    redirect(EVENT)
    redirect(EVENT)
    assert nav.history == ["/login"]


def test_custom_login_path():
    nav = Navigator("/teacher")
    LoginRedirect(nav, login_path="/auth/sign-in")(EVENT)
    assert nav.location == "/auth/sign-in"
