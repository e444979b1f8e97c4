"""
client.py — Composition root for the college API client

Wires one storage backend → SessionStore → AuthTokenInterceptor →
HttpClient, then builds every facade and the form services on top of that
single HttpClient.

Usage:
    async with CollegeClient.from_settings() as client:
        await client.auth.login("admin@college.edu", "secret")
        page = await client.admin.get_users(role="teacher")
        result = await client.forms.college.delete(7)

Depends on: config.py, storage.py, session_store.py, interceptors.py,
            navigation.py, http_client.py, api/*, services/form_service.py
"""

import httpx
from loguru import logger

from .api.admin import AdminAPI
from .api.auth import AuthAPI
from .api.college_admin import CollegeAdminAPI
from .api.colleges import CollegesAPI
from .api.messages import MessagesAPI
from .api.teacher import TeacherAPI
from .config import Settings, settings as default_settings
from .http_client import HttpClient
from .interceptors import AuthTokenInterceptor
from .navigation import LoginRedirect, Navigator
from .services.form_service import FormServices
from .session_store import SessionStore
from .storage import FileStorage, MemoryStorage, Storage


class CollegeClient:
    def __init__(
        self,
        *,
        base_url: str | None = None,
        storage: Storage | None = None,
        navigator: Navigator | None = None,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or default_settings
        self.session = SessionStore(storage if storage is not None else MemoryStorage())
        self.navigator = navigator or Navigator()

        self.interceptor = AuthTokenInterceptor(self.session)
        self.interceptor.add_listener(LoginRedirect(self.navigator, self.config.login_path))

        self.http = HttpClient(
            base_url or self.config.api_base_url,
            interceptor=self.interceptor,
            timeout=self.config.request_timeout,
            transport=transport,
        )

        self.auth = AuthAPI(self.http, self.session)
        self.admin = AdminAPI(self.http)
        self.college_admin = CollegeAdminAPI(
            self.http, self.session, default_password=self.config.default_user_password,
        )
        self.teacher = TeacherAPI(self.http)
        self.messages = MessagesAPI(self.http)
        self.colleges = CollegesAPI(self.http)

        ca = self.college_admin
        self.forms = FormServices({
            "user": self.admin.users,
            "college": self.admin.colleges,
            "student": ca.students,
            "teacher": ca.teachers,
            "department": ca.departments,
            "course": ca.courses,
            "class": ca.classes,
            "assignment": ca.assignments,
            "attendance": ca.attendance,
            "grade": ca.grades,
            "fee_structure": ca.fee_structures,
            "admission": ca.admissions,
            "academic_year": ca.academic_years,
            "semester": ca.semesters,
            "message": self.messages.messages,
        })
        logger.debug("CollegeClient ready for {}", self.http.base_url)

    @classmethod
    def from_settings(cls, config: Settings | None = None, **kwargs) -> "CollegeClient":
        """Client with the session persisted to the configured session file."""
        config = config or default_settings
        return cls(config=config, storage=FileStorage(config.session_file), **kwargs)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "CollegeClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()
