"""
api/admin.py — Super-admin facade

Users, colleges, passwords, activity logs, per-college academic data,
system settings, reports and notifications under /admin.

Business Rules:
- User and college list filters (search, role, status, college) run
  client-side after the fetch
- Log export returns raw CSV bytes; saving them is the caller's job

Called by: client.CollegeClient
Depends on: api/resources.py, services/filters.py
"""

from typing import Any

from ..http_client import HttpClient
from ..schemas.responses import ListPage
from ..services.filters import filter_colleges, filter_users
from ..utils import extract_items
from .resources import resource_client


class AdminAPI:
    def __init__(self, http: HttpClient):
        self.http = http
        self.users = resource_client(http, "/admin/users", collection_key="users", entity_key="user")
        self.colleges = resource_client(http, "/admin/colleges", collection_key="colleges", entity_key="college")

    async def get_dashboard_stats(self) -> dict:
        return (await self.http.get("/admin/dashboard/stats")).json()

    # ── Users ────────────────────────────────────────────────────────

    async def get_users(self, params: dict | None = None, *, search: str | None = None,
                        role: str | None = None, status: str | None = None,
                        college_id: Any = None) -> ListPage:
        return await self.users.list(
            params,
            post_filter=lambda items: filter_users(
                items, search=search, role=role, status=status, college_id=college_id,
            ),
        )

    async def create_user(self, user_data: dict) -> dict:
        return await self.users.create(user_data)

    async def update_user(self, user_id: Any, user_data: dict) -> dict:
        return await self.users.update(user_id, user_data)

    async def delete_user(self, user_id: Any) -> dict:
        return await self.users.remove(user_id)

    # ── Passwords ────────────────────────────────────────────────────

    async def change_password(self, password_data: dict) -> dict:
        return (await self.http.put("/admin/change-password", password_data)).json()

    async def reset_user_password(self, user_id: Any, password_data: dict) -> dict:
        return await self.users.action("PUT", user_id, "reset-password", body=password_data)

    async def generate_secure_password(self) -> dict:
        return (await self.http.post("/admin/generate-password")).json()

    # ── Colleges ─────────────────────────────────────────────────────

    async def get_colleges(self, params: dict | None = None, *, search: str | None = None,
                           status: str | None = None) -> ListPage:
        return await self.colleges.list(
            params,
            post_filter=lambda items: filter_colleges(items, search=search, status=status),
        )

    async def create_college(self, college_data: dict) -> dict:
        return await self.colleges.create(college_data)

    async def update_college(self, college_id: Any, college_data: dict) -> dict:
        return await self.colleges.update(college_id, college_data)

    async def delete_college(self, college_id: Any) -> dict:
        return await self.colleges.remove(college_id)

    # ── Per-college academic and fee data ────────────────────────────

    async def get_departments(self, college_id: Any) -> dict:
        return await self.colleges.action("GET", college_id, "departments")

    async def get_courses(self, college_id: Any) -> dict:
        return await self.colleges.action("GET", college_id, "courses")

    async def get_classes(self, college_id: Any) -> dict:
        return await self.colleges.action("GET", college_id, "classes")

    async def get_fee_structures(self, college_id: Any) -> dict:
        return await self.colleges.action("GET", college_id, "fee-structures")

    async def get_fee_collections(self, college_id: Any) -> dict:
        return await self.colleges.action("GET", college_id, "fee-collections")

    # ── Settings, reports, notifications ─────────────────────────────

    async def get_system_settings(self) -> dict:
        return (await self.http.get("/admin/settings")).json()

    async def update_system_settings(self, system_settings: dict) -> dict:
        return (await self.http.put("/admin/settings", system_settings)).json()

    async def get_reports(self, report_type: str, params: dict | None = None) -> dict:
        return (await self.http.get(f"/admin/reports/{report_type}", params=params)).json()

    async def get_notifications(self) -> dict:
        return (await self.http.get("/admin/notifications")).json()

    async def mark_notification_read(self, notification_id: Any) -> dict:
        return (await self.http.put(f"/admin/notifications/{notification_id}/read")).json()

    # ── Activity logs ────────────────────────────────────────────────

    async def get_logs(self, page: int = 1, limit: int = 25, **filters) -> ListPage:
        """Paginated activity log: {logs, pagination, filters}."""
        params = {"page": page, "limit": limit, **{k: v for k, v in filters.items() if v not in ("", None)}}
        resp = await self.http.get("/admin/logs", params=params)
        body = resp.json()
        logs = ListPage(items=extract_items(body, "logs"))
        if isinstance(body, dict):
            logs.pagination = body.get("pagination")
            logs.filters = body.get("filters")
        return logs

    async def export_logs(self, start_date: str | None = None, end_date: str | None = None) -> bytes:
        params = {"start_date": start_date, "end_date": end_date, "format": "csv"}
        resp = await self.http.get("/admin/logs/export", params=params)
        return resp.content
