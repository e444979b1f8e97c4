"""Teacher facade: classes, attendance, results, grading and profile."""

from typing import Any

from ..http_client import HttpClient
from ..schemas.responses import ListPage
from .resources import resource_client


class TeacherAPI:
    def __init__(self, http: HttpClient):
        self.http = http
        self.classes = resource_client(http, "/academic/classes", collection_key="classes", entity_key="class")
        self.assignments = resource_client(http, "/academic/assignments", collection_key="assignments", entity_key="assignment")

    # ── Dashboard ────────────────────────────────────────────────────

    async def get_dashboard_stats(self) -> dict:
        return (await self.http.get("/dashboard/teacher/stats")).json()

    async def get_grade_distribution(self) -> dict:
        return (await self.http.get("/dashboard/teacher/grade-distribution")).json()

    async def get_performance_trends(self) -> dict:
        return (await self.http.get("/dashboard/teacher/performance-trends")).json()

    async def get_upcoming_deadlines(self) -> dict:
        return (await self.http.get("/dashboard/teacher/upcoming-deadlines")).json()

    # ── Classes ──────────────────────────────────────────────────────

    async def get_classes(self) -> ListPage:
        return await self.classes.list()

    async def get_class(self, class_id: Any) -> dict:
        return await self.classes.get(class_id)

    async def get_students(self, class_id: Any) -> dict:
        return await self.classes.action("GET", class_id, "students")

    # ── Attendance ───────────────────────────────────────────────────

    async def get_attendance(self, class_id: Any, date: str | None = None) -> dict:
        return await self.classes.action("GET", class_id, "attendance", params={"date": date})

    async def mark_attendance(self, class_id: Any, attendance_data: dict) -> dict:
        return await self.classes.action("POST", class_id, "attendance", body=attendance_data)

    async def get_attendance_overview(self) -> dict:
        return (await self.http.get("/academic/attendance/overview")).json()

    async def get_attendance_report(self, class_id: Any) -> dict:
        return await self.classes.action("GET", class_id, "attendance", "report")

    async def get_attendance_calendar(self, class_id: Any) -> dict:
        return await self.classes.action("GET", class_id, "attendance", "calendar")

    # ── Results ──────────────────────────────────────────────────────

    async def get_results(self, class_id: Any) -> dict:
        return await self.classes.action("GET", class_id, "results")

    async def add_result(self, class_id: Any, result_data: dict) -> dict:
        return await self.classes.action("POST", class_id, "results", body=result_data)

    async def update_result(self, class_id: Any, result_id: Any, result_data: dict) -> dict:
        return await self.classes.action("PUT", class_id, "results", result_id, body=result_data)

    async def delete_result(self, class_id: Any, result_id: Any) -> dict:
        return await self.classes.action("DELETE", class_id, "results", result_id)

    # ── Grading ──────────────────────────────────────────────────────

    async def get_pending_grading(self) -> dict:
        return await self.assignments.action("GET", "pending-grading")

    async def grade_submission(self, assignment_id: Any, student_id: Any, grade_data: dict) -> dict:
        return await self.assignments.action("PUT", assignment_id, "grade", student_id, body=grade_data)

    # ── Notifications & profile ──────────────────────────────────────

    async def get_notifications(self) -> dict:
        return (await self.http.get("/teacher/notifications")).json()

    async def mark_notification_read(self, notification_id: Any) -> dict:
        return (await self.http.put(f"/teacher/notifications/{notification_id}/read")).json()

    async def get_profile(self) -> dict:
        return (await self.http.get("/teacher/profile")).json()

    async def update_profile(self, profile_data: dict) -> dict:
        return (await self.http.put("/teacher/profile", profile_data)).json()

    async def change_password(self, password_data: dict) -> dict:
        return (await self.http.put("/teacher/change-password", password_data)).json()
