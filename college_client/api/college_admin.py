"""
api/college_admin.py — College-admin facade

One resource client per /academic, /fees and /college collection, plus the
sub-path operations that don't fit list/get/create/update/remove.

Business Rules:
- Students and teachers are /admin/users rows narrowed by role
- New students/teachers get username = email, the placeholder password,
  the fixed role, and the session user's college when none is given
- Fee payments are POSTed to /college/student-fees/{id}/pay

Called by: client.CollegeClient
Depends on: api/resources.py, session_store.py (college id default)
"""

from typing import Any

from ..http_client import HttpClient
from ..session_store import SessionStore
from .resources import RoleScopedUsers, resource_client


class CollegeAdminAPI:
    def __init__(self, http: HttpClient, session_store: SessionStore, *, default_password: str):
        self.http = http
        self.session_store = session_store

        self.users = resource_client(http, "/admin/users", collection_key="users", entity_key="user")
        self.students = RoleScopedUsers(
            self.users, "student", default_password=default_password,
            college_id_provider=self._session_college_id,
        )
        self.teachers = RoleScopedUsers(
            self.users, "teacher", default_password=default_password,
            college_id_provider=self._session_college_id,
        )

        self.departments = resource_client(http, "/crud/departments", collection_key="departments", entity_key="department")
        self.courses = resource_client(http, "/academic/courses", collection_key="courses", entity_key="course")
        self.classes = resource_client(http, "/academic/classes", collection_key="classes", entity_key="class")
        self.assignments = resource_client(http, "/academic/assignments", collection_key="assignments", entity_key="assignment")
        self.attendance = resource_client(http, "/academic/attendance", collection_key="attendance", entity_key="attendance")
        self.grades = resource_client(http, "/academic/grades", collection_key="grades", entity_key="grade")
        self.admissions = resource_client(http, "/academic/admissions", collection_key="admissions", entity_key="admission")
        self.admission_inquiries = resource_client(http, "/academic/admission-inquiries", collection_key="inquiries", entity_key="inquiry")
        self.events = resource_client(http, "/academic/events", collection_key="events", entity_key="event")
        self.academic_years = resource_client(http, "/academic/academic-years", collection_key="academic_years", entity_key="academic_year")
        self.semesters = resource_client(http, "/academic/semesters", collection_key="semesters", entity_key="semester")
        self.enrollments = resource_client(http, "/academic/enrollments", collection_key="enrollments", entity_key="enrollment")
        self.fee_structures = resource_client(http, "/fees/structures", collection_key="fee_structures", entity_key="fee_structure")
        self.fee_collections = resource_client(http, "/fees/collections", collection_key="collections", entity_key="collection")
        self.student_fees = resource_client(http, "/college/student-fees", collection_key="student_fees", entity_key="student_fee")

    def _session_college_id(self) -> Any:
        user = self.session_store.get_current_user()
        return user.college_id if user else None

    async def get_dashboard_stats(self) -> dict:
        return (await self.http.get("/dashboard/stats")).json()

    # ── Admissions ───────────────────────────────────────────────────

    async def update_admission_status(self, admission_id: Any, status: str) -> dict:
        return await self.admissions.action("PUT", admission_id, "status", body={"status": status})

    # ── Class enrollments ────────────────────────────────────────────

    async def enroll_students(self, class_id: Any, enrollment_data: dict) -> dict:
        return await self.classes.action("POST", class_id, "enroll-students", body=enrollment_data)

    async def remove_student_from_class(self, class_id: Any, student_id: Any) -> dict:
        return await self.classes.action("DELETE", class_id, "students", student_id)

    async def get_class_students(self, class_id: Any) -> dict:
        return await self.classes.action("GET", class_id, "students")

    async def get_academic_teachers(self) -> dict:
        return (await self.http.get("/academic/teachers")).json()

    async def get_academic_students(self) -> dict:
        return (await self.http.get("/academic/students")).json()

    # ── Student fees ─────────────────────────────────────────────────

    async def record_student_fee_payment(self, student_fee_id: Any, payment_data: dict) -> dict:
        return await self.student_fees.action("POST", student_fee_id, "pay", body=payment_data)

    async def get_student_fee_summary(self) -> dict:
        return await self.student_fees.action("GET", "summary")

    # ── Reports, analytics, notifications ────────────────────────────

    async def get_reports(self, report_type: str, params: dict | None = None) -> dict:
        return (await self.http.get(f"/academic/reports/{report_type}", params=params)).json()

    async def get_analytics(self, params: dict | None = None) -> dict:
        return (await self.http.get("/academic/analytics", params=params)).json()

    async def get_notifications(self) -> dict:
        return (await self.http.get("/academic/notifications")).json()

    async def mark_notification_read(self, notification_id: Any) -> dict:
        return (await self.http.put(f"/academic/notifications/{notification_id}/read")).json()
