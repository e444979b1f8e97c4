"""
schemas/forms.py — Required/optional field lists per entity

Static configuration checked before every create/update call. Entity names
are the keys FormServices uses.

Business Rules:
- Required fields must be present and non-blank before a request is sent
- Optional fields are documentation for callers; they are not enforced
- Student/teacher forms omit username/password/role: the role-scoped
  facades inject those

Called by: services/form_service.py
Depends on: pydantic
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ValidationSchema(BaseModel):
    model_config = ConfigDict(frozen=True)

    required: tuple[str, ...]
    optional: tuple[str, ...] = ()


SCHEMAS: dict[str, ValidationSchema] = {
    "department": ValidationSchema(
        required=("name", "code"),
        optional=("description", "head_teacher_id"),
    ),
    "course": ValidationSchema(
        required=("department_id", "name", "code"),
        optional=("description", "credits", "duration_months", "fee_amount"),
    ),
    "class": ValidationSchema(
        required=("course_id", "semester_id", "teacher_id", "name"),
        optional=("schedule", "room_number", "max_students"),
    ),
    "assignment": ValidationSchema(
        required=("class_id", "title", "due_date"),
        optional=("description", "max_score", "assignment_type"),
    ),
    "attendance": ValidationSchema(
        required=("class_id", "date", "attendance_data"),
    ),
    "grade": ValidationSchema(
        required=("assignment_id", "student_id", "grade_percentage"),
        optional=("grade_letter", "feedback"),
    ),
    "fee_structure": ValidationSchema(
        required=("course_id", "academic_year_id", "fee_type", "amount"),
        optional=("due_date", "is_optional"),
    ),
    "user": ValidationSchema(
        required=("username", "email", "password", "first_name", "last_name", "role"),
        optional=("college_id", "phone", "date_of_birth", "gender", "address"),
    ),
    "college": ValidationSchema(
        required=("name",),
        optional=("domain", "logo_url", "address", "contact_email", "contact_phone", "subscription_plan"),
    ),
    "student": ValidationSchema(
        required=("email", "first_name", "last_name"),
        optional=("college_id", "phone", "date_of_birth", "gender", "address", "status"),
    ),
    "teacher": ValidationSchema(
        required=("email", "first_name", "last_name"),
        optional=("college_id", "phone", "department", "qualification", "status"),
    ),
    "admission": ValidationSchema(
        required=("first_name", "last_name", "email", "course_id"),
        optional=("phone", "date_of_birth", "address", "status", "notes"),
    ),
    "academic_year": ValidationSchema(
        required=("name", "start_date", "end_date"),
        optional=("is_current",),
    ),
    "semester": ValidationSchema(
        required=("academic_year_id", "name", "start_date", "end_date"),
        optional=("is_current",),
    ),
    "message": ValidationSchema(
        required=("title", "content", "target_type"),
        optional=("type", "priority", "target_ids"),
    ),
}


def get_schema(entity: str) -> ValidationSchema:
    try:
        return SCHEMAS[entity]
    except KeyError:
        raise KeyError(f"No validation schema for entity '{entity}'") from None
