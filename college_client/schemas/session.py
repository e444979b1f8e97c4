"""Session user model: the JSON object persisted next to the auth token."""

from __future__ import annotations

from pydantic import BaseModel

VALID_ROLES = ("super_admin", "college_admin", "admin", "teacher", "student", "parent")


class SessionUser(BaseModel, extra="allow"):
    id: int | str
    role: str
    email: str
    college_id: int | str | None = None
    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        full = f"{self.first_name or ''} {self.last_name or ''}".strip()
        return full or self.email
