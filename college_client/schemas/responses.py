"""
schemas/responses.py — Uniform result shapes returned to callers

APIResult is what every form-service operation returns (it never raises).
ListPage is what every facade list call returns.

Called by: services/form_service.py, api/*.py
Depends on: pydantic
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class APIResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    message: str
    data: Any = None
    error: Any = Field(default=None, exclude=True)


class ListPage(BaseModel, extra="allow"):
    items: list[Any] = Field(default_factory=list)
    pagination: dict | None = None
    filters: dict | None = None

    def __len__(self) -> int:
        return len(self.items)
