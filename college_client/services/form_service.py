"""
services/form_service.py — Validation + uniform results for mutating calls

The single seam between callers and the network for create/update/delete:
validate required fields, strip empty values, call the facade, and turn
whatever happens into an APIResult. Nothing raised by a facade escapes.

Business Rules:
- A required field is missing when absent, None, or a blank string;
  0, False and lists count as present
- Submitted payloads never carry None or "" values, so partial updates
  don't overwrite server fields with blanks
- Error message precedence: server `error`, then server `message`, then a
  generic text; 5xx and network failures always get the generic text
- Validation failures never reach the network

Called by: client.CollegeClient (FormServices), callers of create/update
Depends on: schemas/forms.py, schemas/responses.py, exceptions.py
"""

import logging
from collections.abc import Awaitable, Callable, Iterable
from typing import Any

from ..exceptions import ClientValidationError, HttpError, NetworkError
from ..schemas.forms import ValidationSchema, get_schema
from ..schemas.responses import APIResult

log = logging.getLogger(__name__)

GENERIC_ERROR = "An unexpected error occurred"
SERVER_ERROR = "The server encountered an error. Please try again later."
NETWORK_ERROR = "Unable to reach the server. Check your connection and try again."
DEFAULT_SUCCESS = "Operation completed successfully"


def validate(data: dict | None, required_fields: Iterable[str]) -> dict[str, str]:
    """Return {field: "<field> is required"} for every missing required field."""
    data = data or {}
    errors = {}
    for field in required_fields:
        value = data.get(field)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[field] = f"{field} is required"
    return errors


def format_for_submission(data: dict | None) -> dict:
    """Drop keys whose value is None or ""."""
    return {k: v for k, v in (data or {}).items() if v is not None and v != ""}


def extract_message(error: BaseException) -> str:
    if isinstance(error, HttpError):
        if error.is_server_error:
            return SERVER_ERROR
        return error.server_message or GENERIC_ERROR
    if isinstance(error, NetworkError):
        return NETWORK_ERROR
    if isinstance(error, ClientValidationError):
        return error.message
    return GENERIC_ERROR


def success_message(body: Any) -> str:
    if isinstance(body, dict) and isinstance(body.get("message"), str) and body["message"]:
        return body["message"]
    return DEFAULT_SUCCESS


def _payload(body: Any, entity_key: str | None) -> Any:
    if entity_key and isinstance(body, dict) and entity_key in body:
        return body[entity_key]
    return body


async def submit(
    operation: Callable[..., Awaitable[Any]],
    data: dict | None = None,
    required: Iterable[str] = (),
    *,
    entity_key: str | None = None,
    extra_check: Callable[[dict], dict[str, str]] | None = None,
    args: tuple = (),
) -> APIResult:
    """Validate, format, call `operation(*args, formatted)`, and wrap the outcome.

    With data=None the operation is called with `args` only (deletes).
    """
    try:
        if data is not None:
            errors = validate(data, required)
            if not errors and extra_check is not None:
                errors = extra_check(data)
            if errors:
                raise ClientValidationError(errors)
            body = await operation(*args, format_for_submission(data))
        else:
            body = await operation(*args)
    except Exception as e:
        if isinstance(e, HttpError) and e.is_auth_failure:
            log.info("Operation rejected: session no longer valid")
        elif not isinstance(e, ClientValidationError):
            log.warning("Operation failed: %s", e)
        return APIResult(success=False, message=extract_message(e), error=e)

    return APIResult(success=True, message=success_message(body), data=_payload(body, entity_key))


def _check_attendance(data: dict) -> dict[str, str]:
    rows = data.get("attendance_data")
    if not isinstance(rows, list) or not rows:
        return {"attendance_data": "Attendance data must be a non-empty array"}
    return {}


EXTRA_CHECKS = {"attendance": _check_attendance}

# Updates to these carry only the changed fields
PARTIAL_UPDATES = {"attendance", "grade"}


class EntityFormService:
    """create/update/delete for one entity, returning APIResult."""

    def __init__(self, entity: str, resource: Any, schema: ValidationSchema | None = None):
        self.entity = entity
        self.resource = resource
        self.schema = schema or get_schema(entity)
        self.entity_key = getattr(resource, "entity_key", None)

    async def create(self, data: dict) -> APIResult:
        return await submit(
            self.resource.create, data, self.schema.required,
            entity_key=self.entity_key, extra_check=EXTRA_CHECKS.get(self.entity),
        )

    async def update(self, item_id: Any, data: dict) -> APIResult:
        required = () if self.entity in PARTIAL_UPDATES else self.schema.required
        return await submit(
            self.resource.update, data, required,
            entity_key=self.entity_key, args=(item_id,),
        )

    async def delete(self, item_id: Any) -> APIResult:
        return await submit(self.resource.remove, args=(item_id,))


class FormServices:
    """One EntityFormService per entity, keyed by schema name."""

    def __init__(self, resources: dict[str, Any]):
        self._services = {
            entity: EntityFormService(entity, resource) for entity, resource in resources.items()
        }

    def __getitem__(self, entity: str) -> EntityFormService:
        return self._services[entity]

    def __getattr__(self, entity: str) -> EntityFormService:
        if entity.startswith("_"):
            raise AttributeError(entity)
        try:
            return self._services[entity]
        except KeyError:
            raise AttributeError(entity) from None

    def __contains__(self, entity: str) -> bool:
        return entity in self._services

    def entities(self) -> list[str]:
        return sorted(self._services)
