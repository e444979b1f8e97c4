"""Client-side filters applied after a list is fetched.

Used where the endpoint has no server-side support for the filter
(college_id, status, free-text search on users/colleges/messages).
"all", None and "" all mean "no filter".

Called by: api/admin.py, api/messages.py, api/colleges.py
"""

from ..utils import safe_int, same_id

USER_SEARCH_FIELDS = ("first_name", "last_name", "email", "username")
COLLEGE_SEARCH_FIELDS = ("name", "domain", "contact_email")
MESSAGE_SEARCH_FIELDS = ("title", "content")


def _active(value) -> bool:
    return value not in (None, "", "all")


def search_filter(items: list[dict], term: str | None, fields: tuple[str, ...]) -> list[dict]:
    """Case-insensitive substring match on any of `fields`."""
    if not term:
        return items
    needle = term.lower()
    return [
        item for item in items
        if any(needle in str(item.get(f) or "").lower() for f in fields)
    ]


def field_filter(items: list[dict], field: str, value) -> list[dict]:
    if not _active(value):
        return items
    return [item for item in items if item.get(field) == value]


def filter_users(items: list[dict], *, search: str | None = None, role: str | None = None,
                 status: str | None = None, college_id=None) -> list[dict]:
    items = search_filter(items, search, USER_SEARCH_FIELDS)
    items = field_filter(items, "role", role)
    items = field_filter(items, "status", status)
    if _active(college_id):
        items = [u for u in items if same_id(u.get("college_id"), college_id)]
    return items


def filter_colleges(items: list[dict], *, search: str | None = None,
                    status: str | None = None) -> list[dict]:
    items = search_filter(items, search, COLLEGE_SEARCH_FIELDS)
    return field_filter(items, "subscription_status", status)


def filter_messages(items: list[dict], *, search: str | None = None, message_type: str | None = None,
                    priority: str | None = None) -> list[dict]:
    items = search_filter(items, search, MESSAGE_SEARCH_FIELDS)
    items = field_filter(items, "type", message_type)
    return field_filter(items, "priority", priority)


def sort_for_landing(colleges: list[dict]) -> list[dict]:
    """Order by landing_order (missing = 0), then name."""
    return sorted(
        colleges,
        key=lambda c: (safe_int(c.get("landing_order")) or 0, str(c.get("name") or "").lower()),
    )
