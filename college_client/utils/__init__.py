"""Shared utility helpers used across facades and services."""


def safe_int(v):
    """Safely convert a value to int, returning None on failure."""
    if v is None:
        return None
    try:
        return int(v)
    except (ValueError, TypeError):
        return None


def extract_items(body, key: str | None) -> list:
    """Pull the item list out of a list response.

    Backends answer either {key: [...]}, {data: {key: [...]}} or a bare list.
    """
    if isinstance(body, list):
        return body
    if not isinstance(body, dict):
        return []
    if key:
        items = body.get(key)
        if items is None and isinstance(body.get("data"), dict):
            items = body["data"].get(key)
        if isinstance(items, list):
            return items
    for fallback in ("items", "data"):
        if isinstance(body.get(fallback), list):
            return body[fallback]
    return []


def same_id(a, b) -> bool:
    """Compare ids that may arrive as int or numeric string."""
    if a is None or b is None:
        return False
    if a == b:
        return True
    ia, ib = safe_int(a), safe_int(b)
    return ia is not None and ia == ib
