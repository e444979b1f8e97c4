"""Tests for services/filters.py and the id/list helpers in utils."""

from college_client.services.filters import (
    field_filter,
    filter_colleges,
    filter_users,
    search_filter,
    sort_for_landing,
)
from college_client.utils import extract_items, safe_int, same_id

USERS = [
    {"id": 1, "first_name": "Ada", "email": "ada@x.edu", "role": "teacher", "status": "active", "college_id": 7},
    {"id": 2, "first_name": "Bo", "email": "bo@y.edu", "role": "student", "status": "active", "college_id": None},
]


def test_search_filter_empty_term_is_noop():
    assert search_filter(USERS, "", ("first_name",)) is USERS
    assert search_filter(USERS, None, ("first_name",)) is USERS


def test_search_filter_tolerates_missing_fields():
    assert search_filter([{"id": 1}], "x", ("name",)) == []


def test_field_filter_sentinels():
    for value in ("all", "", None):
        assert field_filter(USERS, "role", value) == USERS
    assert field_filter(USERS, "role", "student") == [USERS[1]]


def test_filter_users_by_email_domain():
    assert filter_users(USERS, search="Y.EDU") == [USERS[1]]


def test_filter_users_college_skips_null_college():
    assert filter_users(USERS, college_id="7") == [USERS[0]]


def test_filter_colleges_by_status():
    colleges = [{"name": "A", "subscription_status": "trial"}, {"name": "B", "subscription_status": "active"}]
    assert filter_colleges(colleges, status="trial") == [colleges[0]]


def test_sort_for_landing_is_stable_copy():
    colleges = [{"name": "b"}, {"name": "A", "landing_order": 0}]
    result = sort_for_landing(colleges)
    assert [c["name"] for c in result] == ["A", "b"]
    assert colleges[0]["name"] == "b"


def test_safe_int():
    assert safe_int("12") == 12
    assert safe_int("x") is None
    assert safe_int(None) is None


def test_same_id():
    assert same_id(7, "7") is True
    assert same_id("07", 7) is True
    assert same_id(7, 8) is False
    assert same_id(None, None) is False


def test_extract_items_shapes():
    assert extract_items([1, 2], "users") == [1, 2]
    assert extract_items({"users": [1]}, "users") == [1]
    assert extract_items({"data": {"users": [2]}}, "users") == [2]
    assert extract_items({"items": [3]}, "users") == [3]
    assert extract_items({"data": [4]}, None) == [4]
    assert extract_items("oops", "users") == []
