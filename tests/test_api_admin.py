"""
test_api_admin.py — Tests for api/admin.py

Paths and methods, client-side user/college filters, activity logs, CSV
export.

Called by: pytest
Depends on: college_client/api/admin.py, tests/conftest.py (FakeBackend)
"""

import json

import pytest

from college_client.exceptions import HttpError

USERS = [
    {"id": 1, "first_name": "Ada", "last_name": "Lovelace", "email": "ada@north.edu",
     "username": "ada", "role": "teacher", "status": "active", "college_id": 7},
    {"id": 2, "first_name": "Bob", "last_name": "Stone", "email": "bob@south.edu",
     "username": "bstone", "role": "student", "status": "inactive", "college_id": 8},
    {"id": 3, "first_name": "Cy", "last_name": "Ada", "email": "cy@north.edu",
     "username": "cy", "role": "student", "status": "active", "college_id": "7"},
]

COLLEGES = [
    {"id": 7, "name": "North Campus", "domain": "north.edu", "subscription_status": "active"},
    {"id": 8, "name": "South Campus", "domain": "south.edu", "subscription_status": "suspended"},
]


@pytest.fixture()
def seeded(logged_in, backend):
    backend.seed("/admin/users", USERS)
    backend.seed("/admin/colleges", COLLEGES)
    return logged_in


@pytest.mark.asyncio
async def test_get_users_unfiltered(seeded, backend):
    page = await seeded.admin.get_users()
    assert len(page) == 3
    assert page.pagination == {"total": 3}
    assert backend.last.method == "GET"
    assert backend.last.url.path == "/api/admin/users"


@pytest.mark.asyncio
async def test_get_users_search_matches_any_name_field(seeded):
    page = await seeded.admin.get_users(search="ADA")
    assert [u["id"] for u in page.items] == [1, 3]


@pytest.mark.asyncio
async def test_get_users_role_and_status_filters_are_client_side(seeded, backend):
    page = await seeded.admin.get_users(role="student", status="active")
    assert [u["id"] for u in page.items] == [3]
    assert "role" not in backend.last.url.params


@pytest.mark.asyncio
async def test_get_users_college_filter_tolerates_string_ids(seeded):
    page = await seeded.admin.get_users(college_id=7)
    assert [u["id"] for u in page.items] == [1, 3]


@pytest.mark.asyncio
async def test_get_users_all_means_no_filter(seeded):
    page = await seeded.admin.get_users(role="all", status="all", college_id="all")
    assert len(page) == 3


@pytest.mark.asyncio
async def test_get_colleges_filters(seeded):
    page = await seeded.admin.get_colleges(search="south")
    assert [c["id"] for c in page.items] == [8]
    page = await seeded.admin.get_colleges(status="active")
    assert [c["id"] for c in page.items] == [7]


@pytest.mark.asyncio
async def test_update_and_delete_user_paths(seeded, backend):
    await seeded.admin.update_user(2, {"status": "active"})
    assert backend.last.method == "PUT"
    assert backend.last.url.path == "/api/admin/users/2"
    assert json.loads(backend.last.content) == {"status": "active"}

    await seeded.admin.delete_user(2)
    assert backend.last.method == "DELETE"
    assert backend.last.url.path == "/api/admin/users/2"


@pytest.mark.asyncio
async def test_delete_missing_user_propagates(seeded):
    with pytest.raises(HttpError) as exc:
        await seeded.admin.delete_user(999)
    assert exc.value.status_code == 404


@pytest.mark.asyncio
async def test_password_endpoints(seeded, backend):
    await seeded.admin.change_password({"current_password": "a", "new_password": "b"})
    assert (backend.last.method, backend.last.url.path) == ("PUT", "/api/admin/change-password")

    await seeded.admin.reset_user_password(2, {"new_password": "c"})
    assert (backend.last.method, backend.last.url.path) == ("PUT", "/api/admin/users/2/reset-password")

    backend.respond("POST", "/admin/generate-password", 200, {"password": "Xy7#pQ"})
    body = await seeded.admin.generate_secure_password()
    assert body["password"] == "Xy7#pQ"
    assert backend.last.method == "POST"


@pytest.mark.asyncio
async def test_dashboard_stats(seeded, backend):
    backend.respond("GET", "/admin/dashboard/stats", 200, {"colleges": 2, "users": 3})
    assert (await seeded.admin.get_dashboard_stats())["users"] == 3


@pytest.mark.asyncio
async def test_per_college_paths(seeded, backend):
    await seeded.admin.get_departments(7)
    assert backend.last.url.path == "/api/admin/colleges/7/departments"
    await seeded.admin.get_fee_collections(7)
    assert backend.last.url.path == "/api/admin/colleges/7/fee-collections"


@pytest.mark.asyncio
async def test_get_logs_pagination_and_filters(seeded, backend):
    backend.respond("GET", "/admin/logs", 200, {
        "logs": [{"id": 1, "action": "LOGIN"}],
        "pagination": {"total": 41, "page": 2},
        "filters": {"roles": ["teacher"], "actions": ["LOGIN"], "entities": []},
    })
    page = await seeded.admin.get_logs(page=2, limit=20, action="LOGIN", user_id="")
    assert page.items == [{"id": 1, "action": "LOGIN"}]
    assert page.pagination["total"] == 41
    assert page.filters["actions"] == ["LOGIN"]
    assert dict(backend.last.url.params) == {"page": "2", "limit": "20", "action": "LOGIN"}


@pytest.mark.asyncio
async def test_export_logs_returns_csv_bytes(seeded, backend):
    backend.respond("GET", "/admin/logs/export", 200, content=b"id,action\n1,LOGIN\n")
    data = await seeded.admin.export_logs(start_date="2024-01-01")
    assert data == b"id,action\n1,LOGIN\n"
    params = dict(backend.last.url.params)
    assert params == {"start_date": "2024-01-01", "format": "csv"}


@pytest.mark.asyncio
async def test_get_logs_bare_list_body(seeded, backend):
    backend.respond("GET", "/admin/logs", 200, [{"id": 7, "action": "LOGOUT"}])
    page = await seeded.admin.get_logs()
    assert page.items == [{"id": 7, "action": "LOGOUT"}]
    assert page.pagination is None
    assert page.filters is None
