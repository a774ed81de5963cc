"""Waste routes: the four read endpoints end to end over SQLite.

Invariants:
    - Every body is {success: true, message, data} or {success: false, message, status, path}
    - List-types, by-type and name search answer 404 on empty results
    - The paginated list answers an empty page (total=0) instead of 404
    - Repository failures carrying the record-not-found code answer 404
"""

import pytest

from app.core.errors import DATABASE_ERROR, RECORD_NOT_FOUND, UpstreamError

SUCCESS_KEYS = {"success", "message", "data"}
ERROR_KEYS = {"success", "message", "status", "path"}


# ─── GET /api/waste-types ────────────────────────────────────────

async def test_list_waste_types_empty_table_returns_404(client):
    res = await client.get("/api/waste-types")
    assert res.status_code == 404
    assert res.json() == {
        "success": False,
        "message": "No waste types found.",
        "status": 404,
        "path": "/api/waste-types",
    }


async def test_list_waste_types_sorted_by_name(client, seed_catalog):
    await seed_catalog(types=["Plastic", "Glass"])
    res = await client.get("/api/waste-types")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == SUCCESS_KEYS
    assert body["success"] is True
    assert body["message"] == "Success"
    assert [t["waste_type_name"] for t in body["data"]] == ["Glass", "Plastic"]


# ─── GET /api/waste/type/{id} ────────────────────────────────────

async def test_list_waste_by_type_returns_items_with_nested_type(client, seed_catalog):
    types, _ = await seed_catalog(
        types=["Plastic"], waste=[("Straw", 0), ("Bottle", 0)],
    )
    type_id = types[0].waste_type_id
    res = await client.get(f"/api/waste/type/{type_id}")
    assert res.status_code == 200
    data = res.json()["data"]
    assert [w["waste_name"] for w in data] == ["Bottle", "Straw"]
    assert data[0]["waste_type"]["waste_type_name"] == "Plastic"


@pytest.mark.parametrize("raw_id", ["abc", "0", "-1"])
async def test_list_waste_by_type_rejects_invalid_id(client, raw_id):
    res = await client.get(f"/api/waste/type/{raw_id}")
    assert res.status_code == 400
    body = res.json()
    assert set(body) == ERROR_KEYS
    assert body["message"] == "Invalid Waste Type provided"
    assert body["path"] == f"/api/waste/type/{raw_id}"


async def test_list_waste_by_type_without_rows_returns_404(client, seed_catalog):
    await seed_catalog(types=["Plastic"])
    res = await client.get("/api/waste/type/999")
    assert res.status_code == 404
    assert res.json()["message"] == "No waste found for the given ID."


# ─── GET /api/waste ──────────────────────────────────────────────

async def test_list_waste_second_page_of_120(client, seed_catalog):
    await seed_catalog(
        types=["Mixed"], waste=[(f"Item {i:03d}", 0) for i in range(120)],
    )
    res = await client.get("/api/waste", params={"page": "2", "limit": "50"})
    assert res.status_code == 200
    data = res.json()["data"]
    assert len(data["items"]) <= 50
    assert data["items"][0]["waste_name"] == "Item 050"
    assert data["pagination"] == {
        "total": 120, "page": 2, "limit": 50, "totalPages": 3,
    }


async def test_list_waste_search_filters_and_counts(client, seed_catalog):
    await seed_catalog(
        types=["Mixed"],
        waste=[("Plastic Bottle", 0), ("glass bottle", 0), ("Can", 0)],
    )
    res = await client.get("/api/waste", params={"search": "  BOTTLE "})
    data = res.json()["data"]
    assert {w["waste_name"] for w in data["items"]} == {"Plastic Bottle", "glass bottle"}
    assert data["pagination"]["total"] == 2


async def test_list_waste_empty_result_is_success_not_404(client):
    res = await client.get("/api/waste", params={"search": "nothing"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["data"] == {
        "items": [],
        "pagination": {"total": 0, "page": 1, "limit": 10, "totalPages": 0},
    }


async def test_list_waste_clamps_bad_pagination(client):
    res = await client.get("/api/waste", params={"page": "-3", "limit": "1000"})
    assert res.status_code == 200
    pagination = res.json()["data"]["pagination"]
    assert pagination["page"] == 1
    assert pagination["limit"] == 100


async def test_list_waste_page_past_database_offset_range_is_empty_success(
    client, seed_catalog,
):
    await seed_catalog(types=["Mixed"], waste=[("Can", 0)])
    res = await client.get(
        "/api/waste", params={"page": "99999999999999999999", "limit": "10"},
    )
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["items"] == []
    assert data["pagination"]["total"] == 1
    assert data["pagination"]["totalPages"] == 1


async def test_list_waste_by_type_rejects_id_beyond_key_range(client):
    res = await client.get("/api/waste/type/99999999999999999999")
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid Waste Type provided"


# ─── GET /api/waste/search ───────────────────────────────────────

async def test_search_without_name_returns_400(client):
    res = await client.get("/api/waste/search")
    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "message": "Waste name is required.",
        "status": 400,
        "path": "/api/waste/search",
    }


async def test_search_with_blank_name_returns_400(client):
    res = await client.get("/api/waste/search", params={"name": "   "})
    assert res.status_code == 400


async def test_search_finds_case_insensitive_matches(client, seed_catalog):
    await seed_catalog(types=["Mixed"], waste=[("Pizza Box", 0), ("Cereal box", 0)])
    res = await client.get("/api/waste/search", params={"name": "BOX"})
    assert res.status_code == 200
    assert [w["waste_name"] for w in res.json()["data"]] == ["Cereal box", "Pizza Box"]


async def test_search_caps_results_at_fifty(client, seed_catalog):
    await seed_catalog(types=["Mixed"], waste=[(f"Cup {i:02d}", 0) for i in range(60)])
    res = await client.get("/api/waste/search", params={"name": "cup"})
    assert len(res.json()["data"]) == 50


async def test_search_without_match_returns_404(client, seed_catalog):
    await seed_catalog(types=["Mixed"], waste=[("Can", 0)])
    res = await client.get("/api/waste/search", params={"name": "zzz"})
    assert res.status_code == 404
    assert res.json()["message"] == "No waste found with the given name."


# ─── Repository failures ─────────────────────────────────────────

async def test_record_not_found_code_maps_to_404(client, fake_repo):
    fake_repo.error = UpstreamError(RECORD_NOT_FOUND, "list_waste_types")
    res = await client.get("/api/waste-types")
    assert res.status_code == 404
    body = res.json()
    assert set(body) == ERROR_KEYS
    assert body["status"] == 404


async def test_database_error_maps_to_500_without_details(client, fake_repo):
    fake_repo.error = UpstreamError(DATABASE_ERROR, "search", "password authentication failed")
    res = await client.get("/api/waste/search", params={"name": "can"})
    assert res.status_code == 500
    assert "password" not in res.text


async def test_unexpected_exception_maps_to_500(client, fake_repo):
    fake_repo.error = RuntimeError("boom")
    res = await client.get("/api/waste", params={"page": "1"})
    assert res.status_code == 500
    assert res.json() == {
        "success": False,
        "message": "An unexpected error occurred",
        "status": 500,
        "path": "/api/waste",
    }


async def test_paginated_list_runs_both_queries(client, fake_repo):
    fake_repo.rows = [{"waste_id": 1}]
    fake_repo.total = 1
    res = await client.get("/api/waste")
    assert res.status_code == 200
    assert sorted(fake_repo.calls) == ["count_waste", "list_waste"]
