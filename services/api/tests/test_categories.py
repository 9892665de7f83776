"""Tests for /api/categories."""

import pytest
from httpx import AsyncClient

from conftest import read_document


@pytest.mark.asyncio
async def test_list_categories(client: AsyncClient):
    response = await client.get("/api/categories")
    assert response.status_code == 200
    assert response.json() == [
        {"id": "cat-1", "name": "Perfume"},
        {"id": "cat-2", "name": "Body care"},
    ]


@pytest.mark.asyncio
async def test_get_category(client: AsyncClient):
    response = await client.get("/api/categories/cat-2")
    assert response.status_code == 200
    assert response.json() == {"id": "cat-2", "name": "Body care"}


@pytest.mark.asyncio
async def test_get_missing_category_returns_error_envelope(client: AsyncClient):
    response = await client.get("/api/categories/missing")
    assert response.status_code == 404
    error = response.json()["error"]
    assert error["code"] == "NOT_FOUND"
    assert error["detail"] == {"id": "missing"}


@pytest.mark.asyncio
async def test_create_category(client: AsyncClient, app, data_dir):
    response = await client.post("/api/categories", json={"name": "Gift sets"})
    assert response.status_code == 201
    created = response.json()
    assert created["name"] == "Gift sets"
    assert created["id"]

    listed = (await client.get("/api/categories")).json()
    assert listed[-1] == created

    await app.state.store.flush()
    assert read_document(data_dir, "categories")[-1] == created


@pytest.mark.asyncio
async def test_create_ignores_client_supplied_id(client: AsyncClient):
    response = await client.post("/api/categories", json={"id": "cat-1", "name": "Dup"})
    assert response.status_code == 201
    assert response.json()["id"] != "cat-1"


@pytest.mark.asyncio
async def test_rapid_creates_get_unique_ids(client: AsyncClient):
    ids = []
    for i in range(25):
        response = await client.post("/api/categories", json={"name": f"c{i}"})
        ids.append(response.json()["id"])
    assert len(set(ids)) == len(ids)


@pytest.mark.asyncio
async def test_update_category(client: AsyncClient):
    response = await client.put("/api/categories/cat-1", json={"name": "Fragrance"})
    assert response.status_code == 200
    assert response.json() == {"id": "cat-1", "name": "Fragrance"}
    assert (await client.get("/api/categories/cat-1")).json()["name"] == "Fragrance"


@pytest.mark.asyncio
async def test_update_missing_category(client: AsyncClient):
    response = await client.put("/api/categories/missing", json={"name": "x"})
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_category(client: AsyncClient):
    response = await client.delete("/api/categories/cat-2")
    assert response.status_code == 200
    assert response.json() == {"message": "Category deleted"}

    assert (await client.get("/api/categories/cat-2")).status_code == 404


@pytest.mark.asyncio
async def test_delete_category_leaves_products_orphaned(client: AsyncClient):
    await client.delete("/api/categories/cat-2")

    products = (await client.get("/api/products", params={"categoryId": "cat-2"})).json()
    assert [p["id"] for p in products] == ["p3"]


@pytest.mark.asyncio
async def test_delete_missing_category(client: AsyncClient):
    response = await client.delete("/api/categories/missing")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_create_category_with_numeric_name(client: AsyncClient):
    response = await client.post("/api/categories", json={"name": 2024})
    assert response.status_code == 201
    assert response.json()["name"] == "2024"


@pytest.mark.asyncio
async def test_create_category_with_malformed_body(client: AsyncClient):
    response = await client.post("/api/categories", json={"name": {"nested": True}})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "BAD_REQUEST"
