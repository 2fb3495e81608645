"""HTTP contract tests for /categories."""

import pytest


@pytest.mark.asyncio
async def test_list_categories(client, categories):
    response = await client.get("/categories")

    assert response.status_code == 200
    assert response.json() == [{"id": 1, "name": "Tools"}, {"id": 2, "name": "Garden"}]


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": 3}, {"name": "n" * 256}])
async def test_create_rejects_invalid_name(client, body):
    response = await client.post("/categories", json=body)

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid category name"


@pytest.mark.asyncio
async def test_duplicate_names_are_allowed(client, categories):
    response = await client.post("/categories", json={"name": "Tools"})

    assert response.status_code == 200
    assert response.json() == {"id": 3, "name": "Tools"}


@pytest.mark.asyncio
async def test_rename_category(client, categories):
    response = await client.put("/categories/2", json={"name": "Outdoor"})

    assert response.status_code == 200
    assert response.json() == {"id": 2, "name": "Outdoor"}


@pytest.mark.asyncio
async def test_rename_missing_category_is_404(client):
    response = await client.put("/categories/77", json={"name": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"error": "Category not found"}


@pytest.mark.asyncio
async def test_rename_validates_name_before_lookup(client):
    response = await client.put("/categories/77", json={"name": ""})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid category name"


@pytest.mark.asyncio
async def test_delete_category_detaches_products(client, categories):
    created = await client.post(
        "/products", json={"name": "Rake", "price": 12, "stockQuantity": 3, "categoryIds": [1, 2]}
    )
    product_id = created.json()["id"]

    response = await client.delete("/categories/2")

    assert response.status_code == 200
    assert response.json() == {"message": "Category deleted"}
    product = (await client.get(f"/products/{product_id}")).json()
    assert [link["categoryId"] for link in product["categories"]] == [1]
    listing = await client.get("/products", params={"categoryId": 2})
    assert listing.json() == {"products": [], "total": 0}
    assert [c["id"] for c in (await client.get("/categories")).json()] == [1]


@pytest.mark.asyncio
async def test_delete_missing_category_is_404(client):
    response = await client.delete("/categories/5")

    assert response.status_code == 404
    assert response.json() == {"error": "Category not found"}
