"""Service-level tests: transactions, error mapping and listing through ProductService."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError

from catalog_admin.core.exceptions import ConflictError, NotFoundError, PersistenceError, ValidationError
from catalog_admin.crud import product_crud
from catalog_admin.db.models.product_model import Product, ProductCategory
from catalog_admin.schemas.product_schema import ProductPayload
from catalog_admin.services.category_service import category_service
from catalog_admin.services.product_service import product_service


def payload(**overrides):
    data = {"name": "Widget", "price": "4.50", "stockQuantity": 2}
    data.update(overrides)
    return ProductPayload.model_validate(data)


async def count_rows(session_factory, model):
    async with session_factory() as db:
        return (await db.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.asyncio
async def test_create_persists_product_and_links(session_factory):
    async with session_factory() as db:
        await category_service.create_new_category(db, "Tools")
    async with session_factory() as db:
        product = await product_service.create_new_product(db, payload(categoryIds=[1]))

    assert product.id is not None
    assert [link.category.name for link in product.categories] == ["Tools"]
    assert await count_rows(session_factory, ProductCategory) == 1


@pytest.mark.asyncio
async def test_validation_error_happens_before_any_write(session_factory):
    async with session_factory() as db:
        with pytest.raises(ValidationError):
            await product_service.create_new_product(db, payload(stockQuantity=-4))
        assert not db.in_transaction()

    assert await count_rows(session_factory, Product) == 0


@pytest.mark.asyncio
async def test_unknown_category_maps_to_conflict_and_rolls_back(session_factory):
    async with session_factory() as db:
        with pytest.raises(ConflictError) as exc_info:
            await product_service.create_new_product(db, payload(categoryIds=[404]))

    assert "FOREIGN KEY" in exc_info.value.message
    assert exc_info.value.status_code == 400
    assert await count_rows(session_factory, Product) == 0


@pytest.mark.asyncio
async def test_delete_is_atomic_when_second_step_fails(session_factory, monkeypatch):
    async with session_factory() as db:
        await category_service.create_new_category(db, "Tools")
    async with session_factory() as db:
        product = await product_service.create_new_product(db, payload(categoryIds=[1]))

    async def failing_delete(db, product_id):
        raise OperationalError("DELETE FROM products", {}, Exception("database is locked"))

    monkeypatch.setattr(product_crud, "delete_product", failing_delete)

    async with session_factory() as db:
        with pytest.raises(PersistenceError) as exc_info:
            await product_service.delete_existing_product(db, product.id)

    assert exc_info.value.message == "database is locked"
    assert await count_rows(session_factory, ProductCategory) == 1
    assert await count_rows(session_factory, Product) == 1


@pytest.mark.asyncio
async def test_delete_missing_product_raises_not_found(session_factory):
    async with session_factory() as db:
        with pytest.raises(NotFoundError) as exc_info:
            await product_service.delete_existing_product(db, 1)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_list_products_returns_total_independent_of_page(session_factory):
    for i in range(7):
        async with session_factory() as db:
            await product_service.create_new_product(db, payload(name=f"Item {i}"))

    async with session_factory() as db:
        result = await product_service.list_products(db, page=3, page_size=3)

    assert result["total"] == 7
    assert [p.name for p in result["products"]] == ["Item 6"]


@pytest.mark.asyncio
async def test_negative_page_size_is_not_rejected(session_factory):
    async with session_factory() as db:
        await product_service.create_new_product(db, payload())
    async with session_factory() as db:
        result = await product_service.list_products(db, page=0, page_size=-1)

    assert result == {"products": [], "total": 1}


@pytest.mark.asyncio
async def test_delete_category_keeps_products(session_factory):
    async with session_factory() as db:
        await category_service.create_new_category(db, "Tools")
    async with session_factory() as db:
        product = await product_service.create_new_product(db, payload(categoryIds=[1]))
    async with session_factory() as db:
        await category_service.delete_existing_category(db, 1)

    async with session_factory() as db:
        remaining = await product_service.get_product(db, product.id)
    assert remaining.categories == []
    assert await count_rows(session_factory, ProductCategory) == 0
