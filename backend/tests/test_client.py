"""Tests for the catalog API client: request shaping and error normalization."""

import json

import httpx
import pytest

from catalog_admin.client import CatalogApiClient, CatalogApiError, extract_error_message


def mock_client(handler):
    transport = httpx.MockTransport(handler)
    return CatalogApiClient(client=httpx.AsyncClient(transport=transport, base_url="http://api.test"))


class TestExtractErrorMessage:

    def test_prefers_structured_message(self):
        assert extract_error_message(400, '{"message": "Boom", "error": "Other"}') == "Boom"

    def test_uses_error_field(self):
        assert extract_error_message(404, '{"error": "Product not found"}') == "Product not found"

    def test_falls_back_to_raw_text(self):
        assert extract_error_message(502, "<html>Bad gateway</html>") == "<html>Bad gateway</html>"
        assert extract_error_message(400, '["not", "an", "object"]') == '["not", "an", "object"]'
        assert extract_error_message(400, '{"error": 12}') == '{"error": 12}'

    def test_empty_body_uses_status(self):
        assert extract_error_message(503, "") == "Request failed: 503"


class TestRequests:

    @pytest.mark.asyncio
    async def test_content_type_only_sent_with_body(self):
        seen = []

        def handler(request):
            seen.append((request.method, request.headers.get("content-type"), request.content))
            return httpx.Response(200, json={"id": 1, "name": "Tools"})

        api = mock_client(handler)
        await api.list_categories()
        await api.create_category("Tools")
        await api.aclose()

        assert seen[0] == ("GET", None, b"")
        assert seen[1][:2] == ("POST", "application/json")
        assert json.loads(seen[1][2]) == {"name": "Tools"}

    @pytest.mark.asyncio
    async def test_list_products_sends_only_given_params(self):
        captured = {}

        def handler(request):
            captured.update(request.url.params)
            return httpx.Response(200, json={"products": [], "total": 0})

        api = mock_client(handler)
        await api.list_products(page=2, page_size=5, search="", category_id=3)
        await api.aclose()

        assert captured == {"page": "2", "pageSize": "5", "categoryId": "3"}

    @pytest.mark.asyncio
    async def test_error_response_raises_with_message_and_status(self):
        def handler(request):
            return httpx.Response(404, json={"error": "Product not found"})

        api = mock_client(handler)
        with pytest.raises(CatalogApiError) as exc_info:
            await api.delete_product(9)
        await api.aclose()

        assert exc_info.value.message == "Product not found"
        assert exc_info.value.status_code == 404
        assert json.loads(exc_info.value.body) == {"error": "Product not found"}

    @pytest.mark.asyncio
    async def test_unparseable_error_body_is_kept_verbatim(self):
        def handler(request):
            return httpx.Response(500, text="upstream exploded {")

        api = mock_client(handler)
        with pytest.raises(CatalogApiError, match="upstream exploded \\{"):
            await api.list_categories()
        await api.aclose()


@pytest.mark.asyncio
async def test_client_against_application(client):
    api = CatalogApiClient(client=client)

    category = await api.create_category("Tools")
    product = await api.create_product(
        {"name": "Widget", "price": 9.99, "stockQuantity": 5, "categoryIds": [category["id"]]}
    )
    page = await api.list_products(category_id=category["id"], search="widg")

    assert page["total"] == 1
    assert page["products"][0]["id"] == product["id"]

    with pytest.raises(CatalogApiError) as exc_info:
        await api.create_product({"name": "", "price": 9.99, "stockQuantity": 5})
    assert exc_info.value.message == "Invalid product name"
    assert exc_info.value.status_code == 400

    assert await api.delete_product(product["id"]) == {"message": "Product deleted"}
    with pytest.raises(CatalogApiError) as exc_info:
        await api.delete_product(product["id"])
    assert exc_info.value.status_code == 404
