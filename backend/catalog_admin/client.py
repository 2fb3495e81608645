# backend/catalog_admin/client.py
"""
Cliente HTTP asíncrono de la API del catálogo.

Envuelve cada llamada con httpx y normaliza las respuestas de error en una
única excepción, CatalogApiError, con el mejor mensaje legible disponible:
1. el campo "message" o "error" si el cuerpo es JSON
2. el texto crudo del cuerpo
3. "Request failed: <status>" si el cuerpo está vacío

La normalización nunca lanza un error secundario: si el cuerpo no se puede
interpretar como JSON se usa el texto tal cual.

Ejemplo:
    async with CatalogApiClient() as api:
        page = await api.list_products(page=1, page_size=10, search="widget")
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from catalog_admin.core.config import settings

logger = logging.getLogger(__name__)


class CatalogApiError(Exception):
    """Respuesta no exitosa de la API del catálogo."""

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def extract_error_message(status_code: int, text: str) -> str:
    """Obtiene el mensaje de error de un cuerpo de respuesta sin lanzar excepciones."""
    if not text:
        return f"Request failed: {status_code}"
    try:
        data = json.loads(text)
    except ValueError:
        return text
    if isinstance(data, dict):
        for key in ("message", "error"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value
    return text


class CatalogApiClient:
    """
    Cliente tipado de la API de productos y categorías.

    Se puede inyectar un httpx.AsyncClient ya configurado (por ejemplo con
    httpx.ASGITransport en tests); en ese caso el cliente no lo cierra.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.CATALOG_API_BASE_URL,
            timeout=timeout or settings.CLIENT_TIMEOUT,
        )

    async def __aenter__(self) -> "CatalogApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ========================================
    # NÚCLEO DE PETICIONES
    # ========================================

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        payload: Any = None,
    ) -> Any:
        """
        Ejecuta la petición y devuelve el JSON de la respuesta.

        httpx solo añade Content-Type: application/json cuando hay cuerpo.

        Raises:
            CatalogApiError: si el código de estado no es 2xx
        """
        response = await self._client.request(method, path, params=params, json=payload)

        if not response.is_success:
            text = response.text
            message = extract_error_message(response.status_code, text)
            logger.warning(f"⚠️ API: {method} {path} -> {response.status_code}: {message}")
            raise CatalogApiError(message, status_code=response.status_code, body=text)

        return response.json()

    # ========================================
    # PRODUCTOS
    # ========================================

    async def list_products(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        search: Optional[str] = None,
        category_id: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Devuelve {"products": [...], "total": int}. Solo envía los parámetros informados."""
        params = {}
        if page:
            params["page"] = page
        if page_size:
            params["pageSize"] = page_size
        if search:
            params["search"] = search
        if category_id is not None and category_id != "":
            params["categoryId"] = category_id
        return await self._request("GET", "/products", params=params)

    async def create_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", "/products", payload=payload)

    async def update_product(self, product_id: int, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/products/{product_id}", payload=payload)

    async def delete_product(self, product_id: int) -> Dict[str, str]:
        return await self._request("DELETE", f"/products/{product_id}")

    # ========================================
    # CATEGORÍAS
    # ========================================

    async def list_categories(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/categories")

    async def create_category(self, name: str) -> Dict[str, Any]:
        return await self._request("POST", "/categories", payload={"name": name})

    async def update_category(self, category_id: int, name: str) -> Dict[str, Any]:
        return await self._request("PUT", f"/categories/{category_id}", payload={"name": name})

    async def delete_category(self, category_id: int) -> Dict[str, str]:
        return await self._request("DELETE", f"/categories/{category_id}")
