# backend/catalog_admin/schemas/product_schema.py
"""
Esquemas Pydantic para el modelo Product.

En la API los campos viajan en camelCase (stockQuantity, imageUrl, categoryIds);
los alias generados con to_camel los mapean a los atributos snake_case.
"""

from decimal import Decimal
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .category_schema import CategoryResponse # Importamos el schema de respuesta de categoría

# ========================================
# ESQUEMAS DE ENTRADA
# ========================================

class ProductPayload(BaseModel):
    """
    Cuerpo de POST/PUT /products tal como llega del cliente.

    Los campos no tienen tipos estrictos a propósito: el orden de validación y
    los mensajes de error ("Invalid price", ...) forman parte del contrato del
    servicio, que los comprueba en validate_product_payload().
    """
    name: Any = None
    description: Any = None
    price: Any = None
    stock_quantity: Any = None
    image_url: Any = None
    category_ids: Any = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductData(BaseModel):
    """Datos de producto ya validados y normalizados, listos para persistir."""
    name: str
    description: Optional[str] = None
    price: Decimal
    stock_quantity: int
    image_url: Optional[str] = None
    category_ids: List[int] = []


# ========================================
# ESQUEMAS DE RESPUESTA
# ========================================

class ProductCategoryResponse(BaseModel):
    """Arista producto-categoría con la categoría expandida."""
    product_id: int
    category_id: int
    category: CategoryResponse

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ProductResponse(BaseModel):
    """
    Esquema de respuesta para un producto, con sus categorías expandidas
    para que la UI no necesite peticiones adicionales.
    """
    id: int
    name: str
    description: Optional[str] = None
    price: float
    stock_quantity: int
    image_url: Optional[str] = None
    categories: List[ProductCategoryResponse] = []

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class ProductListResponse(BaseModel):
    """Página de productos más el total que cumple los filtros (sin paginar)."""
    products: List[ProductResponse]
    total: int
