# backend/catalog_admin/api/v1/endpoints/products.py

"""
Endpoints REST para operaciones CRUD y listado de productos.

Los errores de dominio (ValidationError, NotFoundError, ...) se propagan
desde el servicio y los traducen a {"error": ...} los manejadores de main.py.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from catalog_admin.api import deps
from catalog_admin.schemas import product_schema
from catalog_admin.schemas.category_schema import MessageResponse
from catalog_admin.services.product_service import product_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=product_schema.ProductListResponse)
async def read_products(
    db: AsyncSession = Depends(deps.get_db),
    page: int = 1,
    page_size: int = Query(default=10, alias="pageSize"),
    category_id: Optional[str] = Query(default=None, alias="categoryId"),
    search: Optional[str] = None,
) -> product_schema.ProductListResponse:
    """Obtiene una página de productos filtrada y el total de coincidencias."""
    logger.debug(f"📋 PRODUCTOS: Listando page={page}, pageSize={page_size}, categoryId={category_id}, search={search!r}")

    result = await product_service.list_products(
        db, page=page, page_size=page_size, category_id=category_id, search=search
    )

    logger.debug(f"📋 PRODUCTOS: {len(result['products'])} en página, {result['total']} en total")
    return product_schema.ProductListResponse(
        products=[product_schema.ProductResponse.model_validate(p) for p in result["products"]],
        total=result["total"],
    )


@router.get("/{product_id}", response_model=product_schema.ProductResponse)
async def read_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> product_schema.ProductResponse:
    """Obtiene los detalles de un producto por ID."""
    return await product_service.get_product(db, product_id)


@router.post("", response_model=product_schema.ProductResponse)
async def create_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_in: product_schema.ProductPayload,
) -> product_schema.ProductResponse:
    """Crea un nuevo producto en el catálogo."""
    logger.info(f"🆕 PRODUCTO: Creando producto '{product_in.name}'")

    product = await product_service.create_new_product(db, product_in)

    logger.info(f"✅ PRODUCTO: Creado exitosamente ID {product.id}")
    return product


@router.put("/{product_id}", response_model=product_schema.ProductResponse)
async def update_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
    product_in: product_schema.ProductPayload,
) -> product_schema.ProductResponse:
    """Actualiza un producto existente y reemplaza sus categorías."""
    logger.info(f"🔄 PRODUCTO: Actualizando producto ID {product_id}")

    product = await product_service.update_existing_product(db, product_id, product_in)

    logger.info(f"✅ PRODUCTO: Actualizado exitosamente ID {product_id}")
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    *,
    db: AsyncSession = Depends(deps.get_db),
    product_id: int,
) -> MessageResponse:
    """Elimina un producto y sus asociaciones con categorías."""
    logger.info(f"🗑️ PRODUCTO: Eliminando producto ID {product_id}")

    await product_service.delete_existing_product(db, product_id)

    logger.info(f"✅ PRODUCTO: Eliminado exitosamente ID {product_id}")
    return MessageResponse(message="Product deleted")
