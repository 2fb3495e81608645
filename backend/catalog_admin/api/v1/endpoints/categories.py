"""
Endpoints REST para operaciones CRUD de categorías.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List

from catalog_admin.api import deps
from catalog_admin.schemas import category_schema
from catalog_admin.services.category_service import category_service

router = APIRouter()

@router.get("", response_model=List[category_schema.CategoryResponse])
async def read_categories(
    db: AsyncSession = Depends(deps.get_db),
) -> List[category_schema.CategoryResponse]:
    """Obtiene todas las categorías."""
    return await category_service.list_categories(db)

@router.post("", response_model=category_schema.CategoryResponse)
async def create_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_in: category_schema.CategoryPayload,
) -> category_schema.CategoryResponse:
    """Crea una nueva categoría."""
    return await category_service.create_new_category(db, category_in.name)

@router.put("/{category_id}", response_model=category_schema.CategoryResponse)
async def update_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
    category_in: category_schema.CategoryPayload,
) -> category_schema.CategoryResponse:
    """Renombra una categoría existente."""
    return await category_service.update_existing_category(db, category_id, category_in.name)

@router.delete("/{category_id}", response_model=category_schema.MessageResponse)
async def delete_category(
    *,
    db: AsyncSession = Depends(deps.get_db),
    category_id: int,
) -> category_schema.MessageResponse:
    """Elimina una categoría; los productos asociados se conservan."""
    await category_service.delete_existing_category(db, category_id)
    return category_schema.MessageResponse(message="Category deleted")
