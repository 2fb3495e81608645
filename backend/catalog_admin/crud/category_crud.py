# backend/catalog_admin/crud/category_crud.py

"""
Operaciones CRUD para el modelo Category.

Como en product_crud, ninguna función confirma la transacción; lo hace la
capa de servicio. Los nombres de categoría no son únicos.
"""

from typing import List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.db.models.category_model import Category
from catalog_admin.db.models.product_model import ProductCategory

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_category(db: AsyncSession, category_id: int) -> Optional[Category]:
    """
    Obtiene una categoría por su ID.

    Args:
        db: Sesión de SQLAlchemy
        category_id: ID único de la categoría

    Returns:
        Objeto Category si existe, None si no se encuentra
    """
    result = await db.execute(select(Category).filter(Category.id == category_id))
    return result.scalars().first()


async def get_categories(db: AsyncSession) -> List[Category]:
    """Obtiene todas las categorías ordenadas por ID."""
    result = await db.execute(select(Category).order_by(Category.id))
    return result.scalars().all()

# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_category(db: AsyncSession, name: str) -> Category:
    db_category = Category(name=name)
    db.add(db_category)
    await db.flush()  # Asigna el ID autoincremental
    return db_category


async def update_category(db: AsyncSession, db_category: Category, name: str) -> Category:
    db_category.name = name
    await db.flush()
    return db_category


async def delete_category_links(db: AsyncSession, category_id: int) -> int:
    """
    Borra las filas de unión que apuntan a la categoría.

    Es el primer paso del borrado: sin él la foreign key de
    product_categories impediría borrar la categoría.
    """
    result = await db.execute(
        delete(ProductCategory)
        .where(ProductCategory.category_id == category_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def delete_category(db: AsyncSession, category_id: int) -> int:
    """Borra la fila de la categoría. Devuelve 0 si no existía."""
    result = await db.execute(
        delete(Category)
        .where(Category.id == category_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount
