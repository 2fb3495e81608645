# backend/catalog_admin/crud/product_crud.py

"""
Operaciones CRUD para el modelo Product y su tabla de unión con categorías.

Este módulo es la capa de acceso a datos del catálogo de productos. Ninguna
función hace commit: la capa de servicio abre la transacción y decide cuándo
confirmar, de modo que los pasos de una mutación (producto + filas de unión)
se aplican juntos o no se aplican.

Funcionalidades principales:
- Construcción de filtros combinables (categoría, búsqueda por nombre)
- Listado paginado con las categorías precargadas (selectinload, sin N+1)
- Conteo total con los mismos filtros, ignorando la paginación
- Reemplazo completo de las asociaciones producto-categoría
"""

from typing import List, Optional, Sequence
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog_admin.db.models.product_model import Product, ProductCategory
from catalog_admin.schemas import product_schema

import logging

logger = logging.getLogger(__name__)

# ========================================
# CONSTRUCCIÓN DE CONSULTAS
# ========================================

def build_product_filters(category_id: Optional[int] = None, search: Optional[str] = None) -> list:
    """
    Construye las condiciones WHERE del listado de productos.

    - category_id: productos con al menos una fila de unión con esa categoría (EXISTS)
    - search: el nombre contiene el texto, sin distinguir mayúsculas; % y _ se tratan literalmente

    Las condiciones se combinan con AND; un filtro ausente no restringe nada.
    """
    conditions = []
    if category_id is not None:
        conditions.append(Product.categories.any(ProductCategory.category_id == category_id))
    if search:
        conditions.append(Product.name.icontains(search, autoescape=True))
    return conditions


def _with_categories(query):
    """Precarga las filas de unión y su categoría para la respuesta expandida."""
    return query.options(selectinload(Product.categories).selectinload(ProductCategory.category))

# ========================================
# OPERACIONES DE LECTURA (READ)
# ========================================

async def get_product(db: AsyncSession, product_id: int, refresh: bool = False) -> Optional[Product]:
    """
    Obtiene un producto por ID con sus categorías precargadas.

    refresh=True fuerza populate_existing, necesario tras reemplazar las
    asociaciones dentro de la misma sesión.
    """
    query = _with_categories(select(Product)).filter(Product.id == product_id)
    if refresh:
        query = query.execution_options(populate_existing=True)
    result = await db.execute(query)
    return result.scalars().first()


async def get_product_row(db: AsyncSession, product_id: int) -> Optional[Product]:
    """
    Obtiene solo la fila del producto, sin cargar sus asociaciones.

    Se usa antes de reemplazar las categorías: si las filas de unión antiguas
    quedaran en la sesión chocarían con las nuevas de misma clave.
    """
    return await db.get(Product, product_id)


async def get_products(
    db: AsyncSession,
    skip: int = 0,
    limit: int = 10,
    category_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[Product]:
    """Obtiene una página de productos filtrada, ordenada por ID."""
    query = (
        _with_categories(select(Product))
        .where(*build_product_filters(category_id, search))
        .order_by(Product.id)
        .offset(max(skip, 0))
        .limit(max(limit, 0))
    )
    result = await db.execute(query)
    return result.scalars().all()


async def count_products(db: AsyncSession, category_id: Optional[int] = None, search: Optional[str] = None) -> int:
    """Cuenta los productos que cumplen los filtros, sin skip/limit."""
    query = select(func.count()).select_from(Product).where(*build_product_filters(category_id, search))
    result = await db.execute(query)
    return result.scalar_one()

# ========================================
# OPERACIONES DE ESCRITURA (CREATE, UPDATE, DELETE)
# ========================================

async def create_product(db: AsyncSession, product_data: product_schema.ProductData) -> Product:
    """Inserta el producto y hace flush para obtener su ID. No añade asociaciones."""
    db_product = Product(
        name=product_data.name,
        description=product_data.description,
        price=product_data.price,
        stock_quantity=product_data.stock_quantity,
        image_url=product_data.image_url,
    )
    db.add(db_product)
    await db.flush()
    return db_product


async def update_product_fields(db: AsyncSession, db_product: Product, product_data: product_schema.ProductData) -> Product:
    """Sobrescribe todos los campos escalares (PUT completo, no parcial)."""
    update_data = product_data.model_dump(exclude={"category_ids"})
    for key, value in update_data.items():
        setattr(db_product, key, value)
    await db.flush()
    return db_product


async def add_product_categories(db: AsyncSession, product_id: int, category_ids: Sequence[int]) -> None:
    """Inserta una fila de unión por categoría. Un ID inexistente falla en el flush (FK)."""
    if not category_ids:
        return
    db.add_all([ProductCategory(product_id=product_id, category_id=category_id) for category_id in category_ids])
    await db.flush()


async def delete_product_categories(db: AsyncSession, product_id: int) -> int:
    """Borra todas las filas de unión del producto. Devuelve cuántas se borraron."""
    result = await db.execute(
        delete(ProductCategory)
        .where(ProductCategory.product_id == product_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def replace_product_categories(db: AsyncSession, product_id: int, category_ids: Sequence[int]) -> None:
    """
    Reemplazo completo de las asociaciones: borra todas y vuelve a crear la lista nueva.

    No calcula diferencias; aplicar dos veces la misma lista deja el mismo conjunto.
    """
    removed = await delete_product_categories(db, product_id)
    await add_product_categories(db, product_id, category_ids)
    logger.debug(f"Producto {product_id}: {removed} asociaciones eliminadas, {len(category_ids)} creadas")


async def delete_product(db: AsyncSession, product_id: int) -> int:
    """Borra la fila del producto. Devuelve 0 si no existía."""
    result = await db.execute(
        delete(Product)
        .where(Product.id == product_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount
