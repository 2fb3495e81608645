# backend/catalog_admin/services/product_service.py

"""
Capa de servicios para operaciones de negocio relacionadas con productos.

Esta capa implementa el patrón Service Layer para el dominio de productos,
orquestando las operaciones CRUD de varios pasos y aplicando las reglas de
negocio del catálogo.

Responsabilidades principales:
- Validación de la entrada antes de cualquier escritura
- Listado con filtros por categoría y nombre, paginado, con total
- Creación y actualización con reemplazo completo de categorías
- Borrado en dos pasos (filas de unión, luego el producto) en una transacción
- Traducción de errores de la base de datos a errores de dominio

Concurrencia:
El servicio no guarda estado entre peticiones. Dos actualizaciones simultáneas
del mismo producto no se detectan: la última en confirmar fija el conjunto de
categorías (no hay control optimista de versiones).
"""

from typing import Any, Dict, Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.core.exceptions import NotFoundError
from catalog_admin.crud import product_crud
from catalog_admin.db.models.product_model import Product
from catalog_admin.schemas import product_schema
from catalog_admin.services.transaction import mutation
from catalog_admin.services.validation import (
    pagination_window,
    parse_category_filter,
    validate_product_payload,
)

# Configurar logger
logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


class ProductService:
    """
    Servicio para operaciones de negocio relacionadas con productos.

    Cada método recibe la sesión de la petición; el servicio no mantiene
    conexiones propias.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def list_products(
        self,
        db: AsyncSession,
        page: int = 1,
        page_size: int = 10,
        category_id: Any = None,
        search: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Obtiene una página de productos y el total que cumple los filtros.

        Args:
            db: Sesión de SQLAlchemy
            page: Página 1-indexada
            page_size: Tamaño de página
            category_id: Solo productos asociados a esta categoría (vacío o 0: sin filtro)
            search: Texto contenido en el nombre (sin distinguir mayúsculas)

        Returns:
            {"products": [...], "total": int}, total sin aplicar la paginación
        """
        category_id = parse_category_filter(category_id)
        skip, take = pagination_window(page, page_size)
        products = await product_crud.get_products(
            db, skip=skip, limit=take, category_id=category_id, search=search
        )
        total = await product_crud.count_products(db, category_id=category_id, search=search)
        return {"products": products, "total": total}

    async def get_product(self, db: AsyncSession, product_id: int) -> Product:
        product = await product_crud.get_product(db, product_id)
        if not product:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    # ========================================
    # OPERACIONES DE ESCRITURA CON ORQUESTACIÓN
    # ========================================

    async def create_new_product(self, db: AsyncSession, product_in: product_schema.ProductPayload) -> Product:
        """
        Crea un producto y una fila de unión por cada categoría indicada.

        Raises:
            ValidationError: entrada inválida, sin tocar la base de datos
            ConflictError: alguna categoría no existe (mensaje del adaptador)
        """
        product_data = validate_product_payload(product_in)

        async with mutation(db, "Crear producto"):
            product = await product_crud.create_product(db, product_data)
            await product_crud.add_product_categories(db, product.id, product_data.category_ids)
            created = await product_crud.get_product(db, product.id, refresh=True)
        return created

    async def update_existing_product(
        self, db: AsyncSession, product_id: int, product_in: product_schema.ProductPayload
    ) -> Product:
        """
        Actualiza todos los campos del producto y reemplaza sus categorías.

        La validación es idéntica a la de creación. Las asociaciones se
        borran y se recrean (reemplazo completo, no diff).

        Raises:
            ValidationError: entrada inválida
            NotFoundError: el producto no existe
            ConflictError: alguna categoría no existe
        """
        product_data = validate_product_payload(product_in)

        async with mutation(db, f"Actualizar producto {product_id}"):
            product = await product_crud.get_product_row(db, product_id)
            if not product:
                raise NotFoundError(PRODUCT_NOT_FOUND)
            await product_crud.update_product_fields(db, product, product_data)
            await product_crud.replace_product_categories(db, product_id, product_data.category_ids)
            updated = await product_crud.get_product(db, product_id, refresh=True)
        return updated

    async def delete_existing_product(self, db: AsyncSession, product_id: int) -> None:
        """
        Elimina un producto en dos pasos dentro de una transacción:
        1. sus filas de unión (siempre, aunque el producto no exista)
        2. la fila del producto

        Raises:
            NotFoundError: no había producto con ese ID (se hace rollback)
        """
        async with mutation(db, f"Eliminar producto {product_id}"):
            await product_crud.delete_product_categories(db, product_id)
            deleted = await product_crud.delete_product(db, product_id)
            if not deleted:
                raise NotFoundError(PRODUCT_NOT_FOUND)

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

# Instancia única del servicio para uso en endpoints
product_service = ProductService()
