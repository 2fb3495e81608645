# backend/catalog_admin/services/category_service.py
"""
Servicio para operaciones de negocio relacionadas con categorías.

Las categorías se relacionan con los productos solo a través de la tabla
de unión, por eso el borrado elimina primero esas filas y después la
categoría; los productos asociados se conservan.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, List
import logging

from catalog_admin.core.exceptions import NotFoundError
from catalog_admin.crud import category_crud
from catalog_admin.db.models.category_model import Category
from catalog_admin.services.transaction import mutation
from catalog_admin.services.validation import validate_category_name

logger = logging.getLogger(__name__)

CATEGORY_NOT_FOUND = "Category not found"


class CategoryService:
    """
    Servicio para operaciones de negocio relacionadas con categorías.

    Los nombres duplicados son un estado aceptado del catálogo: no se
    comprueba unicidad ni al crear ni al renombrar.
    """

    # ========================================
    # OPERACIONES DE CONSULTA
    # ========================================

    async def list_categories(self, db: AsyncSession) -> List[Category]:
        return await category_crud.get_categories(db)

    # ========================================
    # OPERACIONES DE ESCRITURA CON LÓGICA DE NEGOCIO
    # ========================================

    async def create_new_category(self, db: AsyncSession, name: Any) -> Category:
        """
        Crea una categoría tras validar su nombre.

        Raises:
            ValidationError: nombre ausente, vacío, no textual o de más de 255 caracteres
        """
        name = validate_category_name(name)
        async with mutation(db, "Crear categoría"):
            category = await category_crud.create_category(db, name)
        return category

    async def update_existing_category(self, db: AsyncSession, category_id: int, name: Any) -> Category:
        """
        Renombra una categoría existente.

        Raises:
            ValidationError: nombre inválido
            NotFoundError: la categoría no existe
        """
        name = validate_category_name(name)
        async with mutation(db, f"Actualizar categoría {category_id}"):
            category = await category_crud.get_category(db, category_id)
            if not category:
                raise NotFoundError(CATEGORY_NOT_FOUND)
            category = await category_crud.update_category(db, category, name)
        return category

    async def delete_existing_category(self, db: AsyncSession, category_id: int) -> None:
        """
        Elimina una categoría y sus asociaciones con productos en una transacción.

        Raises:
            NotFoundError: la categoría no existía
        """
        async with mutation(db, f"Eliminar categoría {category_id}"):
            removed_links = await category_crud.delete_category_links(db, category_id)
            deleted = await category_crud.delete_category(db, category_id)
            if not deleted:
                raise NotFoundError(CATEGORY_NOT_FOUND)
        logger.info(f"Categoría {category_id} eliminada junto con {removed_links} asociaciones")

# ========================================
# INSTANCIA SINGLETON DEL SERVICIO
# ========================================

category_service = CategoryService()
