# backend/catalog_admin/services/transaction.py
"""
Ámbito transaccional de las mutaciones del catálogo.

Todas las operaciones de varios pasos (producto + filas de unión, borrado en
cascada manual) se ejecutan dentro de una única transacción: o se confirman
todos los pasos o ninguno. Los errores de SQLAlchemy se traducen a errores de
dominio conservando el mensaje original del adaptador.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_admin.core.exceptions import ConflictError, PersistenceError

logger = logging.getLogger(__name__)


def adapter_message(error: SQLAlchemyError) -> str:
    """Mensaje del driver de BD si existe, si no el de SQLAlchemy."""
    original = getattr(error, "orig", None)
    return str(original) if original is not None else str(error)


@asynccontextmanager
async def mutation(db: AsyncSession, action: str) -> AsyncIterator[AsyncSession]:
    """
    Abre una transacción sobre la sesión y la confirma al salir.

    Cualquier excepción hace rollback. Los errores de dominio (p. ej.
    NotFoundError) se propagan sin cambios.

    Raises:
        ConflictError: violación de integridad (FK, PK duplicada)
        PersistenceError: cualquier otro error de la base de datos
    """
    try:
        async with db.begin():
            yield db
    except IntegrityError as e:
        message = adapter_message(e)
        logger.warning(f"⚠️ {action}: violación de integridad - {message}")
        raise ConflictError(message) from e
    except SQLAlchemyError as e:
        message = adapter_message(e)
        logger.error(f"❌ {action}: error de base de datos - {message}")
        raise PersistenceError(message) from e
