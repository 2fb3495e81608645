# backend/catalog_admin/api/deps.py
"""
Módulo de dependencias para FastAPI.

Este archivo centraliza las dependencias que se inyectan en los endpoints.
Los tests sustituyen get_db mediante app.dependency_overrides para usar
una base de datos SQLite en memoria.
"""

from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_admin.db.database import AsyncSessionLocal

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Sesión asíncrona por petición. Las transacciones de escritura las abre
    el servicio (services/transaction.mutation); al cerrar la sesión se
    descarta cualquier lectura pendiente.
    """
    async with AsyncSessionLocal() as session:
        yield session