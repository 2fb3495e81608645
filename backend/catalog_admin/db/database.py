# backend/catalog_admin/db/database.py

"""
Configuración principal de la base de datos para la aplicación.

Este módulo establece la conexión con la base de datos usando SQLAlchemy y define
los componentes básicos que serán utilizados por toda la aplicación:
- Motor de base de datos (engine), un único pool por proceso
- Fábrica de sesiones (AsyncSessionLocal)
- Clase base para modelos (Base)

La dependencia get_db() vive en catalog_admin/api/deps.py. El ciclo de vida del
motor (creación de tablas al arrancar, dispose al cerrar) lo gestiona main.py.
"""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from catalog_admin.core.config import settings # Importamos nuestra configuración


def enable_sqlite_foreign_keys(async_engine: AsyncEngine) -> None:
    """
    SQLite no valida las foreign keys salvo que se active por conexión.
    Sin esto, las filas de product_categories podrían apuntar a IDs inexistentes.
    """
    if async_engine.dialect.name != "sqlite":
        return

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Crear el motor de base de datos asíncrono
engine = create_async_engine(settings.SQLALCHEMY_DATABASE_URI, pool_pre_ping=True)
enable_sqlite_foreign_keys(engine)

# Crear un sessionmaker asíncrono
# expire_on_commit=False es importante para que los objetos sigan siendo utilizables
# después de que la transacción se haya confirmado.
AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# Clase base declarativa para todos los modelos ORM
Base = declarative_base()
