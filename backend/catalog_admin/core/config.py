# backend/catalog_admin/core/config.py
"""
Este archivo contiene la configuración de la aplicación.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from pathlib import Path

# Apunta al directorio 'backend/'
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuración de la aplicación usando Pydantic BaseSettings.
    Variables sensibles desde .env, defaults seguros para el resto.
    """
    # Configuración general del proyecto
    BASE_DIR: Path = BASE_DIR
    API_PREFIX: str = ""
    PROJECT_NAME: str = "Catalog Admin API"
    PROJECT_VERSION: str = "0.1.0"

    # Configuración de la base de datos
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "user"
    POSTGRES_PASSWORD: str = "password"
    POSTGRES_DB: str = "catalog_db"
    POSTGRES_PORT: str = "5432"

    # Si se define, tiene prioridad sobre las variables POSTGRES_*
    # (p. ej. "sqlite+aiosqlite:///./catalog.db" para desarrollo local)
    DATABASE_URL: Optional[str] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """URL de conexión a la base de datos asíncrona."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # Server - el puerto por defecto coincide con la URL base del cliente
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Cliente HTTP (SDK) - URL base de la API y timeout en segundos
    CATALOG_API_BASE_URL: str = "http://localhost:4000"
    CLIENT_TIMEOUT: float = 10.0

    # Orígenes permitidos para el frontend de administración
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Logging - Defaults seguros
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

# Instancia global de la configuración
settings = Settings()
