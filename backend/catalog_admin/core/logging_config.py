# backend/catalog_admin/core/logging_config.py
"""
Configuración del logging de la aplicación a partir de los settings.
"""

import logging

from catalog_admin.core.config import settings


def setup_logging(level: str = None) -> None:
    """Configura el logger raíz con el nivel y formato definidos en settings."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )
    # SQLAlchemy es muy ruidoso en DEBUG, lo dejamos en WARNING
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
