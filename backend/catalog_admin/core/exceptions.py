# backend/catalog_admin/core/exceptions.py
"""
Excepciones de dominio del catálogo.

Cada excepción conoce el código HTTP con el que debe responder la API y el
mensaje legible que viaja al cliente en el cuerpo ``{"error": ...}``.
Los manejadores registrados en ``main.py`` las traducen a respuestas JSON.

Jerarquía:
- CatalogError: base común (400 por defecto)
- ValidationError: dato de entrada inválido, detectado antes de tocar la BD
- NotFoundError: el ID referenciado no existe
- ConflictError: violación de integridad referencial devuelta por la BD
- PersistenceError: otro fallo de la BD durante una mutación
- InternalError: fallo inesperado (500)
"""

from typing import Any, Dict, Optional


class CatalogError(Exception):
    """Error base de la capa de servicio del catálogo."""

    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(CatalogError):
    """Un campo de la petición no cumple las reglas de validación."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, "field": self.field}


class NotFoundError(CatalogError):
    status_code = 404


class ConflictError(CatalogError):
    """
    La base de datos rechazó la operación por integridad referencial
    (p. ej. un categoryId inexistente). El mensaje del adaptador se conserva tal cual.
    """


class PersistenceError(CatalogError):
    """Fallo de la base de datos durante una mutación, mensaje sin reinterpretar."""


class InternalError(CatalogError):
    status_code = 500

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Internal server error")
