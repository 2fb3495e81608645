# backend/catalog_admin/schemas/category_schema.py

"""
Esquemas Pydantic para el modelo Category.

Los esquemas definen la estructura de datos que fluye a través de la API:
- CategoryPayload: cuerpo de POST/PUT, sin tipos estrictos; la validación
  de negocio (mensajes "Invalid category name") la aplica el servicio
- CategoryResponse: respuestas de la API (GET)
"""

from typing import Any
from pydantic import BaseModel, ConfigDict

# ========================================
# ESQUEMAS PARA OPERACIONES
# ========================================

class CategoryPayload(BaseModel):
    """Cuerpo de creación/actualización de una categoría."""
    name: Any = None


# ========================================
# ESQUEMA DE RESPUESTA
# ========================================

class CategoryResponse(BaseModel):
    """Esquema para las respuestas de la API al leer categorías."""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    """Confirmación simple, usada por los endpoints de borrado."""
    message: str
