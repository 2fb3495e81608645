# backend/catalog_admin/api/v1/api_router.py
"""
Este archivo contiene el router principal de la API.

Se encarga de registrar los routers de cada dominio del catálogo.
"""

from fastapi import APIRouter

# Importación de routers especializados por dominio de negocio
from catalog_admin.api.v1.endpoints import (
    products,
    categories,
)

# ========================================
# CONFIGURACIÓN DEL ROUTER PRINCIPAL
# ========================================

api_router_v1 = APIRouter()

# ========================================
# REGISTRO DE ROUTERS POR DOMINIO DE NEGOCIO
# ========================================

# ROUTER DE CATEGORÍAS
api_router_v1.include_router(
    categories.router,              # Router con endpoints de categorías
    prefix="/categories",           # Prefijo: /categories
    tags=["Categories"]             # Tag para documentación OpenAPI/Swagger
)

# ROUTER DE PRODUCTOS
# Listado paginado con filtros y CRUD con reemplazo de categorías
api_router_v1.include_router(
    products.router,
    prefix="/products",
    tags=["Products"]
)
