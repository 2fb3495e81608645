# backend/catalog_admin/main.py
"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura y inicializa la aplicación completa:
- Ciclo de vida (lifespan): crea las tablas al arrancar y libera el pool al cerrar
- CORS para el frontend de administración
- Manejadores de errores que devuelven siempre {"error": ...}
- Registro de los routers de productos y categorías
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from catalog_admin.core.config import settings  # Configuración centralizada de la aplicación
from catalog_admin.core.exceptions import CatalogError, InternalError
from catalog_admin.core.logging_config import setup_logging
from catalog_admin.db.database import Base, engine
from catalog_admin.db.models import category_model, product_model  # noqa: F401 - registra las tablas en Base.metadata
from catalog_admin.api.v1.api_router import api_router_v1  # Router principal de la API

logger = logging.getLogger(__name__)

# ========================================
# EVENTOS DEL CICLO DE VIDA DE LA APLICACIÓN
# ========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Abre el pool de conexiones al arrancar (creando las tablas si no existen)
    y lo cierra al apagar la aplicación.
    """
    setup_logging()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info(f"✅ Base de datos lista ({engine.dialect.name})")

    yield

    await engine.dispose()
    logger.info("ℹ️  Pool de conexiones cerrado")


# ========================================
# CONFIGURACIÓN DE LA APLICACIÓN FASTAPI
# ========================================

app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    version=settings.PROJECT_VERSION,
    description="API de administración del catálogo de productos y categorías",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ========================================
# MANEJADORES DE ERRORES
# ========================================

@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Traduce los errores de dominio a su código HTTP con cuerpo {"error": ...}."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Los errores de parseo de FastAPI (query no numérica, cuerpo que no es JSON)
    se devuelven como 400 con el mismo formato que el resto de errores.
    """
    errors = exc.errors()
    location = errors[0].get("loc", ()) if errors else ()
    # ("query", "page") -> "page"; ("body", 12) para JSON mal formado -> "body"
    field = ".".join(str(part) for part in location[1:] if not isinstance(part, int))
    field = field or (location[0] if location else "request")
    logger.debug(f"Petición inválida en {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid {field}", "field": field},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"❌ Error no controlado en {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())

# ========================================
# REGISTRO DE ROUTERS DE LA API
# ========================================

app.include_router(api_router_v1, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
async def read_root():
    """
    Endpoint raíz para verificación básica del estado de la API.

    Example:
        GET /
        Response: {"message": "Bienvenido a Catalog Admin API v0.1.0"}
    """
    return {"message": f"Bienvenido a {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}"}


def run() -> None:
    """Arranca el servidor con uvicorn usando HOST y PORT de settings."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
