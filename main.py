from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
import uvicorn
import logging

from config import settings, configure_logging
from auth import get_current_user_dep
from core.handlers import install_error_handlers
from routes import auth_router, protected_routers
from database.db import create_tables, engine

logger = logging.getLogger(__name__)

# Configurar logging una sola vez al inicio
configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Maneja el ciclo de vida de la aplicación."""
    # Startup
    create_tables()
    yield
    # Shutdown
    engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="API del programa de visitas de la UTEQ a colegios: personas, estudiantes, "
                "autoridades, programas de visita, actividades y dudas.",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    debug=settings.debug_mode
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)


@app.get("/")
def root():
    """Endpoint raíz con información de la API."""
    return {
        "message": f"Bienvenido a {settings.app_name}",
        "version": settings.app_version,
        "status": "running",
        "environment": settings.app_env,
        "docs": "/docs",
    }


@app.get("/health")
def health_check():
    """Health check con verificación de base de datos."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.error(f"Health check: error de conexión a BD: {e}")
        db_status = "disconnected"

    return {
        "status": "healthy" if db_status == "connected" else "unhealthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "database": db_status,
        "environment": settings.app_env,
    }


app.include_router(auth_router)
for router in protected_routers:
    app.include_router(router, dependencies=[Depends(get_current_user_dep)])


if __name__ == "__main__":
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.app_port,
        log_level=settings.log_level.lower()
    )
