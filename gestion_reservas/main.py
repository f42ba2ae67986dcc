import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from gestion_reservas.api.routers.clients import router as clients_router
from gestion_reservas.api.routers.health import router as health_router
from gestion_reservas.api.routers.payments import router as payments_router
from gestion_reservas.api.routers.properties import router as properties_router
from gestion_reservas.api.routers.reservations import router as reservations_router
from gestion_reservas.api.routers.valuations import router as valuations_router
from gestion_reservas.config import get_settings
from gestion_reservas.infrastructure.db.engine import build_engine, build_sessionmaker, create_schema

# Configure structured logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    # Sin configuración de base de datos no se puede arrancar
    engine = build_engine(settings)
    await create_schema(engine, with_stored_procedure=settings.audit_use_stored_procedure)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)
    logger.info("Database ready", extra={"dialect": engine.dialect.name})
    yield
    await engine.dispose()

app = FastAPI(
    title="Gestión de Reservas API",
    version="0.1.0",
    lifespan=lifespan
)


# Global Exception Handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
        }
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
        }
    )


app.include_router(health_router, tags=["Health"])
app.include_router(clients_router, prefix="/api/v1", tags=["Clients"])
app.include_router(properties_router, prefix="/api/v1", tags=["Properties"])
app.include_router(reservations_router, prefix="/api/v1", tags=["Reservations"])
app.include_router(payments_router, prefix="/api/v1", tags=["Payments"])
app.include_router(valuations_router, prefix="/api/v1", tags=["Valuations"])
