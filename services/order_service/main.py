import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from shared.config.database import engine, Base, DB_SCHEMA
from shared.observability import setup_observability
from services.customer_service.models import Customer # Import to register with Base
from .catalog import load_catalog
from .models import Order # Import to register with Base
from .router import router, public_router

logger = structlog.get_logger(__name__)

order_app = FastAPI(title="Pizza Order Service", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(order_app, "order_service")

# Loaded once; handlers read it through get_catalog
order_app.state.catalog = load_catalog()

order_app.include_router(public_router)
order_app.include_router(router)


@order_app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("order_store_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Order store unavailable"},
    )


async def create_tables(bind=engine):
    async with bind.begin() as conn:
        if conn.dialect.name == "postgresql":
            await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {DB_SCHEMA}"))
        await conn.run_sync(Base.metadata.create_all)


@order_app.on_event("startup")
async def startup_event():
    await create_tables()
