# orderbook/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from orderbook import __version__
from orderbook.config import get_settings
from orderbook.database.session import Base, check_database_connection, get_engine
import orderbook.models  # noqa: F401  registers the tables on Base
from orderbook.gateway.gateway_router import gateway_router
from orderbook.routers.errors import register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    settings = get_settings()
    logger.info("orderbook %s is starting", __version__)
    try:
        engine = get_engine()
        if settings.create_tables:
            Base.metadata.create_all(bind=engine)
        check_database_connection(engine)
        logger.info("Database connected")
    except Exception as e:
        # keep serving; /health reports the store as down
        logger.error("Database connection failed: %s", e)

    yield
    # Shutdown
    logger.info("Shutting down")
    get_engine().dispose()


def create_app() -> FastAPI:
    configure_logging(get_settings().log_level)

    app = FastAPI(
        title="Orderbook",
        description="Orders, their line items and users over a relational store",
        version=__version__,
        lifespan=lifespan,
    )
    register_error_handlers(app)

    @app.get("/health")
    def health():
        status = {"status": "healthy", "service": "orderbook-api", "version": __version__}
        try:
            check_database_connection()
            status["database"] = "connected"
        except Exception as e:
            status["database"] = f"error: {e.__class__.__name__}"
            status["status"] = "degraded"
        return status

    @app.get("/")
    def root():
        return {
            "message": "Orderbook API",
            "version": __version__,
            "gateway_base": "/api/v1/gateway",
            "docs": "/docs",
        }

    # single entry point, everything lives under /api/v1/gateway
    app.include_router(gateway_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(
        "orderbook.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=get_settings().log_level.lower(),
    )
