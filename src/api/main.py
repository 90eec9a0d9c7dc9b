"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.api.routes import health, sellers
from src.config import settings
from src.infrastructure.database.connection import dispose_engine
from src.infrastructure.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    configure_logging(settings.log_level, settings.log_format)
    logger.info("marketplace_api_starting")
    yield
    await dispose_engine()
    logger.info("marketplace_api_stopping")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Unparseable bodies and parameters are client errors, reported as 400.
    logger.info("request_rejected", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def data_store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("data_store_error", path=request.url.path, error=str(exc), exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Data store error."},
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Marketplace Sellers API",
        description="List items for sale and browse the marketplace catalogue.",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(SQLAlchemyError, data_store_error_handler)  # type: ignore[arg-type]

    app.include_router(health.router)
    app.include_router(sellers.router)

    return app


app = create_app()
