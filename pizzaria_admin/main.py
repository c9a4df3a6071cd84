# pizzaria_admin/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from pizzaria_admin.api.v1 import api_router
from pizzaria_admin.core.config import settings
from pizzaria_admin.core.database import redis_manager
from pizzaria_admin.core.errors import register_exception_handlers
from pizzaria_admin.core.logging_config import add_trace_id_middleware, setup_logging

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.PROJECT_NAME}...")
    await redis_manager.connect()
    yield
    await redis_manager.disconnect()
    logger.info(f"{settings.PROJECT_NAME} stopped.")

def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        lifespan=lifespan,
    )

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_ORIGIN],
        allow_credentials=settings.FRONTEND_ORIGIN != "*",
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Trace-ID"],
    )
    app.middleware("http")(add_trace_id_middleware)

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_V1_STR)
    return app

app = create_app()
