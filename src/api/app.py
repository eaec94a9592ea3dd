"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.error import ClientError
from src.api.routes import accounts, coupons, orders, system
from src.depends import ServiceContainer

logger = logging.getLogger(__name__)


def create_app(config, container: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the application

    Args:
        config: ApplicationConfig-like settings object
        container: Prebuilt services (tests); built from config when omitted

    Workers and the admin bot start in the lifespan, not here.
    """
    container = container or ServiceContainer(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await container.start()
        try:
            yield
        finally:
            await container.shutdown()

    app = FastAPI(title="Panel Order Service", version="1.0.0", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
            return response

    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: [{exc.error.code}] {exc.error.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": {"code": exc.error.code, "message": exc.error.message}},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        detail = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": {"code": "INVALID_INPUT", "message": detail}},
        )

    for module in (orders, accounts, coupons, system):
        app.include_router(module.router, prefix=config.API_PREFIX)

    return app
