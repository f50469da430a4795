"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from starlette.responses import JSONResponse

from src.catalog import __version__
from src.catalog.api.http.app_data import ApplicationDependencies, build_dependencies
from src.catalog.api.http.routers import health
from src.catalog.api.http.routers.service import product
from src.catalog.api.utils.app_startup import configure_logging
from src.catalog.core.exceptions import ProductNotFoundError
from src.catalog.runtime.context import get_config

__all__ = ["app", "create_app"]


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "-")


async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else "unknown",
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return JSONResponse(
                status_code=500,
                content={"detail": "Internal Server Error", "request_id": request_id},
                headers={"X-Request-ID": request_id},
            )


async def product_not_found_handler(
    request: Request, exc: ProductNotFoundError
) -> JSONResponse:
    logger.bind(product=exc.product_id).info("request.not_found")
    return JSONResponse(
        status_code=404,
        content={"detail": str(exc), "request_id": _request_id(request)},
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.bind(status_code=422).info("request.validation_error")
    return JSONResponse(
        status_code=422,
        content={
            "detail": jsonable_encoder(exc.errors()),
            "request_id": _request_id(request),
        },
    )


def create_app(dependencies: ApplicationDependencies | None = None) -> FastAPI:
    """Build the application.

    Args:
        dependencies: Prebuilt dependencies. When omitted, the product store
            is created at startup from the current configuration.
    """
    config = get_config()
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = dependencies is None
        app_deps = dependencies or build_dependencies(get_config())
        app.state.app_dependencies = app_deps
        logger.info(
            "Starting up {} in {} environment",
            config.app.name,
            config.app.environment,
        )
        try:
            yield
        finally:
            logger.info("Shutting down application")
            if owned:
                app_deps.close()

    production = config.app.environment == "production"
    app = FastAPI(
        title=config.app.name,
        version=__version__,
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )

    if dependencies is not None:
        app.state.app_dependencies = dependencies

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router)
    app.include_router(product.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=get_config().app.host,
        port=get_config().app.port,
        access_log=False,  # We handle access logging in middleware
    )
