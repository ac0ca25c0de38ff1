"""
FastAPI application factory
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from metalbaza.container import get_container
from metalbaza.infrastructure.database.operations import get_db_manager, init_db
from metalbaza.infrastructure.logging.logging_config import get_structured_logger
from metalbaza.infrastructure.utilities.constants import PerformanceSettings
from metalbaza.infrastructure.utilities.exceptions import MetalBazaError
from metalbaza.infrastructure.utilities.i18n import tr
from metalbaza.presentation.api.dependencies import request_language
from metalbaza.presentation.api.routers import admin_orders, cart, orders, system

logger = logging.getLogger(__name__)
access_logger = get_structured_logger("metalbaza.access")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on start-up, release connections on shutdown"""
    logger.info("🚀 Starting MetalBaza API")
    init_db()
    logger.info("✅ Database initialized")
    yield
    bot = get_container().get_bot()
    if bot is not None:
        await bot.shutdown()
    get_db_manager().close()
    logger.info("👋 MetalBaza API stopped")


def _error_response(request: Request, status_code: int, error_code: str, message_key: str, **extra):
    content = {
        "success": False,
        "errorCode": error_code,
        "message": tr(message_key, request_language(request)),
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def handle_metalbaza_error(request: Request, exc: MetalBazaError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("💥 %s %s failed: %s", request.method, request.url.path, exc, exc_info=exc)
    else:
        logger.warning("⚠️ %s %s rejected: %s", request.method, request.url.path, exc)
    return _error_response(request, exc.http_status, exc.error_code, exc.user_message_key)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("⚠️ %s %s invalid request: %s", request.method, request.url.path, exc.errors())
    return _error_response(
        request,
        400,
        "VALIDATION_ERROR",
        "ERROR_VALIDATION",
        details=jsonable_encoder(exc.errors()),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "💥 Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc
    )
    return _error_response(request, 500, "GENERAL_ERROR", "ERROR_GENERAL")


async def access_log_middleware(request: Request, call_next):
    """One structured access log record per request"""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 1)

    log = access_logger.warning if duration_ms > PerformanceSettings.SLOW_REQUEST_THRESHOLD_MS else access_logger.info
    log(
        "http_request",
        method=request.method,
        path=request.url.path,
        status=response.status_code,
        duration_ms=duration_ms,
    )
    return response


def create_app() -> FastAPI:
    """Build the FastAPI application"""
    app = FastAPI(title="MetalBaza Cart & Checkout", lifespan=lifespan)

    app.add_exception_handler(MetalBazaError, handle_metalbaza_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
    app.middleware("http")(access_log_middleware)

    app.include_router(system.router)
    app.include_router(cart.router)
    app.include_router(orders.router)
    app.include_router(admin_orders.router)

    return app
