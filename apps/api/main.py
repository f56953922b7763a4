"""FastAPI application main entry point."""

import logging
import time

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.deps import get_settings
from apps.api.v1.endpoints import menu, orders
from core.domain.exceptions import (
    InvalidStatusTransitionError,
    OrderNotFoundError,
    OrderStorageError,
)
from core.infrastructure.database.lifecycle import close_database, init_database
from core.infrastructure.logging import configure_logging

settings = get_settings()
configure_logging(settings.logging)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.api.title,
    description="Pizza order placement and kitchen status tracking",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(orders.router, prefix="/api/v1")
app.include_router(menu.router, prefix="/api/v1")


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"{request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(OrderNotFoundError)
async def order_not_found_handler(request: Request, exc: OrderNotFoundError) -> JSONResponse:
    """Handle lookups of unknown orders."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


@app.exception_handler(InvalidStatusTransitionError)
async def invalid_transition_handler(
    request: Request, exc: InvalidStatusTransitionError
) -> JSONResponse:
    """Handle status moves that skip or reverse the kitchen sequence."""
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": str(exc)},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
    """Handle ValueError exceptions (incomplete order graphs included).

    Args:
        request: FastAPI request
        exc: ValueError exception

    Returns:
        JSONResponse with error details
    """
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)},
    )


@app.exception_handler(OrderStorageError)
async def storage_error_handler(request: Request, exc: OrderStorageError) -> JSONResponse:
    """Storage failures stay opaque to the client."""
    logger.error(
        f"Storage failure on {request.method} {request.url.path} "
        f"(order={exc.order_id}): {exc}",
        exc_info=exc.__cause__ or exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


# =============================================================================
# STARTUP/SHUTDOWN EVENTS
# =============================================================================

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    await init_database(settings.database)
    logger.info("Pizza tracker API started")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    await close_database()
    logger.info("Pizza tracker API shut down")


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.api.host, port=settings.api.port)
