"""FastAPI application entry point."""

import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from recipebox import __version__
from recipebox.config import settings
from recipebox.logging_config import LoggingContext, configure_logging, get_logger
from recipebox.routers import (
    ingredients_router,
    meal_plans_router,
    recipes_router,
    shopping_lists_router,
)

# Configure logging on module load; development always logs plain text
configure_logging(settings.log_level, json_format=False if settings.is_development else None)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Recipebox API ({settings.environment})")
    yield
    logger.info("Shutting down Recipebox API")


app = FastAPI(
    title="Recipebox API",
    description="Ingredient parsing, recipe scaling and shopping lists",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Tag every log line of a request with its request id."""
    request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    with LoggingContext(request_id=request_id):
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error on {request.method} {request.url.path}")
            raise
    response.headers["X-Request-ID"] = request_id
    return response


app.include_router(ingredients_router)
app.include_router(recipes_router)
app.include_router(shopping_lists_router)
app.include_router(meal_plans_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "recipebox-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Recipebox API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
