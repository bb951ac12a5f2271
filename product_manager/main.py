"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from product_manager import __version__
from product_manager.api.products import router as products_router
from product_manager.config import settings
from product_manager.database import async_engine, async_session_factory
from product_manager.logging_config import setup_logging
from product_manager.seed import initialize_database
from product_manager.validation import validation_problem
from product_manager.web.products import router as products_view_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and seed the store on startup, release it on shutdown."""
    setup_logging(settings.log_level, settings.log_file)

    if settings.seed_database:
        # A store outage at startup must not keep the app from serving
        try:
            await initialize_database(async_engine, async_session_factory)
        except Exception:
            logger.exception("An error occurred initializing the database")

    yield

    await async_engine.dispose()


app = FastAPI(
    title=settings.app_title,
    description="Product catalog with a JSON API and server-rendered pages",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Include routers
app.include_router(products_router)
app.include_router(products_view_router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer failed request validation with 400 and per-field messages."""
    logger.debug("Validation failed for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=validation_problem(exc.errors()),
    )


@app.get("/", include_in_schema=False)
async def root(request: Request) -> RedirectResponse:
    """Send browsers to the product list."""
    return RedirectResponse(
        str(request.url_for("product_index")),
        status_code=status.HTTP_303_SEE_OTHER,
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "product_manager.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
