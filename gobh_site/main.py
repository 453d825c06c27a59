"""
GOBH Investments site - FastAPI application.

Serves the marketing pages and the JSON API. The document store is opened
at startup, kept on ``app.state.store`` and closed at shutdown.
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from .config import config
from .database import DocumentStore
from .models import ApiError
from .routes import api_router, ui_router


def _log_handlers():
    handlers = [logging.StreamHandler(sys.stdout)]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE))
    return handlers

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=_log_handlers()
)

logger = logging.getLogger(__name__)


def apply_cors_headers(response: Response) -> Response:
    """Add the configured cross-origin headers unless already present."""
    headers = {
        "Access-Control-Allow-Origin": config.CORS_ORIGIN_HEADER,
        "Access-Control-Allow-Methods": ", ".join(config.CORS_ALLOW_METHODS),
        "Access-Control-Allow-Headers": ", ".join(config.CORS_ALLOW_HEADERS),
        "Access-Control-Allow-Credentials": "true" if config.CORS_ALLOW_CREDENTIALS else "false",
    }
    for name, value in headers.items():
        response.headers.setdefault(name, value)
    return response


def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the application.

    When ``store`` is given it is used as-is and left open at shutdown;
    otherwise a store on ``config.DB_PATH`` is opened for the lifetime of
    the application.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management."""
        # Startup
        logger.info(f"Starting {config.API_TITLE}...")
        owned = store is None
        try:
            if owned:
                config.validate()
                logger.info(f"Database path: {config.DB_PATH}")
                app.state.store = DocumentStore(config.DB_PATH).open()
            logger.info(f"Content directory: {config.CONTENT_DIR}")
            logger.info("Startup complete")
            yield
        except Exception as e:
            logger.error(f"Startup failed: {e}")
            raise
        finally:
            # Shutdown
            logger.info(f"Shutting down {config.API_TITLE}...")
            if owned and getattr(app.state, "store", None) is not None:
                app.state.store.close()

    app = FastAPI(
        title=config.API_TITLE,
        version=config.API_VERSION,
        description=config.API_DESCRIPTION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    if store is not None:
        app.state.store = store

    # Configured CORS headers on every response; CORSMiddleware (outer) refines them for Origin requests
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response = await call_next(request)
        return apply_cors_headers(response)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=config.CORS_ALLOW_METHODS,
        allow_headers=config.CORS_ALLOW_HEADERS,
    )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return apply_cors_headers(JSONResponse(
            status_code=500,
            content=ApiError(error="Internal server error", details=str(exc)).model_dump()
        ))

    # Health check endpoint
    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        try:
            request.app.state.store.ping()
            return {
                "status": "healthy",
                "version": config.API_VERSION,
                "database": "connected"
            }
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(status_code=503, detail="Service unavailable")

    # Include routers
    app.include_router(api_router)
    app.include_router(ui_router)

    return app


app = create_app()


def run():
    """Console entry point: serve the site with uvicorn."""
    import uvicorn
    uvicorn.run(
        "gobh_site.main:app",
        host="0.0.0.0",
        port=8000,
        log_level=config.LOG_LEVEL.lower()
    )


if __name__ == "__main__":
    run()
