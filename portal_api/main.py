"""
Portal Listings API - main application.

FastAPI application exposing the faceted listing query engine for
properties, jobs and marketplace items.
"""
import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import get_catalog, load_catalog, set_catalog
from .config import config
from .errors import ApiError, ErrorCodes, error_body
from .routes import jobs_router, marketplace_router, properties_router

# Configure logging
handlers = [logging.StreamHandler(sys.stdout)]
if config.LOG_FILE:
    handlers.append(logging.FileHandler(config.LOG_FILE))

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=handlers
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management."""
    # Startup
    logger.info("Starting Portal Listings API...")
    try:
        config.validate()
        set_catalog(load_catalog())
        logger.info(f"Data directory: {config.DATA_DIR or '(bundled samples)'}")
        logger.info("API startup complete")
        yield
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        raise
    finally:
        # Shutdown
        logger.info("Shutting down Portal Listings API...")
        set_catalog(None)


# Create FastAPI application
app = FastAPI(
    title=config.API_TITLE,
    version=config.API_VERSION,
    description=config.API_DESCRIPTION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=config.CORS_ALLOW_CREDENTIALS,
    allow_methods=config.CORS_ALLOW_METHODS,
    allow_headers=config.CORS_ALLOW_HEADERS,
)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    """Render route errors as the standard error envelope."""
    if exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    else:
        logger.info(f"{request.url.path}: {exc.code} {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.code, exc.message, request.url.path, exc.details)
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed query parameters are caller errors (HTTP 400)."""
    details = {
        ".".join(str(p) for p in err.get("loc", ())): err.get("msg", "")
        for err in exc.errors()
    }
    return JSONResponse(
        status_code=400,
        content=error_body(ErrorCodes.VALIDATION_ERROR, "Invalid request parameters",
                           request.url.path, details)
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Keep framework errors (404 for unknown routes, 405...) in the envelope format."""
    code = ErrorCodes.RESOURCE_NOT_FOUND if exc.status_code == 404 else ErrorCodes.VALIDATION_ERROR
    if exc.status_code >= 500:
        code = ErrorCodes.INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(code, str(exc.detail), request.url.path)
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=error_body(ErrorCodes.INTERNAL_SERVER_ERROR, "Internal server error",
                           request.url.path)
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """Health check endpoint."""
    try:
        catalog = get_catalog()
        return {
            "status": "healthy",
            "version": config.API_VERSION,
            "listings": {
                "properties": len(catalog.properties),
                "jobs": len(catalog.jobs),
                "marketplace": len(catalog.marketplace),
            }
        }
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise ApiError("Service unavailable", ErrorCodes.SERVICE_UNAVAILABLE, 503)


# Include routers
app.include_router(properties_router)
app.include_router(jobs_router)
app.include_router(marketplace_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "portal_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=config.LOG_LEVEL.lower()
    )
