"""
FastAPI application entry point.
Main application setup and configuration.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import logging

from app.config import get_settings
from app.database import MongoStore
from app.routers import properties_router, listings_router, inquiries_router, users_router
from app.utils.dependencies import get_store
from app.utils.exceptions import APIException, ServiceUnavailableError
from app.services.error_handler import ErrorHandlerService
from app.services.image import CloudinaryImageHost
from app.middleware.validation import RequestValidationMiddleware

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Opens the document store and image host once and shares them with every request.
    A store that cannot be reached aborts startup.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")

    store = MongoStore.from_settings(settings)
    await store.connect()
    app.state.store = store
    app.state.image_host = CloudinaryImageHost.from_settings(settings)

    yield

    logger.info("Shutting down application")
    await store.close()


# Create FastAPI application instance
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Real estate listing backend.

    * **Properties**: create and list developments, attach hosted images
    * **Listings**: units for sale or rent, validated against their property
    * **Inquiries and appointments**: messages and viewings from users
    * **Users**: accounts and email existence checks
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Properties", "description": "Property records and images"},
        {"name": "Listings", "description": "Unit listings"},
        {"name": "Inquiries", "description": "User inquiries about properties"},
        {"name": "Appointments", "description": "Scheduled viewings"},
        {"name": "Users", "description": "User accounts"},
        {"name": "Health", "description": "System health endpoints"},
    ],
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=settings.cors_methods,
    allow_headers=settings.cors_headers,
    expose_headers=["X-Request-ID"],
)

app.add_middleware(
    RequestValidationMiddleware,
    max_upload_size=settings.max_upload_size,
    enable_request_logging=settings.debug,
)

# Include API routers
app.include_router(properties_router)
app.include_router(listings_router)
app.include_router(inquiries_router)
app.include_router(users_router)


# Global exception handlers using ErrorHandlerService
@app.exception_handler(APIException)
async def api_exception_handler(request: Request, exc: APIException):
    """Handle custom API exceptions."""
    return ErrorHandlerService.handle_api_exception(exc, request)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle malformed bodies and invalid fields as client errors."""
    return ErrorHandlerService.handle_validation_error(exc, request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle FastAPI and Starlette HTTP exceptions."""
    return ErrorHandlerService.handle_http_exception(exc, request)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with secure error responses."""
    return ErrorHandlerService.handle_unexpected_error(exc, request)


@app.get("/health", tags=["Health"])
async def health_check(request: Request):
    """
    Health check endpoint with document store connectivity test.
    Used by container health checks and load balancers.
    """
    store = get_store(request)
    if not await store.ping():
        raise ServiceUnavailableError("Database connection failed")

    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "database": "connected"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
