"""Main FastAPI application for the Posts API.

Entry point for the application. Configures:
- FastAPI app with settings
- CORS middleware
- Exception handlers
- Route registration
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.posts.errors import InvalidPageError, PostNotFoundError
from config import get_app_config, get_cors_config, get_settings, setup_logging
from dependencies import get_firestore_service
from responses import ResponseCode, error_dict
from router import router as api_router

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    # Startup
    logger.info("Starting Posts API...")

    try:
        settings = get_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
        logger.info("Environment: %s", settings.environment)
        logger.info("Posts collection: %s", settings.posts_collection)

        if settings.check_store_on_startup:
            firestore = get_firestore_service()
            firestore_health = await firestore.health_check()
            if firestore_health.get("status") != "healthy":
                logger.error("Firestore unhealthy: %s", firestore_health)
                raise RuntimeError(
                    f"Firestore health check failed: {firestore_health}"
                )
            logger.info(
                "✓ Firestore connected (latency: %sms)",
                firestore_health.get("latency_ms"),
            )

        logger.info("Posts API started successfully")

    except Exception as e:
        logger.error("Startup validation failed: %s", e)
        raise

    yield

    # Shutdown
    logger.info("Shutting down Posts API...")


# Create FastAPI app with lifespan
app_config = get_app_config()
app = FastAPI(lifespan=lifespan, **app_config)

# Add CORS middleware
cors_config = get_cors_config()
app.add_middleware(CORSMiddleware, **cors_config)


# =============================================================================
# Middleware
# =============================================================================


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle Pydantic validation errors on bodies and query parameters."""
    request_id = getattr(request.state, "request_id", None)

    errors = jsonable_encoder(exc.errors())
    first_error = errors[0] if errors else {}
    field_name = (first_error.get("loc") or ["unknown"])[-1]

    error_response = error_dict(
        code=ResponseCode.VALIDATION_ERROR,
        custom_message=f"Validation failed for field '{field_name}'",
        error_details={"validation_errors": errors},
        request_id=request_id,
    )

    return JSONResponse(
        status_code=get_settings().validation_error_status, content=error_response
    )


@app.exception_handler(PostNotFoundError)
async def post_not_found_handler(
    request: Request,
    exc: PostNotFoundError,
) -> Response:
    """Malformed or unknown post ID: 404 with no body."""
    return Response(status_code=404)


@app.exception_handler(InvalidPageError)
async def invalid_page_handler(
    request: Request,
    exc: InvalidPageError,
) -> Response:
    """Page below 1: 400 with no body."""
    return Response(status_code=400)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle HTTP exceptions."""
    request_id = getattr(request.state, "request_id", None)

    if isinstance(exc.detail, dict) and "code" in exc.detail:
        return JSONResponse(status_code=exc.status_code, content=exc.detail)

    code_map = {
        404: ResponseCode.POST_NOT_FOUND,
        405: ResponseCode.VALIDATION_ERROR,
    }

    response_code = code_map.get(exc.status_code, ResponseCode.INTERNAL_ERROR)

    error_response = error_dict(
        code=response_code,
        custom_message=str(exc.detail),
        request_id=request_id,
    )

    return JSONResponse(
        status_code=exc.status_code, content=error_response, headers=exc.headers
    )


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unhandled exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception("Unhandled exception: %s", exc)

    error_response = error_dict(
        code=ResponseCode.INTERNAL_ERROR,
        custom_message="An unexpected error occurred",
        error_details={"exception_type": type(exc).__name__},
        request_id=request_id,
    )

    return JSONResponse(status_code=500, content=error_response)


# =============================================================================
# Routes
# =============================================================================

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - shows API info."""
    return {
        "name": app_config["title"],
        "description": app_config["description"],
        "docs": "/api/docs",
        "health": "/api/health",
        "posts": "/api/posts",
    }


# =============================================================================
# Development Server
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
