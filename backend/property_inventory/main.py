"""FastAPI application entry point"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
import logging

from property_inventory import openapi
from property_inventory.config import Settings, get_settings
from property_inventory.database import build_engine, build_session_maker, init_db, close_db
from property_inventory.exceptions import AppException, ValidationError
from property_inventory.routers import properties_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    engine = build_engine(settings)
    try:
        await init_db(engine)
    except Exception:
        logger.exception("Failed to provision the properties table, refusing to start")
        await close_db(engine)
        raise
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)
    logger.info("Database initialized and properties table ensured")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await close_db(engine)
    logger.info("Database connections closed")


def _error_response(exc: AppException) -> JSONResponse:
    content = {"error": exc.message}
    if exc.details:
        content["details"] = exc.details
    return JSONResponse(status_code=exc.status_code, content=content)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around the given (or environment) settings"""
    settings = settings or get_settings()
    configure_logging(settings)

    docs_url = openapi.DOCS_URL if settings.DOCS_ENABLED else None
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=openapi.DESCRIPTION,
        contact=openapi.CONTACT,
        openapi_tags=openapi.TAGS_METADATA,
        docs_url=docs_url,
        redoc_url=None,
        openapi_url=openapi.OPENAPI_URL if settings.DOCS_ENABLED else None,
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        """Handle custom application exceptions"""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Render malformed requests in the same shape as other errors"""
        errors = jsonable_encoder(exc.errors(), exclude={"ctx", "url"})
        return _error_response(ValidationError(details={"errors": errors}))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions"""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "An unexpected error occurred"}
        )

    app.include_router(properties_router)

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint - verifies app is running"""
        return {
            "status": "healthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION
        }

    @app.get("/health/ready", tags=["Health"])
    async def readiness_check(request: Request):
        """Readiness check - verifies database connectivity"""
        try:
            async with request.app.state.session_maker() as session:
                await session.execute(text("SELECT 1"))
            return {
                "status": "ready",
                "database": "connected",
                "app": settings.APP_NAME,
                "version": settings.APP_VERSION
            }
        except Exception as e:
            logger.error(f"Readiness check failed: {e}")
            return JSONResponse(
                status_code=503,
                content={
                    "status": "not_ready",
                    "database": "disconnected"
                }
            )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "property_inventory.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
