"""
RecipeGen Backend Service - Main API Server
Recipe storage, offline sync and AI recipe generation
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging
import structlog
from typing import AsyncGenerator

from core.config import settings
from core.database import init_db, close_db
from core.exceptions import RecipeGenError
from api.routes import api_router
from middleware.logging import LoggingMiddleware
from services.ai_service import ai_service


def configure_logging() -> None:
    """Configure structured logging"""
    if settings.LOG_FORMAT == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
        ),
        logger_factory=structlog.WriteLoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()
logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events"""
    logger.info("Starting RecipeGen Backend Service", environment=settings.ENVIRONMENT)

    init_db()
    logger.info("Database connection established")
    ai_service.open()

    yield

    logger.info("Shutting down RecipeGen Backend Service")
    await ai_service.aclose()
    close_db()
    logger.info("Backend service shutdown complete")


app = FastAPI(
    title="RecipeGen Backend Service",
    description="Personal recipe storage, offline sync and AI recipe generation",
    version=settings.VERSION,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time", "X-Request-ID"]
)

app.add_middleware(LoggingMiddleware)


@app.exception_handler(RecipeGenError)
async def recipegen_exception_handler(request: Request, exc: RecipeGenError):
    """Render domain errors with their status code"""
    if exc.status_code >= 500:
        logger.error("Request failed", error=exc.message, path=request.url.path)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies and path parameters are client errors"""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg", message)
    return JSONResponse(status_code=400, content={"detail": message})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler"""
    logger.error(
        "Unhandled exception",
        exception=str(exc),
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred",
            "request_id": getattr(request.state, "request_id", None)
        }
    )


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "service": "RecipeGen Backend Service",
        "version": settings.VERSION,
        "status": "healthy",
        "environment": settings.ENVIRONMENT
    }


app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development,
        log_config=None  # Use structlog instead
    )
