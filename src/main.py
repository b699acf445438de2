"""
FastAPI Application Entry Point.

Путь: src/main.py
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.routes import articles
from src.infrastructure.config.settings import get_settings
from src.shared.exceptions.domain_exceptions import DomainValidationError, EntityNotFoundError
from src.shared.exceptions.infrastructure_exceptions import InfrastructureException

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(levelname)-8s | %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Blog Articles API",
    description="CRUD статей блога с проверкой запрещённых слов и ключевыми словами",
    version="1.0.0",
    debug=settings.debug
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes
app.include_router(articles.router, prefix="/api/v1")


# =============================================================================
# Exception handlers
# =============================================================================

@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(DomainValidationError)
async def validation_error_handler(request: Request, exc: DomainValidationError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(InfrastructureException)
async def infrastructure_error_handler(request: Request, exc: InfrastructureException):
    logger.error(f"[API] {request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=500, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": "1.0.0"
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Blog Articles API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
        "articles": "/api/v1/articles/",
    }
