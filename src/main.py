"""SEO Tag Inspector API - meta tag analysis service."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import analyze_router, health_router
from api.schemas import ErrorResponse
from config import settings
from fetcher import FetchError, create_client

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Opens one shared HTTP client for the fetcher on startup and closes it
    on shutdown.
    """
    logger.info(f"Starting {settings.app_name}...")
    async with create_client() as client:
        app.state.http_client = client
        yield
    app.state.http_client = None
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="SEO Tag Inspector API",
    description="Fetches a page and scores its SEO, Open Graph and Twitter Card tags.",
    version=settings.version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router, prefix="/api")
app.include_router(analyze_router, prefix="/api")


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    """Report a failed fetch as an error record with a kind-specific status."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=exc.message,
            details=exc.details or None,
            code=exc.code,
        ).model_dump(exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies in the same shape as other errors."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error="Invalid request",
            details=details,
            code="invalid-request",
        ).model_dump(exclude_none=True),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Service index."""
    return {
        "service": settings.app_name,
        "docs": "/docs",
        "health": "/api/health",
    }
