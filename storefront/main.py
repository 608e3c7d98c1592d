"""
FastAPI Application Entry Point - Storefront API
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from storefront.config import settings
from storefront.database import init_db
from storefront.api import addresses, auth, health, orders, products, users
from storefront.services.errors import StorefrontError

logger = logging.getLogger("storefront")


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup"""
    logger.info("Starting %s...", settings.SERVICE_NAME)
    init_db()
    logger.info("Database initialized")
    logger.info("Event publishing %s", "enabled" if settings.EVENTS_ENABLED else "disabled")
    logger.info("%s is running on port %s", settings.SERVICE_NAME, settings.SERVICE_PORT)
    yield
    logger.info("Shutting down %s...", settings.SERVICE_NAME)


configure_logging()

# Create FastAPI application
app = FastAPI(
    title="Storefront API",
    description="Catalog, address book, orders and authentication for the storefront",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorefrontError)
async def storefront_error_handler(request: Request, exc: StorefrontError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Invalid request"
    logger.info("Rejected request to %s: %s", request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


# Include routers
app.include_router(health.router)
for module in (auth, users, products, addresses, orders):
    app.include_router(module.router, prefix=settings.API_PREFIX)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)
