"""
FastAPI Application Entry Point - Grocery Store order directory
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from grocery_store.config import settings
from grocery_store.dependencies import get_repository
from grocery_store.api import orders, health

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Apply the configured log level to the root logger"""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load order data on startup"""
    configure_logging()
    logger.info(f"Starting {settings.SERVICE_NAME}...")
    repository = app.dependency_overrides.get(get_repository, get_repository)()
    repository.load()
    logger.info(f"Loaded {repository.count()} orders")
    logger.info(f"{settings.SERVICE_NAME} is running on port {settings.SERVICE_PORT}")
    yield
    logger.info(f"Shutting down {settings.SERVICE_NAME}...")


# Create FastAPI application
app = FastAPI(
    title="Grocery Store",
    description="Read-only directory of grocery orders and their customers",
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

# Include routers
app.include_router(health.router)
app.include_router(orders.router)

# Prometheus metrics
Instrumentator().instrument(app).expose(app)
