"""
Health check endpoint
"""
from fastapi import APIRouter, Depends
from datetime import datetime, timezone

from grocery_store.config import settings
from grocery_store.dependencies import get_repository
from grocery_store.exceptions import LoadError
from grocery_store.repositories.order_repository import OrderRepository

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check(repository: OrderRepository = Depends(get_repository)):
    """
    Health check endpoint

    Checks:
    - Service status
    - Order data loaded from the CSV sources
    """
    try:
        order_count = repository.count()
        data_status = "healthy"
    except LoadError as e:
        order_count = 0
        data_status = f"unhealthy: {e}"

    return {
        "service": settings.SERVICE_NAME,
        "status": "healthy" if data_status == "healthy" else "unhealthy",
        "data": data_status,
        "orders": order_count,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@router.get("/")
def root():
    """Root endpoint"""
    return {
        "service": settings.SERVICE_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
