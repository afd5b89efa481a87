"""
Shared dependencies for the API layer
"""
from functools import lru_cache

from fastapi import Depends

from grocery_store.config import settings
from grocery_store.loaders.csv_loader import CsvLoader
from grocery_store.repositories.order_repository import OrderRepository
from grocery_store.services.order_service import OrderService


@lru_cache
def get_repository() -> OrderRepository:
    """Process-wide repository over the configured CSV sources"""
    return OrderRepository(CsvLoader.from_settings(settings))


def get_order_service(repository: OrderRepository = Depends(get_repository)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(repository, settings.TAX_RATE)
