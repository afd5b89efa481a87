"""
Repositories package
"""
from grocery_store.repositories.order_repository import OrderRepository

__all__ = ["OrderRepository"]
