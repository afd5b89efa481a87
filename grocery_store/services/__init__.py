"""
Services package
"""
from grocery_store.services.order_service import OrderService

__all__ = ["OrderService"]
