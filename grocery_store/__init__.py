"""
Grocery store orders: customer and order models with a CSV-backed repository.
"""
from grocery_store.exceptions import GroceryStoreError, InvalidArgumentError, LoadError
from grocery_store.loaders.csv_loader import CsvLoader
from grocery_store.models import Address, Customer, FulfillmentStatus, Order
from grocery_store.repositories.order_repository import OrderRepository

__all__ = [
    "Address",
    "Customer",
    "CsvLoader",
    "FulfillmentStatus",
    "GroceryStoreError",
    "InvalidArgumentError",
    "LoadError",
    "Order",
    "OrderRepository",
]
