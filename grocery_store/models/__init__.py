"""
Models package
"""
from grocery_store.models.customer import Address, Customer
from grocery_store.models.order import FulfillmentStatus, Order

__all__ = ["Address", "Customer", "FulfillmentStatus", "Order"]
