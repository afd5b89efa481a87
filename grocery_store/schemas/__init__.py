"""
Schemas package
"""
from grocery_store.schemas.order import (
    AddressResponse,
    CustomerResponse,
    OrderResponse,
    OrderListResponse
)
from grocery_store.schemas.rows import CustomerRow, OrderRow

__all__ = [
    "AddressResponse",
    "CustomerResponse",
    "OrderResponse",
    "OrderListResponse",
    "CustomerRow",
    "OrderRow"
]
