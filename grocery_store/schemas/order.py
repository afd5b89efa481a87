"""
Pydantic schemas for API responses
"""
from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, ConfigDict

from grocery_store.models.order import FulfillmentStatus


class AddressResponse(BaseModel):
    """Schema for customer address"""
    street: str
    city: str
    state: str
    zip: str

    model_config = ConfigDict(from_attributes=True)


class CustomerResponse(BaseModel):
    """Schema for customer response"""
    id: int
    email: str
    address: AddressResponse

    model_config = ConfigDict(from_attributes=True)


class OrderResponse(BaseModel):
    """Schema for order response"""
    id: int
    products: Dict[str, Decimal]
    customer: CustomerResponse
    fulfillment_status: FulfillmentStatus
    total: Decimal
    total_with_tax: Decimal


class OrderListResponse(BaseModel):
    """Schema for list of orders response"""
    orders: list[OrderResponse]
    total: int
