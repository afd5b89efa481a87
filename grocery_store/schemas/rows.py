"""
Pydantic schemas for rows read from the CSV sources
"""
from decimal import Decimal
from typing import Annotated, Dict

from pydantic import BaseModel, Field, PositiveInt

from grocery_store.models.order import FulfillmentStatus

NonNegativePrice = Annotated[Decimal, Field(ge=0)]


class CustomerRow(BaseModel):
    """One row of the customers file"""
    id: PositiveInt
    email: str = Field(..., min_length=1)
    street: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip: str = Field(..., min_length=1)


class OrderRow(BaseModel):
    """One row of the orders file, products already split into name -> price"""
    id: PositiveInt
    products: Dict[str, NonNegativePrice]
    customer_id: PositiveInt
    fulfillment_status: FulfillmentStatus
