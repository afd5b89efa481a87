"""
Order domain model
"""
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Dict, Optional, Union

from grocery_store.config import settings
from grocery_store.exceptions import InvalidArgumentError
from grocery_store.models.customer import Customer

Price = Union[Decimal, float, int, str]

CENTS = Decimal("0.01")


class FulfillmentStatus(Enum):
    """Lifecycle label of an order"""
    PENDING = "pending"
    PAID = "paid"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    COMPLETE = "complete"


def to_decimal(price: Price) -> Decimal:
    """Convert a price to Decimal; floats go through str() to drop binary noise"""
    if isinstance(price, Decimal):
        return price
    if isinstance(price, float):
        return Decimal(str(price))
    return Decimal(price)


class Order:
    """
    A purchase linking a customer to priced products and a fulfillment status.

    Args:
        id: Order ID
        products: Mapping of product name to unit price, used as the working set
        customer: Customer placing the order
        fulfillment_status: One of FulfillmentStatus, pending when omitted

    Raises:
        InvalidArgumentError: If fulfillment_status is not a FulfillmentStatus
    """

    def __init__(
        self,
        id: int,
        products: Dict[str, Price],
        customer: Customer,
        fulfillment_status: FulfillmentStatus = FulfillmentStatus.PENDING
    ):
        if not isinstance(fulfillment_status, FulfillmentStatus):
            raise InvalidArgumentError(
                f"Invalid fulfillment status {fulfillment_status!r}, "
                f"expected one of: {', '.join(s.value for s in FulfillmentStatus)}"
            )
        self.id = id
        self.products = products
        self.customer = customer
        self.fulfillment_status = fulfillment_status

    def total(self) -> Decimal:
        """Sum of all product prices, Decimal 0 when there are no products"""
        return sum((to_decimal(price) for price in self.products.values()), Decimal("0"))

    def total_with_tax(self, rate: Optional[Price] = None) -> Decimal:
        """Total with tax applied, rounded half-up to cents; rate defaults to the configured TAX_RATE"""
        if rate is None:
            rate = settings.TAX_RATE
        taxed = self.total() * (Decimal("1") + to_decimal(rate))
        return taxed.quantize(CENTS, rounding=ROUND_HALF_UP)

    def add_product(self, name: str, price: Price) -> None:
        """
        Add a product to the order

        Raises:
            InvalidArgumentError: If a product with this name is already present
        """
        if name in self.products:
            raise InvalidArgumentError(f"Product '{name}' is already in order {self.id}")
        self.products[name] = to_decimal(price)

    def remove_product(self, name: str) -> None:
        """
        Remove a product from the order

        Raises:
            InvalidArgumentError: If no product with this name is present
        """
        if name not in self.products:
            raise InvalidArgumentError(f"Product '{name}' is not in order {self.id}")
        del self.products[name]

    def __repr__(self):
        customer_id = self.customer.id if self.customer is not None else None
        return (
            f"<Order(id={self.id}, customer_id={customer_id}, "
            f"products={len(self.products)}, status='{self.fulfillment_status.value}')>"
        )
