"""
Order Service - Business Logic Layer
"""
from decimal import Decimal
from typing import List, Optional

from grocery_store.models.order import Order
from grocery_store.repositories.order_repository import OrderRepository
from grocery_store.schemas.order import CustomerResponse, OrderResponse, OrderListResponse


class OrderService:
    """Service layer turning loaded orders into response schemas"""

    def __init__(self, repository: OrderRepository, tax_rate: Decimal):
        self.repository = repository
        self.tax_rate = tax_rate

    def to_response(self, order: Order) -> OrderResponse:
        """Build the response schema for one order"""
        return OrderResponse(
            id=order.id,
            products=order.products,
            customer=CustomerResponse.model_validate(order.customer),
            fulfillment_status=order.fulfillment_status,
            total=order.total(),
            total_with_tax=order.total_with_tax(self.tax_rate)
        )

    def get_all_orders(self) -> OrderListResponse:
        """Get all orders"""
        orders = self.repository.all()
        return OrderListResponse(
            orders=[self.to_response(o) for o in orders],
            total=len(orders)
        )

    def get_order_by_id(self, order_id: int) -> Optional[OrderResponse]:
        """Get order by ID"""
        order = self.repository.find(order_id)
        if not order:
            return None
        return self.to_response(order)

    def get_orders_by_customer(self, customer_id: int) -> Optional[List[OrderResponse]]:
        """Get orders by customer ID"""
        orders = self.repository.find_by_customer(customer_id)
        if orders is None:
            return None
        return [self.to_response(o) for o in orders]
