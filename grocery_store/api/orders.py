"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from typing import List

from grocery_store.dependencies import get_order_service
from grocery_store.services.order_service import OrderService
from grocery_store.schemas.order import OrderResponse, OrderListResponse

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListResponse, summary="Get all orders")
def get_orders(service: OrderService = Depends(get_order_service)):
    """
    Retrieve all orders in source file order
    """
    return service.get_all_orders()


@router.get("/{order_id}", response_model=OrderResponse, summary="Get order by ID")
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order by ID

    - **order_id**: Order ID
    """
    order = service.get_order_by_id(order_id)
    if not order:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Order with id={order_id} not found"
        )
    return order


@router.get("/customer/{customer_id}", response_model=List[OrderResponse], summary="Get orders by customer")
def get_orders_by_customer(
    customer_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Get all orders for a specific customer, ascending by order ID

    - **customer_id**: Customer ID
    """
    orders = service.get_orders_by_customer(customer_id)
    if orders is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No orders for customer id={customer_id}"
        )
    return orders
