"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_current_user, require_admin
from storefront.database import get_db
from storefront.models.user import User
from storefront.services.order_service import OrderService
from storefront.schemas.order import (
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderListResponse
)

router = APIRouter(prefix="/orders", tags=["orders"])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.post("/add", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Create order")
def create_order(
    order_data: OrderCreate,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new order for the current user
    
    Process:
    1. Validate products, shipping address and payment method
    2. Read each product's current price from the catalog
    3. Calculate total amount
    4. Save order with pending status
    5. Publish OrderCreated event
    
    - **products**: [{product, quantity}] (required, non-empty)
    - **shipping_address**: Address ID owned by the user (required)
    - **payment_method**: credit_card, debit_card, paypal, bank_transfer or cash_on_delivery
    """
    return service.create_order(order_data, user)


@router.get("", response_model=OrderListResponse, summary="Get my orders")
def get_orders(
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """Orders of the current user, newest first"""
    return service.get_user_orders(user)


@router.get("/{order_id}", response_model=OrderResponse, summary="Get order by ID")
def get_order(
    order_id: str,
    user: User = Depends(get_current_user),
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order
    
    - **order_id**: External order ID; only the owner or an admin may read it
    """
    return service.get_order(order_id, user)


@router.put(
    "/{order_id}/status",
    response_model=OrderResponse,
    dependencies=[Depends(require_admin)],
    summary="Update order status"
)
def update_order_status(
    order_id: str,
    status_data: OrderStatusUpdate,
    service: OrderService = Depends(get_order_service)
):
    """
    Update order status (admin only)
    
    - **status**: pending, processing, shipped, delivered or cancelled
    """
    return service.update_order_status(order_id, status_data)
