"""
Order Service - Business Logic Layer
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.models.order import Order, ORDER_STATUSES, PAYMENT_METHODS
from storefront.models.user import User
from storefront.publishers.event_publisher import EventPublisher
from storefront.repositories.address_repository import AddressRepository
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.schemas.order import (
    OrderCreate,
    OrderStatusUpdate,
    OrderResponse,
    OrderSummaryResponse,
    OrderListResponse
)
from storefront.services.errors import BadRequestError, ForbiddenError, NotFoundError

logger = logging.getLogger(__name__)


def parse_order_id(order_id: str) -> str:
    """
    Canonical form of an external order ID
    
    Raises:
        BadRequestError: If the value is not a UUID
    """
    try:
        return str(uuid.UUID(str(order_id)))
    except ValueError:
        raise BadRequestError("Invalid order ID")


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(
        self,
        db: Session,
        event_publisher: Optional[EventPublisher] = None,
        media_base_url: Optional[str] = None
    ):
        self.db = db
        self.repository = OrderRepository(db)
        self.product_repository = ProductRepository(db)
        self.address_repository = AddressRepository(db)
        self.event_publisher = event_publisher or EventPublisher()
        self.media_base_url = settings.MEDIA_BASE_URL if media_base_url is None else media_base_url
    
    def _context(self) -> dict:
        return {"media_base_url": self.media_base_url}
    
    def _to_response(self, order: Order) -> OrderResponse:
        return OrderResponse.model_validate(order, context=self._context())
    
    def create_order(self, order_data: OrderCreate, user: User) -> OrderResponse:
        """
        Create new order
        
        Steps (the first failing check ends the request):
        1. Require a non-empty product list
        2. Require shipping address and payment method
        3. Resolve the shipping address among the user's addresses
        4. Resolve each product in input order and check its quantity
        5. Capture catalog prices and compute the total
        6. Save the order with pending status and payment status
        7. Publish OrderCreated event
        
        Raises:
            BadRequestError: Missing input, bad quantity, unknown payment method
                or a store error while saving
            NotFoundError: Unknown shipping address or product
        """
        logger.info("Add order request by user %s", user.id)
        
        if not order_data.products:
            logger.warning("Products array missing or empty")
            raise BadRequestError("Please provide products array")
        
        if order_data.shipping_address is None:
            logger.warning("Shipping address missing")
            raise BadRequestError("Please provide shipping address")
        
        payment_method = (order_data.payment_method or "").strip()
        if not payment_method:
            logger.warning("Payment method missing")
            raise BadRequestError("Please provide payment method")
        
        address = self.address_repository.get_for_user(order_data.shipping_address, user.id)
        if not address:
            logger.warning("Shipping address not found: %s", order_data.shipping_address)
            raise NotFoundError("Shipping address not found")
        
        total_amount = 0.0
        items: List[dict] = []
        
        for item in order_data.products:
            product = self.product_repository.get_by_id(item.product)
            if not product:
                logger.warning("Product not found: %s", item.product)
                raise NotFoundError(f"Product with id {item.product} not found")
            
            if item.quantity < 1:
                logger.warning("Invalid quantity for product %s: %s", item.product, item.quantity)
                raise BadRequestError(f"Product quantity must be at least 1 (product {item.product})")
            
            # Price comes from the catalog, never from the client
            items.append({
                "product_id": product.id,
                "quantity": item.quantity,
                "price": product.price
            })
            total_amount += product.price * item.quantity
        
        if payment_method not in PAYMENT_METHODS:
            logger.warning("Invalid payment method: %s", payment_method)
            raise BadRequestError("Invalid payment method")
        
        order_dict = {
            "order_id": str(uuid.uuid4()),
            "user_id": user.id,
            "total_amount": total_amount,
            "status": "pending",
            "shipping_address_id": address.id,
            "payment_method": payment_method,
            "payment_status": "pending"
        }
        
        try:
            order = self.repository.create(order_dict, items)
        except IntegrityError as e:
            self.db.rollback()
            logger.error("Error creating order: %s", e)
            raise BadRequestError("Duplicate order creation")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error creating order: %s", e)
            raise BadRequestError("Could not create order")
        
        logger.info("Order created successfully: %s", order.order_id)
        
        self.event_publisher.publish_order_created({
            "order_id": order.order_id,
            "user_id": order.user_id,
            "products": items,
            "total_amount": order.total_amount,
            "payment_method": order.payment_method,
            "status": order.status
        })
        
        return self._to_response(order)
    
    def get_order(self, order_id: str, user: User) -> OrderResponse:
        """
        Get an order by its external ID
        
        Raises:
            BadRequestError: Malformed order ID
            NotFoundError: Unknown order
            ForbiddenError: Requester neither owns the order nor is admin
        """
        order = self.repository.get_by_order_id(parse_order_id(order_id))
        if not order:
            raise NotFoundError("Order not found")
        
        if order.user_id != user.id and not user.is_admin:
            logger.warning("User %s denied access to order %s", user.id, order.order_id)
            raise ForbiddenError("Not authorized to access this order")
        
        return self._to_response(order)
    
    def get_user_orders(self, user: User) -> OrderListResponse:
        """Get the requester's orders, newest first"""
        orders = self.repository.get_by_user(user.id)
        return OrderListResponse(
            orders=[OrderSummaryResponse.model_validate(o, context=self._context()) for o in orders],
            count=len(orders)
        )
    
    def update_order_status(self, order_id: str, status_data: OrderStatusUpdate) -> OrderResponse:
        """
        Update order status
        
        Any status may follow any other; only membership in the status
        enumeration is checked.
        
        Raises:
            BadRequestError: Missing or invalid status, malformed order ID
            NotFoundError: Unknown order
        """
        if not status_data.status:
            raise BadRequestError("Please provide status")
        
        if status_data.status not in ORDER_STATUSES:
            raise BadRequestError("Invalid status")
        
        order = self.repository.get_by_order_id(parse_order_id(order_id))
        if not order:
            raise NotFoundError("Order not found")
        
        old_status = order.status
        try:
            order = self.repository.update_status(order, status_data.status)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Error updating status of order %s: %s", order_id, e)
            raise BadRequestError("Could not update order status")
        
        logger.info("Order %s status %s -> %s", order.order_id, old_status, order.status)
        
        self.event_publisher.publish_order_status_changed({
            "order_id": order.order_id,
            "old_status": old_status,
            "new_status": order.status,
            "updated_at": order.updated_at.isoformat()
        })
        
        return self._to_response(order)
