"""
Order Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy import desc

from storefront.models.order import Order, OrderItem


def _expanded(query, include_user: bool = True):
    options = [
        selectinload(Order.items).joinedload(OrderItem.product),
        joinedload(Order.shipping_address),
    ]
    if include_user:
        options.append(joinedload(Order.user))
    return query.options(*options)


class OrderRepository:
    """Repository for Order CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_order_id(self, order_id: str) -> Optional[Order]:
        """Get order by its external order ID, with references loaded"""
        return _expanded(self.db.query(Order)).filter(Order.order_id == order_id).first()
    
    def get_by_user(self, user_id: int) -> List[Order]:
        """Get a user's orders, newest first"""
        return _expanded(self.db.query(Order), include_user=False).filter(
            Order.user_id == user_id
        ).order_by(desc(Order.created_at), desc(Order.id)).all()
    
    def create(self, order_data: dict, items: List[dict]) -> Order:
        """
        Create new order with its line items
        
        Args:
            order_data: Dictionary with order fields
            items: Line item dictionaries, in order
        
        Returns:
            Created order
        """
        order = Order(**order_data)
        order.items = [OrderItem(position=index, **item) for index, item in enumerate(items)]
        self.db.add(order)
        self.db.commit()
        return self.get_by_order_id(order.order_id)
    
    def update_status(self, order: Order, new_status: str) -> Order:
        """Update order status"""
        order.status = new_status
        self.db.commit()
        return self.get_by_order_id(order.order_id)
