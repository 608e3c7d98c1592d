"""
SQLAlchemy Order models
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.database import Base


ORDER_STATUSES = ('pending', 'processing', 'shipped', 'delivered', 'cancelled')
PAYMENT_METHODS = ('credit_card', 'debit_card', 'paypal', 'bank_transfer', 'cash_on_delivery')
PAYMENT_STATUSES = ('pending', 'paid', 'failed', 'refunded')


def _in_clause(column: str, values: tuple) -> str:
    return f"{column} IN ({', '.join(repr(v) for v in values)})"


class Order(Base):
    """Order database model"""
    
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    order_id = Column(String(36), nullable=False, unique=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    total_amount = Column(Float, nullable=False)
    status = Column(String(20), nullable=False, default='pending', index=True)
    shipping_address_id = Column(Integer, ForeignKey("addresses.id"), nullable=False)
    payment_method = Column(String(30), nullable=False)
    payment_status = Column(String(20), nullable=False, default='pending')
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    user = relationship("User")
    shipping_address = relationship("Address")
    items = relationship(
        "OrderItem",
        back_populates="order",
        order_by="OrderItem.position",
        cascade="all, delete-orphan"
    )
    
    __table_args__ = (
        CheckConstraint('total_amount >= 0', name='check_total_non_negative'),
        CheckConstraint(_in_clause('status', ORDER_STATUSES), name='check_status_valid'),
        CheckConstraint(_in_clause('payment_method', PAYMENT_METHODS), name='check_payment_method_valid'),
        CheckConstraint(_in_clause('payment_status', PAYMENT_STATUSES), name='check_payment_status_valid'),
    )
    
    def __repr__(self):
        return f"<Order(order_id='{self.order_id}', user_id={self.user_id}, total={self.total_amount}, status='{self.status}')>"


class OrderItem(Base):
    """Order line item with the unit price captured at order time"""
    
    __tablename__ = "order_items"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    order_pk = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    price = Column(Float, nullable=False)
    
    order = relationship("Order", back_populates="items")
    product = relationship("Product")
    
    __table_args__ = (
        CheckConstraint('quantity >= 1', name='check_item_quantity_positive'),
        CheckConstraint('price >= 0', name='check_item_price_non_negative'),
    )
    
    def __repr__(self):
        return f"<OrderItem(product_id={self.product_id}, quantity={self.quantity}, price={self.price})>"
