"""
SQLAlchemy Product model
"""
from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Text, JSON, CheckConstraint
from sqlalchemy.sql import func
from storefront.database import Base


PRODUCT_SIZES = ('S', 'M', 'L', 'XL')


class Product(Base):
    """Catalog product database model"""
    
    __tablename__ = "products"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=False)
    size = Column(String(4), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    # Ordered list of {"id": ..., "url": ...}
    images = Column(JSON, nullable=False, default=list)
    is_explore = Column(Boolean, nullable=False, default=False)
    is_trending = Column(Boolean, nullable=False, default=False)
    offer_strip = Column(String(200), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
    
    __table_args__ = (
        CheckConstraint('price >= 0', name='check_price_non_negative'),
        CheckConstraint("size IN ('S', 'M', 'L', 'XL')", name='check_size_valid'),
    )
    
    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
