"""
Product Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy import desc, or_

from storefront.models.product import Product


class ProductRepository:
    """Repository for Product CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 100) -> List[Product]:
        """Get all products, newest first, with pagination"""
        return self.db.query(Product).order_by(
            desc(Product.created_at), desc(Product.id)
        ).offset(skip).limit(limit).all()
    
    def search(self, q: Optional[str] = None, category: Optional[str] = None) -> List[Product]:
        """Case-insensitive match on name or description, newest first"""
        query = self.db.query(Product)
        if q:
            query = query.filter(or_(
                Product.name.icontains(q, autoescape=True),
                Product.description.icontains(q, autoescape=True)
            ))
        if category:
            query = query.filter(Product.category == category)
        return query.order_by(desc(Product.created_at), desc(Product.id)).all()
    
    def get_explore(self) -> List[Product]:
        """Products flagged for the explore collection, newest first"""
        return self.db.query(Product).filter(
            Product.is_explore.is_(True)
        ).order_by(desc(Product.created_at), desc(Product.id)).all()
    
    def get_trending(self, limit: int = 10) -> List[Product]:
        """Most recent products flagged as trending"""
        return self.db.query(Product).filter(
            Product.is_trending.is_(True)
        ).order_by(desc(Product.created_at), desc(Product.id)).limit(limit).all()
    
    def list_all(self) -> List[Product]:
        """Get every product in id order"""
        return self.db.query(Product).order_by(Product.id).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def create(self, product_data: dict) -> Product:
        """Create new product"""
        product = Product(**product_data)
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def update(self, product: Product, update_data: dict) -> Product:
        """Apply field updates to an existing product"""
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def delete(self, product: Product) -> None:
        """Delete product"""
        self.db.delete(product)
        self.db.commit()
    
    def count(self) -> int:
        """Get total count of products"""
        return self.db.query(Product).count()
