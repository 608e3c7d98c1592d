"""
User Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy import desc
from sqlalchemy.orm import Session

from storefront.models.user import User


class UserRepository:
    """Repository for User CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[User]:
        """Get all users, newest first"""
        return self.db.query(User).order_by(desc(User.created_at), desc(User.id)).all()
    
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return self.db.query(User).filter(User.id == user_id).first()
    
    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by (lower-cased) email"""
        return self.db.query(User).filter(User.email == email.lower()).first()
    
    def create(self, user_data: dict) -> User:
        """Create new user"""
        user = User(**user_data)
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        return user
    
    def update(self, user: User, update_data: dict) -> User:
        """Apply field updates to an existing user"""
        for field, value in update_data.items():
            setattr(user, field, value)
        
        self.db.commit()
        self.db.refresh(user)
        return user
    
    def delete(self, user: User) -> None:
        """Delete user; the database removes their addresses"""
        self.db.delete(user)
        self.db.commit()
