"""
User Service - administrative account management
"""
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    UserListResponse
)
from storefront.services.auth_service import MIN_PASSWORD_LENGTH, hash_password
from storefront.services.errors import BadRequestError, NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for admin-only user operations"""
    
    def __init__(self, db: Session):
        self.repository = UserRepository(db)
    
    def _get_or_404(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError(f"User with id={user_id} not found")
        return user
    
    def _ensure_email_free(self, email: str, user_id: Optional[int] = None) -> None:
        existing = self.repository.get_by_email(email)
        if existing and existing.id != user_id:
            raise BadRequestError("User already exists with this email")
    
    def get_users(self) -> UserListResponse:
        """Get all accounts, newest first"""
        users = self.repository.get_all()
        return UserListResponse(
            users=[UserResponse.model_validate(u) for u in users],
            count=len(users)
        )
    
    def create_user(self, data: UserCreate) -> UserResponse:
        """
        Create an account with an explicit role
        
        Raises:
            BadRequestError: Short password or duplicate email
        """
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        
        email = data.email.lower()
        self._ensure_email_free(email)
        
        try:
            user = self.repository.create({
                "first_name": data.first_name.strip(),
                "last_name": data.last_name.strip() if data.last_name else None,
                "email": email,
                "password_hash": hash_password(data.password),
                "role": data.role
            })
        except IntegrityError:
            self.repository.db.rollback()
            raise BadRequestError("User already exists with this email")
        
        logger.info("Admin created user %s with role %s", user.id, user.role)
        return UserResponse.model_validate(user)
    
    def update_user(self, user_id: int, data: UserUpdate, acting_user: User) -> UserResponse:
        """
        Update names, email or role of an account
        
        Raises:
            NotFoundError: Unknown user
            BadRequestError: Email taken, or an admin demoting themselves
        """
        user = self._get_or_404(user_id)
        update_data = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field == "last_name"
        }
        
        if "email" in update_data:
            update_data["email"] = update_data["email"].lower()
            self._ensure_email_free(update_data["email"], user_id=user.id)
        
        if user.id == acting_user.id and update_data.get("role", user.role) != "admin":
            raise BadRequestError("You cannot remove your own admin role")
        
        try:
            user = self.repository.update(user, update_data)
        except IntegrityError:
            self.repository.db.rollback()
            raise BadRequestError("User already exists with this email")
        
        logger.info("Admin %s updated user %s", acting_user.id, user.id)
        return UserResponse.model_validate(user)
    
    def delete_user(self, user_id: int, acting_user: User) -> None:
        """
        Delete an account together with its address book
        
        Raises:
            NotFoundError: Unknown user
            BadRequestError: Deleting yourself, or the user has placed orders
        """
        user = self._get_or_404(user_id)
        if user.id == acting_user.id:
            raise BadRequestError("You cannot delete your own account")
        
        try:
            self.repository.delete(user)
        except IntegrityError:
            self.repository.db.rollback()
            logger.warning("Refused to delete user %s with existing orders", user_id)
            raise BadRequestError(f"User with id={user_id} has existing orders")
        logger.info("Admin %s deleted user %s", acting_user.id, user_id)
