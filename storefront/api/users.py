"""
User administration endpoints (admin only)
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import require_admin
from storefront.database import get_db
from storefront.models.user import User
from storefront.schemas.address import MessageResponse
from storefront.schemas.user import (
    UserCreate,
    UserUpdate,
    UserResponse,
    UserListResponse
)
from storefront.services.user_service import UserService

router = APIRouter(prefix="/auth/users", tags=["users"], dependencies=[Depends(require_admin)])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """Dependency to get UserService instance"""
    return UserService(db)


@router.get("", response_model=UserListResponse, summary="Get all users")
def get_users(service: UserService = Depends(get_user_service)):
    return service.get_users()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, summary="Create user")
def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service)
):
    """
    Create an account on behalf of someone else
    
    - **first_name**, **email**, **password** (min 6 characters) are required
    - **role**: user (default) or admin
    """
    return service.create_user(data)


@router.put("/{user_id}", response_model=UserResponse, summary="Update user")
def update_user(
    user_id: int,
    data: UserUpdate,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """Update names, email or role. Admins cannot demote themselves."""
    return service.update_user(user_id, data, admin)


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete user")
def delete_user(
    user_id: int,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service)
):
    """Delete an account and its addresses. Users with orders are kept."""
    service.delete_user(user_id, admin)
    return MessageResponse(message="User deleted successfully")
