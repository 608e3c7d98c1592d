"""
Auth API endpoints
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from storefront.api.deps import TOKEN_COOKIE, get_current_user, set_token_cookie
from storefront.database import get_db
from storefront.models.user import User
from storefront.schemas.address import MessageResponse
from storefront.schemas.user import (
    RegisterRequest,
    LoginRequest,
    ProfileUpdate,
    UserResponse,
    AuthResponse
)
from storefront.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency to get AuthService instance"""
    return AuthService(db)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED, summary="Register user")
def register(
    data: RegisterRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """
    Create an account and return an access token
    
    - **first_name**, **email**, **password** (min 6 characters) are required
    """
    result = service.register(data)
    set_token_cookie(response, result.token)
    return result


@router.post("/login", response_model=AuthResponse, summary="Log in")
def login(
    data: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service)
):
    """Exchange email and password for an access token"""
    result = service.login(data)
    set_token_cookie(response, result.token)
    return result


@router.get("/me", response_model=UserResponse, summary="Get current user")
def get_me(user: User = Depends(get_current_user)):
    return UserResponse.model_validate(user)


@router.put("/me", response_model=UserResponse, summary="Update profile")
def update_me(
    data: ProfileUpdate,
    user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service)
):
    """Update first and/or last name of the current user"""
    return service.update_profile(user, data)


@router.get("/logout", response_model=MessageResponse, summary="Log out")
def logout(response: Response):
    response.delete_cookie(TOKEN_COOKIE)
    return MessageResponse(message="User logged out successfully")
