"""
Shared API dependencies: authentication and role checks
"""
from typing import Optional

from fastapi import Depends, Request, Response
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.database import get_db
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.services.auth_service import decode_access_token
from storefront.services.errors import ForbiddenError, UnauthorizedError

TOKEN_COOKIE = "token"

bearer_scheme = HTTPBearer(auto_error=False)


def set_token_cookie(response: Response, token: str) -> None:
    """Store the access token in an http-only cookie"""
    response.set_cookie(
        TOKEN_COOKIE,
        token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax"
    )


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db)
) -> User:
    """Resolve the user from the bearer token, falling back to the token cookie"""
    token = credentials.credentials if credentials else request.cookies.get(TOKEN_COOKIE)
    if not token:
        raise UnauthorizedError("Not authorized to access this route")
    
    user = UserRepository(db).get_by_id(decode_access_token(token))
    if not user:
        raise UnauthorizedError("Not authorized to access this route")
    return user


def require_admin(user: User = Depends(get_current_user)) -> User:
    """Allow only users with the admin role"""
    if not user.is_admin:
        raise ForbiddenError(f"User role {user.role} is not authorized to access this route")
    return user
