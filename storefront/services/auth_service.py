"""
Auth Service - registration, login and token handling
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.config import settings
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.user import (
    RegisterRequest,
    LoginRequest,
    ProfileUpdate,
    UserResponse,
    AuthResponse
)
from storefront.services.errors import BadRequestError, UnauthorizedError

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    """Salted bcrypt hash of a password"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check of a password against its bcrypt hash"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


def create_access_token(user: User, expires_minutes: Optional[int] = None) -> str:
    """Issue a signed JWT whose subject is the user ID"""
    now = datetime.now(timezone.utc)
    expires = now + timedelta(minutes=expires_minutes or settings.JWT_EXPIRE_MINUTES)
    payload = {
        "sub": str(user.id),
        "role": user.role,
        "iat": now,
        "exp": expires
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Validate a JWT and return the user ID it was issued for
    
    Raises:
        UnauthorizedError: If the token is malformed, tampered with or expired
    """
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        return int(payload["sub"])
    except (jwt.PyJWTError, KeyError, ValueError) as e:
        logger.info("Rejected access token: %s", e)
        raise UnauthorizedError("Not authorized to access this route")


class AuthService:
    """Service layer for accounts and credentials"""
    
    def __init__(self, db: Session):
        self.repository = UserRepository(db)
    
    def register(self, data: RegisterRequest) -> AuthResponse:
        """
        Create an account and issue a token
        
        Raises:
            BadRequestError: Missing fields, short password or duplicate email
        """
        if not data.first_name or not data.email or not data.password:
            raise BadRequestError("Please provide a first name, email and password")
        
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise BadRequestError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        
        email = data.email.lower()
        if self.repository.get_by_email(email):
            raise BadRequestError("User already exists with this email")
        
        admin_email = (settings.DEFAULT_ADMIN_EMAIL or "").strip().lower()
        role = "admin" if admin_email and email == admin_email else "user"
        
        try:
            user = self.repository.create({
                "first_name": data.first_name.strip(),
                "last_name": data.last_name.strip() if data.last_name else None,
                "email": email,
                "password_hash": hash_password(data.password),
                "role": role
            })
        except IntegrityError:
            self.repository.db.rollback()
            raise BadRequestError("User already exists with this email")
        
        logger.info("Registered user %s with role %s", user.id, user.role)
        return self._token_response(user)
    
    def login(self, data: LoginRequest) -> AuthResponse:
        """
        Check credentials and issue a token
        
        Raises:
            BadRequestError: Missing email or password
            UnauthorizedError: Unknown email or wrong password
        """
        if not data.email or not data.password:
            raise BadRequestError("Please provide an email and password")
        
        user = self.repository.get_by_email(data.email.strip())
        if not user or not verify_password(data.password, user.password_hash):
            logger.warning("Failed login for %s", data.email)
            raise UnauthorizedError("Invalid credentials")
        
        return self._token_response(user)
    
    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return self.repository.get_by_id(user_id)
    
    def update_profile(self, user: User, data: ProfileUpdate) -> UserResponse:
        """Update the first and/or last name of a user"""
        stripped = {
            field: value.strip()
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None
        }
        update_data = {field: value for field, value in stripped.items() if value}
        if not update_data:
            raise BadRequestError("Please provide first name or last name to update")
        
        user = self.repository.update(user, update_data)
        return UserResponse.model_validate(user)
    
    def _token_response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=create_access_token(user),
            user=UserResponse.model_validate(user)
        )
