"""
Pydantic schemas for authentication and user profiles
"""
from pydantic import BaseModel, Field, EmailStr, ConfigDict
from typing import Literal, Optional
from datetime import datetime


class RegisterRequest(BaseModel):
    """Registration payload; presence is checked by the auth service"""
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Login payload"""
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(BaseModel):
    """Schema for updating the current user's profile"""
    first_name: Optional[str] = Field(None, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)


UserRole = Literal["user", "admin"]


class UserCreate(BaseModel):
    """Account created by an administrator"""
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: EmailStr
    password: str
    role: UserRole = "user"


class UserUpdate(BaseModel):
    """Administrative update of an account (all fields optional)"""
    first_name: Optional[str] = Field(None, min_length=1, max_length=50)
    last_name: Optional[str] = Field(None, max_length=50)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None


class UserResponse(BaseModel):
    """Schema for user response"""
    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    email: str
    role: str
    created_at: datetime
    
    model_config = ConfigDict(from_attributes=True)


class UserSummary(BaseModel):
    """User fields embedded in order responses"""
    id: int
    first_name: Optional[str]
    last_name: Optional[str]
    email: str
    
    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    """Token issued on register/login"""
    token: str
    user: UserResponse


class UserListResponse(BaseModel):
    """Schema for list of users response"""
    users: list[UserResponse]
    count: int
