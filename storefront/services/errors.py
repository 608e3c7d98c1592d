"""
Domain errors raised by the service layer
"""
from fastapi import status


class StorefrontError(Exception):
    """Base exception carrying an HTTP status code and a message"""
    status_code = status.HTTP_400_BAD_REQUEST
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(StorefrontError):
    """Missing or invalid input"""
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(StorefrontError):
    """Missing or invalid credentials"""
    status_code = status.HTTP_401_UNAUTHORIZED


class ForbiddenError(StorefrontError):
    """Authenticated but not allowed"""
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(StorefrontError):
    """Referenced entity does not exist"""
    status_code = status.HTTP_404_NOT_FOUND
