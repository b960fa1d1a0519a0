"""
Schemas package
"""
from shop.schemas.auth import LoginRequest, TokenResponse, TokenClaims, AuthenticatedUser
from shop.schemas.user import UserCreate, UserUpdate, UserResponse
from shop.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from shop.schemas.order import (
    OrderItemCreate,
    OrderCreate,
    OrderResponse,
    OrderItemResponse,
    OrderDetailResponse
)

__all__ = [
    "LoginRequest",
    "TokenResponse",
    "TokenClaims",
    "AuthenticatedUser",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "OrderItemCreate",
    "OrderCreate",
    "OrderResponse",
    "OrderItemResponse",
    "OrderDetailResponse"
]
