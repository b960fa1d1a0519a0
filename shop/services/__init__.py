"""
Services package
"""
from shop.services.auth_service import AuthService
from shop.services.order_service import OrderService
from shop.services.product_service import ProductService
from shop.services.user_service import UserService

__all__ = ["AuthService", "OrderService", "ProductService", "UserService"]
