"""
Repositories package
"""
from shop.repositories.user_repository import UserRepository
from shop.repositories.product_repository import ProductRepository
from shop.repositories.order_repository import OrderRepository

__all__ = ["UserRepository", "ProductRepository", "OrderRepository"]
