"""
Models package
"""
from shop.models.user import User
from shop.models.product import Product
from shop.models.order import Order, OrderItem

__all__ = ["User", "Product", "Order", "OrderItem"]
