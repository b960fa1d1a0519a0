"""
Order Service - Business Logic Layer
"""
import logging
from typing import List
from sqlalchemy.orm import Session

from shop.exceptions import NotFoundError
from shop.repositories.order_repository import OrderRepository
from shop.repositories.product_repository import ProductRepository
from shop.repositories.user_repository import UserRepository
from shop.schemas.order import OrderCreate, OrderResponse, OrderDetailResponse
from shop.services.pricing import price_order

logger = logging.getLogger(__name__)


class OrderService:
    """Service layer for order business logic"""
    
    def __init__(self, db: Session):
        self.repository = OrderRepository(db)
        self.product_repository = ProductRepository(db)
        self.user_repository = UserRepository(db)
    
    def get_all_orders(self) -> List[OrderDetailResponse]:
        """Get all orders with their items"""
        return [OrderDetailResponse.model_validate(o) for o in self.repository.get_all()]
    
    def get_order_by_id(self, order_id: int) -> OrderDetailResponse:
        """Get order with its items by ID"""
        order = self.repository.get_by_id(order_id)
        if not order:
            raise NotFoundError(f"Order with id={order_id} not found")
        return OrderDetailResponse.model_validate(order)
    
    def create_order(self, order_data: OrderCreate) -> OrderResponse:
        """
        Create new order
        
        Steps:
        1. Check the ordering user exists
        2. Look up current prices for all requested products in one query
        3. Price the lines (unknown products are dropped)
        4. Save header and items in a single transaction
        
        Args:
            order_data: Order creation data
        
        Returns:
            Created order header
        
        Raises:
            NotFoundError: If the user does not exist
            PersistenceError: If the write fails (nothing is committed)
        """
        if not self.user_repository.get_by_id(order_data.user_id):
            raise NotFoundError(f"User with id={order_data.user_id} not found")
        
        requested_ids = {line.product_id for line in order_data.products}
        catalog = {
            product.id: product.price
            for product in self.product_repository.get_by_ids(requested_ids)
        }
        
        priced = price_order(order_data.products, catalog)
        dropped = len(order_data.products) - len(priced.lines)
        if dropped:
            logger.warning(
                "Order for user %s: %d line(s) dropped, unknown product ids %s",
                order_data.user_id, dropped, sorted(requested_ids - catalog.keys())
            )
        
        order = self.repository.create_with_items(order_data.user_id, priced)
        logger.info(
            "Order %s created for user %s: %d item(s), total %.2f",
            order.id, order.user_id, len(priced.lines), order.total
        )
        return OrderResponse.model_validate(order)
