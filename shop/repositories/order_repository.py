"""
Order Repository - Data Access Layer
"""
import logging
from typing import TYPE_CHECKING, List, Optional
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.exc import SQLAlchemyError

from shop.exceptions import PersistenceError
from shop.models.order import Order, OrderItem

if TYPE_CHECKING:
    from shop.services.pricing import PricedOrder

logger = logging.getLogger(__name__)


class OrderRepository:
    """Repository for Order reads and atomic order writes"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[Order]:
        """Get all orders with their items"""
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).order_by(Order.id).all()
    
    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Get order with its items by ID"""
        return self.db.query(Order).options(
            selectinload(Order.items)
        ).filter(Order.id == order_id).first()
    
    def create_with_items(self, user_id: int, priced_order: "PricedOrder") -> Order:
        """
        Persist an order header and all of its items as one unit
        
        The header is flushed first so its generated ID can be written to
        every item's order_id. Nothing is visible until the single commit;
        any failure rolls back header and items together.
        
        Args:
            user_id: Owning user ID
            priced_order: Output of price_order()
        
        Returns:
            Persisted order header
        
        Raises:
            PersistenceError: If any write fails
        """
        order = Order(user_id=user_id, total=priced_order.grand_total)
        try:
            self.db.add(order)
            self.db.flush()
            
            self.db.add_all([
                OrderItem(
                    order_id=order.id,
                    product_id=line.product_id,
                    quantity=line.quantity,
                    price=line.unit_price,
                    total=line.line_total
                )
                for line in priced_order.lines
            ])
            self.db.flush()
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Order write for user %s rolled back: %s", user_id, e)
            raise PersistenceError(f"Could not save order: {e}") from e
        
        self.db.refresh(order)
        return order
