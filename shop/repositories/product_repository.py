"""
Product Repository - Data Access Layer
"""
import logging
from typing import Iterable, List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from shop.exceptions import PersistenceError
from shop.models.product import Product
from shop.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductRepository:
    """Repository for Product CRUD operations and catalog lookups"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[Product]:
        """Get all products"""
        return self.db.query(Product).order_by(Product.id).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def get_by_ids(self, product_ids: Iterable[int]) -> List[Product]:
        """
        Batch catalog lookup in one round trip
        
        Unknown IDs are simply absent from the result.
        """
        ids = set(product_ids)
        if not ids:
            return []
        return self.db.query(Product).filter(Product.id.in_(ids)).all()
    
    def create(self, product_data: ProductCreate) -> Product:
        """Create new product"""
        product = Product(**product_data.model_dump())
        self.db.add(product)
        self._commit()
        self.db.refresh(product)
        return product
    
    def update(self, product_id: int, product_data: ProductUpdate) -> Optional[Product]:
        """Update existing product"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        # Update only provided fields
        update_data = product_data.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self._commit()
        self.db.refresh(product)
        return product
    
    def delete(self, product_id: int) -> bool:
        """Delete product"""
        product = self.get_by_id(product_id)
        if not product:
            return False
        
        self.db.delete(product)
        self._commit()
        return True
    
    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Product write failed: %s", e)
            raise PersistenceError(f"Could not save product: {e}") from e
