"""
Product Service - Business Logic Layer
"""
from typing import List
from sqlalchemy.orm import Session

from shop.exceptions import NotFoundError
from shop.repositories.product_repository import ProductRepository
from shop.schemas.product import ProductCreate, ProductUpdate, ProductResponse


class ProductService:
    """Service layer for product business logic"""
    
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
    
    def get_all_products(self) -> List[ProductResponse]:
        """Get all products"""
        return [ProductResponse.model_validate(p) for p in self.repository.get_all()]
    
    def get_product_by_id(self, product_id: int) -> ProductResponse:
        """Get product by ID"""
        product = self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product with id={product_id} not found")
        return ProductResponse.model_validate(product)
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """Create new product"""
        product = self.repository.create(product_data)
        return ProductResponse.model_validate(product)
    
    def update_product(self, product_id: int, product_data: ProductUpdate) -> ProductResponse:
        """Update existing product"""
        product = self.repository.update(product_id, product_data)
        if not product:
            raise NotFoundError(f"Product with id={product_id} not found")
        return ProductResponse.model_validate(product)
    
    def delete_product(self, product_id: int) -> None:
        """Delete product; existing orders keep their price snapshot"""
        if not self.repository.delete(product_id):
            raise NotFoundError(f"Product with id={product_id} not found")
