"""
Product API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from shop.api.deps import get_current_claims
from shop.database import get_db
from shop.exceptions import NotFoundError
from shop.services.product_service import ProductService
from shop.schemas.product import ProductCreate, ProductUpdate, ProductResponse

router = APIRouter(prefix="/products", tags=["products"])


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """Dependency to get ProductService instance"""
    return ProductService(db)


@router.get("", response_model=List[ProductResponse], summary="Get all products")
def get_products(service: ProductService = Depends(get_product_service)):
    """Retrieve the whole catalog"""
    return service.get_all_products()


@router.get("/{product_id}", response_model=ProductResponse, summary="Get product by ID")
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """
    Retrieve a specific product by ID
    
    - **product_id**: Product ID
    """
    try:
        return service.get_product_by_id(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED, summary="Create product",
             dependencies=[Depends(get_current_claims)])
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product
    
    - **name**: Product name (required)
    - **price**: Product price (required, must be non-negative)
    """
    return service.create_product(product_data)


@router.put("/{product_id}", response_model=ProductResponse, summary="Update product",
            dependencies=[Depends(get_current_claims)])
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update an existing product
    
    All fields are optional. Only provided fields will be updated.
    Orders already placed keep the price they were placed at.
    """
    try:
        return service.update_product(product_id, product_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete product",
               dependencies=[Depends(get_current_claims)])
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """
    Delete a product
    
    - **product_id**: Product ID
    """
    try:
        service.delete_product(product_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return None
