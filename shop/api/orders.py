"""
Order API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List

from shop.api.deps import get_current_claims
from shop.database import get_db
from shop.exceptions import NotFoundError
from shop.services.order_service import OrderService
from shop.schemas.order import OrderCreate, OrderResponse, OrderDetailResponse

router = APIRouter(prefix="/orders", tags=["orders"], dependencies=[Depends(get_current_claims)])


def get_order_service(db: Session = Depends(get_db)) -> OrderService:
    """Dependency to get OrderService instance"""
    return OrderService(db)


@router.get("", response_model=List[OrderDetailResponse], summary="Get all orders")
def get_orders(service: OrderService = Depends(get_order_service)):
    """Retrieve all orders with their items"""
    return service.get_all_orders()


@router.get("/{order_id}", response_model=OrderDetailResponse, summary="Get order by ID")
def get_order(
    order_id: int,
    service: OrderService = Depends(get_order_service)
):
    """
    Retrieve a specific order with its items
    
    - **order_id**: Order ID
    """
    try:
        return service.get_order_by_id(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED, summary="Create order")
def create_order(
    order_data: OrderCreate,
    service: OrderService = Depends(get_order_service)
):
    """
    Create a new order
    
    Process:
    1. Look up current prices for the requested products
    2. Drop lines whose product does not exist
    3. Calculate line totals and the order total
    4. Save order and items in one transaction
    
    - **userId**: Ordering user ID (required)
    - **products**: List of {productId, quantity}
    """
    try:
        return service.create_order(order_data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
