"""
Pydantic schemas for order request/response validation

Order payloads use camelCase on the wire (userId, productId).
"""
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List


class CamelModel(BaseModel):
    """Base schema exposing camelCase aliases"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderItemCreate(CamelModel):
    """One requested (product, quantity) line"""
    product_id: int = Field(..., gt=0, description="Product ID")
    quantity: int = Field(..., gt=0, description="Quantity to order")


class OrderCreate(CamelModel):
    """Schema for placing a new order"""
    user_id: int = Field(..., gt=0, description="Ordering user ID")
    products: List[OrderItemCreate] = Field(..., description="Requested lines (may be empty)")


class OrderResponse(CamelModel):
    """Schema for the created order header"""
    id: int
    user_id: int
    total: float
    
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class OrderItemResponse(CamelModel):
    """Schema for a persisted order line"""
    id: int
    product_id: int
    quantity: int
    price: float
    total: float
    
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)


class OrderDetailResponse(OrderResponse):
    """Schema for an order with its lines"""
    items: List[OrderItemResponse]
