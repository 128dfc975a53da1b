"""Application DTOs for Order operations."""

from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field


class OrderLineRequest(BaseModel):
    """One requested line: which product and how many."""

    item_id: str = Field(..., min_length=1, description="Line item id")
    product_id: str = Field(..., min_length=1, description="Product id")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class PlaceOrderRequest(BaseModel):
    """Request DTO for placing an order."""

    customer_id: str = Field(..., min_length=1, description="Customer id")
    lines: List[OrderLineRequest] = Field(..., min_length=1, description="Requested lines")

    model_config = {"frozen": True}


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    id: str = Field(..., description="Line item id")
    product_id: str = Field(..., description="Product id")
    name: str = Field(..., description="Product name at order time")
    price: Decimal = Field(..., ge=0, description="Unit price at order time")
    quantity: int = Field(..., gt=0, description="Quantity ordered")

    model_config = {"frozen": True}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order id")
    customer_id: str = Field(..., description="Customer id")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    total: Decimal = Field(..., ge=0, description="Sum of price * quantity")

    model_config = {"frozen": True}


class OrderListDTO(BaseModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list, description="List of orders")
    total: int = Field(..., ge=0, description="Total count")

    model_config = {"frozen": True}
