"""Application DTOs."""

from .order_dto import (
    OrderDTO,
    OrderItemDTO,
    OrderLineRequest,
    OrderListDTO,
    PlaceOrderRequest,
)

__all__ = [
    "OrderDTO",
    "OrderItemDTO",
    "OrderLineRequest",
    "OrderListDTO",
    "PlaceOrderRequest",
]
