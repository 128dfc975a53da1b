"""Application layer - services and DTOs."""

from .dtos import OrderDTO, OrderItemDTO, OrderLineRequest, OrderListDTO, PlaceOrderRequest
from .services import OrderApplicationService

__all__ = [
    # DTOs
    "OrderDTO",
    "OrderItemDTO",
    "OrderLineRequest",
    "OrderListDTO",
    "PlaceOrderRequest",
    # Services
    "OrderApplicationService",
]
