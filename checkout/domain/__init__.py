"""Domain layer - pure domain models and interfaces."""

from .entities import Customer, Order, OrderItem, Product
from .exceptions import (
    CheckoutError,
    DuplicateKeyError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from .repositories import CustomerRepository, OrderRepository, ProductRepository
from .services import OrderService
from .value_objects import Address

__all__ = [
    "Address",
    "CheckoutError",
    "Customer",
    "CustomerRepository",
    "DuplicateKeyError",
    "NotFoundError",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderService",
    "Product",
    "ProductRepository",
    "StorageError",
    "ValidationError",
]
