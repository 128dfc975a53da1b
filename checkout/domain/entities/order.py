"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import List

from ..exceptions import ValidationError


# Column limits: NUMERIC(15, 2) for money, INTEGER for quantity
MAX_AMOUNT = Decimal("1e13")
MAX_QUANTITY = 2 ** 31 - 1


def _require_str(value, message: str, field_name: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(message, field_name=field_name)


@dataclass(frozen=True)
class OrderItem:
    """
    Line item owned by exactly one Order.

    name and price are a snapshot of the product at the time the item
    was built; later product changes do not reach existing orders.
    """
    id: str
    name: str
    price: Decimal
    product_id: str
    quantity: int

    def __post_init__(self):
        _require_str(self.id, "Id is required", "id")
        _require_str(self.product_id, "ProductId is required", "product_id")

        # Convert to Decimal if needed
        if not isinstance(self.price, Decimal):
            try:
                object.__setattr__(self, "price", Decimal(str(self.price)))
            except InvalidOperation as exc:
                raise ValidationError(
                    f"Price must be numeric, got: {self.price!r}", field_name="price"
                ) from exc

        if not self.price.is_finite() or self.price < 0:
            raise ValidationError(
                f"Price must be greater or equal to 0, got: {self.price}",
                field_name="price",
            )
        # Stored as NUMERIC(15, 2)
        if self.price.as_tuple().exponent < -2:
            raise ValidationError(
                f"Price must have at most 2 decimal places, got: {self.price}",
                field_name="price",
            )
        if self.price >= MAX_AMOUNT:
            raise ValidationError(
                f"Price must be less than {MAX_AMOUNT:f}, got: {self.price}",
                field_name="price",
            )

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got: {self.quantity!r}",
                field_name="quantity",
            )
        if self.quantity <= 0:
            raise ValidationError("Quantity must be greater than 0", field_name="quantity")
        if self.quantity > MAX_QUANTITY:
            raise ValidationError(
                f"Quantity must be at most {MAX_QUANTITY}, got: {self.quantity}",
                field_name="quantity",
            )

    def total(self) -> Decimal:
        """Price times quantity."""
        return self.price * self.quantity


@dataclass
class Order:
    """
    Order aggregate root.

    Owns its items in insertion order. The total is never stored on the
    object; total() derives it from the current items on every call.
    """
    id: str
    customer_id: str
    items: List[OrderItem] = field(default_factory=list)

    def __post_init__(self):
        # Copy so the caller's list is not shared with the aggregate
        self.items = list(self.items)
        self.validate()

    def validate(self) -> None:
        """
        Check every aggregate invariant.

        Raises:
            ValidationError: If id or customer_id is missing, an item is not
                an OrderItem, two items share an id, or the total does not
                fit the stored NUMERIC(15, 2) column
        """
        _require_str(self.id, "Id is required", "id")
        _require_str(self.customer_id, "CustomerId is required", "customer_id")

        seen = set()
        for item in self.items:
            if not isinstance(item, OrderItem):
                raise ValidationError(
                    f"Order items must be OrderItem instances, got: {type(item).__name__}",
                    field_name="items",
                )
            if item.id in seen:
                raise ValidationError(
                    f"Duplicate item id in order {self.id}: {item.id}",
                    field_name="items",
                )
            seen.add(item.id)

        self._check_total(self.items)

    def add_item(self, item: OrderItem) -> None:
        """Append an item, rejecting ids already present in the order."""
        if not isinstance(item, OrderItem):
            raise ValidationError(
                f"Order items must be OrderItem instances, got: {type(item).__name__}",
                field_name="items",
            )
        if any(existing.id == item.id for existing in self.items):
            raise ValidationError(
                f"Duplicate item id in order {self.id}: {item.id}",
                field_name="items",
            )
        self._check_total(self.items + [item])
        self.items.append(item)

    def total(self) -> Decimal:
        """Sum of price * quantity over the current items."""
        return sum((item.total() for item in self.items), Decimal("0"))

    def _check_total(self, items: List[OrderItem]) -> None:
        total = sum((item.total() for item in items), Decimal("0"))
        if total >= MAX_AMOUNT:
            raise ValidationError(
                f"Order total must be less than {MAX_AMOUNT:f}, got: {total}",
                field_name="items",
            )
