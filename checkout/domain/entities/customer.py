"""Customer entity."""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..exceptions import ValidationError
from ..value_objects import Address


@dataclass
class Customer:
    """
    Customer referenced by orders.

    Orders only keep the customer id; the customer is persisted by its own
    repository.
    """
    id: str
    name: str
    address: Optional[Address] = None
    active: bool = False
    reward_points: Decimal = Decimal("0")

    def __post_init__(self):
        if not isinstance(self.reward_points, Decimal):
            self.reward_points = Decimal(str(self.reward_points))
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Id is required", field_name="id")
        if not self.name:
            raise ValidationError("Name is required", field_name="name")
        if self.active and self.address is None:
            raise ValidationError(
                "Address is mandatory to activate a customer", field_name="address"
            )

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Name is required", field_name="name")
        self.name = name

    def change_address(self, address: Address) -> None:
        self.address = address

    def activate(self) -> None:
        """Business rule: a customer needs an address before activation."""
        if self.address is None:
            raise ValidationError(
                "Address is mandatory to activate a customer", field_name="address"
            )
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def is_active(self) -> bool:
        return self.active

    def add_reward_points(self, points) -> None:
        points = Decimal(str(points))
        if points < 0:
            raise ValidationError(
                f"Reward points must be positive, got: {points}",
                field_name="reward_points",
            )
        self.reward_points += points
