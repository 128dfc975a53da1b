"""Product entity."""
from dataclasses import dataclass
from decimal import Decimal

from ..exceptions import ValidationError


@dataclass
class Product:
    """Catalog product; orders copy its name and price into their items."""
    id: str
    name: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))
        self.validate()

    def validate(self) -> None:
        if not self.id:
            raise ValidationError("Id is required", field_name="id")
        if not self.name:
            raise ValidationError("Name is required", field_name="name")
        if self.price < 0:
            raise ValidationError(
                "Price must be greater or equal to 0", field_name="price"
            )

    def change_name(self, name: str) -> None:
        if not name:
            raise ValidationError("Name is required", field_name="name")
        self.name = name

    def change_price(self, price) -> None:
        price = Decimal(str(price))
        if price < 0:
            raise ValidationError(
                "Price must be greater or equal to 0", field_name="price"
            )
        self.price = price
