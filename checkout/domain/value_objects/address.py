"""Address value object."""
from dataclasses import dataclass

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """Immutable postal address of a customer."""
    street: str
    number: int
    zipcode: str
    city: str

    def __post_init__(self):
        if not self.street:
            raise ValidationError("Street is required", field_name="street")
        if isinstance(self.number, bool) or not isinstance(self.number, int) or self.number <= 0:
            raise ValidationError(
                f"Number must be a positive integer, got: {self.number!r}",
                field_name="number",
            )
        if not self.zipcode:
            raise ValidationError("Zip is required", field_name="zipcode")
        if not self.city:
            raise ValidationError("City is required", field_name="city")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zipcode} {self.city}"
