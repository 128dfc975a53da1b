"""Domain service for placing orders."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, List
from uuid import uuid4

from ..entities.customer import Customer
from ..entities.order import Order, OrderItem
from ..exceptions import ValidationError


class OrderService:
    """Stateless rules that span an order and its customer."""

    # One reward point for every two currency units spent
    REWARD_RATE = Decimal("0.5")

    @staticmethod
    def place_order(customer: Customer, items: List[OrderItem]) -> Order:
        """
        Build a new order for a customer and credit reward points.

        Args:
            customer: Customer placing the order
            items: Line items (already snapshotted from products)

        Returns:
            New Order with a generated id

        Raises:
            ValidationError: If no items are given
        """
        if not items:
            raise ValidationError("Order must have at least one item", field_name="items")

        order = Order(id=str(uuid4()), customer_id=customer.id, items=items)
        points = (order.total() * OrderService.REWARD_RATE).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
        customer.add_reward_points(points)
        return order

    @staticmethod
    def total(orders: Iterable[Order]) -> Decimal:
        """Sum of the totals of several orders."""
        return sum((order.total() for order in orders), Decimal("0"))
