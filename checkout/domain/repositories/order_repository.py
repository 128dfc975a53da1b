"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def create(self, order: Order) -> None:
        """Persist a new order aggregate with all of its items.

        Args:
            order: Order aggregate to persist

        Raises:
            ValidationError: If the aggregate is invalid
            DuplicateKeyError: If an order with the same id is stored
            StorageError: If the store rejects the write
        """
        pass

    @abstractmethod
    async def find_one(self, order_id: str) -> Order:
        """Reconstruct an order aggregate by id.

        Args:
            order_id: Order identifier

        Returns:
            Order with items in insertion order

        Raises:
            NotFoundError: If no order has this id
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """Reconstruct every stored order aggregate.

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Re-persist the full aggregate, replacing its stored items.

        Args:
            order: Order aggregate in its current state

        Raises:
            NotFoundError: If no order has this id
        """
        pass

    @abstractmethod
    async def remove(self, order_id: str) -> None:
        """Delete an order and every item it owns.

        Args:
            order_id: Order identifier
        """
        pass

    @abstractmethod
    async def exists(self, order_id: str) -> bool:
        """Check if order already exists (duplicate prevention).

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        pass
