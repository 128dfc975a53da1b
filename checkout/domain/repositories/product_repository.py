"""Repository interface for products."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product persistence."""

    @abstractmethod
    async def create(self, product: Product) -> None:
        pass

    @abstractmethod
    async def update(self, product: Product) -> None:
        pass

    @abstractmethod
    async def find_one(self, product_id: str) -> Product:
        pass

    @abstractmethod
    async def find_all(self) -> List[Product]:
        pass
