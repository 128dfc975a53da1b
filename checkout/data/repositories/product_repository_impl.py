"""SQLAlchemy implementation of ProductRepository."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from checkout.domain.entities import Product
from checkout.domain.exceptions import DuplicateKeyError, NotFoundError
from checkout.domain.repositories import ProductRepository

from ..mappers import ProductMapper
from ..models import ProductModel
from ..uow import create_uow


logger = logging.getLogger(__name__)


class SqlAlchemyProductRepository(ProductRepository):
    """Concrete implementation of ProductRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def create(self, product: Product) -> None:
        product.validate()

        async with create_uow(self._session_factory) as uow:
            session = uow.session
            if await session.get(ProductModel, product.id) is not None:
                raise DuplicateKeyError("Product", product.id)
            session.add(ProductMapper.to_persistence(product))
            await session.flush()

        logger.info(f"✅ Created product: {product.id}")

    async def update(self, product: Product) -> None:
        product.validate()

        async with create_uow(self._session_factory) as uow:
            session = uow.session
            model = await session.get(ProductModel, product.id)
            if model is None:
                raise NotFoundError("Product", product.id)
            ProductMapper.update_persistence(product, model)
            await session.flush()

        logger.info(f"✅ Updated product: {product.id}")

    async def find_one(self, product_id: str) -> Product:
        async with create_uow(self._session_factory) as uow:
            model = await uow.session.get(ProductModel, product_id)
            if model is None:
                raise NotFoundError("Product", product_id)
            return ProductMapper.to_domain(model)

    async def find_all(self) -> List[Product]:
        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(
                select(ProductModel).order_by(ProductModel.id)
            )
            return [ProductMapper.to_domain(model) for model in result.scalars().all()]
