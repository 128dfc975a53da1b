"""SQLAlchemy implementation of CustomerRepository."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import async_sessionmaker

from checkout.domain.entities import Customer
from checkout.domain.exceptions import DuplicateKeyError, NotFoundError
from checkout.domain.repositories import CustomerRepository

from ..mappers import CustomerMapper
from ..models import CustomerModel
from ..uow import create_uow


logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def create(self, customer: Customer) -> None:
        customer.validate()

        async with create_uow(self._session_factory) as uow:
            session = uow.session
            if await session.get(CustomerModel, customer.id) is not None:
                raise DuplicateKeyError("Customer", customer.id)
            session.add(CustomerMapper.to_persistence(customer))
            await session.flush()

        logger.info(f"✅ Created customer: {customer.id}")

    async def update(self, customer: Customer) -> None:
        customer.validate()

        async with create_uow(self._session_factory) as uow:
            session = uow.session
            model = await session.get(CustomerModel, customer.id)
            if model is None:
                raise NotFoundError("Customer", customer.id)
            CustomerMapper.update_persistence(customer, model)
            await session.flush()

        logger.info(f"✅ Updated customer: {customer.id}")

    async def find_one(self, customer_id: str) -> Customer:
        async with create_uow(self._session_factory) as uow:
            model = await uow.session.get(CustomerModel, customer_id)
            if model is None:
                raise NotFoundError("Customer", customer_id)
            return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(
                select(CustomerModel).order_by(CustomerModel.id)
            )
            return [CustomerMapper.to_domain(model) for model in result.scalars().all()]
