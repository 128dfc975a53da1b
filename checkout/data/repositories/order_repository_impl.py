"""SQLAlchemy implementation of OrderRepository."""

import logging
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from checkout.domain.entities import Order
from checkout.domain.exceptions import DuplicateKeyError, NotFoundError
from checkout.domain.repositories import OrderRepository
from checkout.infrastructure.database.config import get_repository_settings

from ..mappers import OrderMapper
from ..models import OrderItemModel, OrderModel
from ..uow import create_uow


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Every operation runs in its own unit of work, so the order row and its
    item rows are always written or discarded together.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        strict_remove: Optional[bool] = None,
    ) -> None:
        """Initialize repository.

        Args:
            session_factory: SQLAlchemy async session factory
            strict_remove: Raise NotFoundError when removing a missing order.
                Defaults to RepositorySettings.strict_remove.
        """
        self._session_factory = session_factory
        if strict_remove is None:
            strict_remove = get_repository_settings().strict_remove
        self._strict_remove = strict_remove

    async def create(self, order: Order) -> None:
        """Insert the order row and one row per item.

        Args:
            order: Order domain aggregate
        """
        order.validate()
        logger.info(f"Creating order: {order.id}")

        async with create_uow(self._session_factory) as uow:
            session = uow.session

            # Parent row first so item foreign keys resolve. The primary key
            # decides duplicates, so concurrent creates of one id agree.
            session.add(OrderMapper.to_persistence(order))
            try:
                await session.flush()
            except IntegrityError as e:
                await session.rollback()
                if await session.get(OrderModel, order.id) is not None:
                    raise DuplicateKeyError("Order", order.id) from e
                raise

            session.add_all(OrderMapper.items_to_persistence(order))
            await session.flush()

        logger.info(f"✅ Created order: {order.id} ({len(order.items)} items)")

    async def find_one(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order aggregate
        """
        async with create_uow(self._session_factory) as uow:
            orders = await self._load(uow.session, order_id)

        if not orders:
            logger.info(f"Order not found: {order_id}")
            raise NotFoundError("Order", order_id)

        return orders[0]

    async def find_all(self) -> List[Order]:
        """List every order aggregate, ordered by order id.

        Returns:
            List of Order aggregates
        """
        async with create_uow(self._session_factory) as uow:
            orders = await self._load(uow.session)

        logger.info(f"Found {len(orders)} orders")
        return orders

    async def update(self, order: Order) -> None:
        """Rewrite the order row and replace all of its item rows.

        Args:
            order: Order domain aggregate
        """
        order.validate()
        logger.info(f"Updating order: {order.id}")

        async with create_uow(self._session_factory) as uow:
            session = uow.session

            model = await session.get(OrderModel, order.id)
            if model is None:
                raise NotFoundError("Order", order.id)

            OrderMapper.update_persistence(order, model)

            # Replace-all: the stored items become exactly the in-memory ones
            await session.execute(
                delete(OrderItemModel).where(OrderItemModel.order_id == order.id)
            )
            session.add_all(OrderMapper.items_to_persistence(order))
            await session.flush()

        logger.info(f"✅ Updated order: {order.id} ({len(order.items)} items)")

    async def remove(self, order_id: str) -> None:
        """Delete the order row and every item row it owns.

        Args:
            order_id: Order identifier
        """
        logger.info(f"Removing order: {order_id}")

        async with create_uow(self._session_factory) as uow:
            session = uow.session

            model = await session.get(OrderModel, order_id)
            if model is None:
                if self._strict_remove:
                    raise NotFoundError("Order", order_id)
                logger.warning(f"Order not found for removal: {order_id}")
                return

            await session.execute(
                delete(OrderItemModel).where(OrderItemModel.order_id == order_id)
            )
            await session.delete(model)
            await session.flush()

        logger.info(f"✅ Removed order: {order_id}")

    async def exists(self, order_id: str) -> bool:
        """Check if order already exists (duplicate prevention).

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(
                select(OrderModel.id).where(OrderModel.id == order_id)
            )
            return result.scalar_one_or_none() is not None

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _load(self, session: AsyncSession, order_id: Optional[str] = None) -> List[Order]:
        """Join orders to their items and rebuild one aggregate per order row."""
        stmt = (
            select(OrderModel, OrderItemModel)
            .outerjoin(OrderItemModel, OrderItemModel.order_id == OrderModel.id)
            .order_by(OrderModel.id, OrderItemModel.position)
        )
        if order_id is not None:
            stmt = stmt.where(OrderModel.id == order_id)

        result = await session.execute(stmt)

        grouped: Dict[str, Tuple[OrderModel, List[OrderItemModel]]] = {}
        for order_model, item_model in result.all():
            _, item_models = grouped.setdefault(order_model.id, (order_model, []))
            if item_model is not None:
                item_models.append(item_model)

        return [
            self._to_domain_entity(order_model, item_models)
            for order_model, item_models in grouped.values()
        ]

    def _to_domain_entity(self, model: OrderModel, item_models: List[OrderItemModel]) -> Order:
        """Convert rows to the aggregate; the stored total is informational only."""
        order = OrderMapper.to_domain(model, item_models)

        stored_total = Decimal(str(model.total))
        if stored_total != order.total():
            logger.warning(
                f"Stored total {stored_total} of order {order.id} differs from "
                f"item total {order.total()}"
            )

        return order
