"""Application service for Order operations."""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from checkout.application.dtos import OrderDTO, OrderItemDTO, OrderListDTO, PlaceOrderRequest
from checkout.data.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from checkout.domain.entities import Order, OrderItem
from checkout.domain.repositories import (
    CustomerRepository,
    OrderRepository,
    ProductRepository,
)
from checkout.domain.services import OrderService


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Look up the customer and products an order refers to
    - Snapshot product name and price into order items
    - Persist the order, then the customer's reward points
    - Transform between DTOs and domain entities

    The order and the customer are written in separate transactions.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        orders: Optional[OrderRepository] = None,
        customers: Optional[CustomerRepository] = None,
        products: Optional[ProductRepository] = None,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            orders: Order repository override
            customers: Customer repository override
            products: Product repository override
        """
        self._orders = orders or SqlAlchemyOrderRepository(session_factory)
        self._customers = customers or SqlAlchemyCustomerRepository(session_factory)
        self._products = products or SqlAlchemyProductRepository(session_factory)

    async def place_order(self, request: PlaceOrderRequest) -> OrderDTO:
        """Place a new order for an existing customer.

        Args:
            request: PlaceOrderRequest DTO

        Returns:
            OrderDTO with the persisted order

        Raises:
            NotFoundError: If the customer or a product does not exist
        """
        customer = await self._customers.find_one(request.customer_id)

        items = []
        for line in request.lines:
            product = await self._products.find_one(line.product_id)
            items.append(
                OrderItem(
                    id=line.item_id,
                    name=product.name,
                    price=product.price,
                    product_id=product.id,
                    quantity=line.quantity,
                )
            )

        order = OrderService.place_order(customer, items)

        await self._orders.create(order)
        await self._customers.update(customer)

        logger.info(
            f"✅ Placed order {order.id} for customer {customer.id} "
            f"(total: {order.total()}, reward points: {customer.reward_points})"
        )
        return self._order_to_dto(order)

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID.

        Args:
            order_id: Order ID string

        Returns:
            OrderDTO

        Raises:
            NotFoundError: If the order does not exist
        """
        order = await self._orders.find_one(order_id)
        return self._order_to_dto(order)

    async def list_orders(self) -> OrderListDTO:
        """List every stored order.

        Returns:
            OrderListDTO
        """
        orders = await self._orders.find_all()
        return OrderListDTO(
            orders=[self._order_to_dto(order) for order in orders],
            total=len(orders),
        )

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        items = [
            OrderItemDTO(
                id=item.id,
                product_id=item.product_id,
                name=item.name,
                price=item.price,
                quantity=item.quantity,
            )
            for item in order.items
        ]

        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            items=items,
            total=order.total(),
        )
