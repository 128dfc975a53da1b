"""Integration tests for OrderApplicationService."""

from decimal import Decimal

import pytest
from pydantic import ValidationError as PydanticValidationError

from checkout.application import OrderApplicationService, OrderLineRequest, PlaceOrderRequest
from checkout.domain.exceptions import NotFoundError


@pytest.fixture
def service(test_session_factory) -> OrderApplicationService:
    return OrderApplicationService(session_factory=test_session_factory)


def _request(customer_id: str = "1") -> PlaceOrderRequest:
    return PlaceOrderRequest(
        customer_id=customer_id,
        lines=[
            OrderLineRequest(item_id="1", product_id="1", quantity=2),
            OrderLineRequest(item_id="2", product_id="2", quantity=3),
        ],
    )


@pytest.mark.asyncio
async def test_place_order_snapshots_products(service, customer, products, order_repository):
    dto = await service.place_order(_request())

    assert dto.customer_id == customer.id
    assert dto.total == Decimal("350")
    assert [(item.name, item.price) for item in dto.items] == [
        ("Product 1", Decimal("100")),
        ("Product 2", Decimal("50")),
    ]

    stored = await order_repository.find_one(dto.id)
    assert stored.total() == Decimal("350")
    assert [item.id for item in stored.items] == ["1", "2"]


@pytest.mark.asyncio
async def test_place_order_credits_reward_points(service, customer, products, customer_repository):
    await service.place_order(_request())

    reloaded = await customer_repository.find_one(customer.id)
    assert reloaded.reward_points == Decimal("175")


@pytest.mark.asyncio
async def test_later_price_change_does_not_reach_order(
    service, customer, products, product_repository
):
    dto = await service.place_order(_request())

    product = products["1"]
    product.change_price(Decimal("1"))
    await product_repository.update(product)

    reloaded = await service.get_order(dto.id)
    assert reloaded.items[0].price == Decimal("100")
    assert reloaded.total == Decimal("350")


@pytest.mark.asyncio
async def test_unknown_customer(service, products):
    with pytest.raises(NotFoundError):
        await service.place_order(_request(customer_id="missing"))


@pytest.mark.asyncio
async def test_unknown_product_writes_nothing(service, customer, order_repository):
    with pytest.raises(NotFoundError):
        await service.place_order(
            PlaceOrderRequest(
                customer_id=customer.id,
                lines=[OrderLineRequest(item_id="1", product_id="missing", quantity=1)],
            )
        )

    assert await order_repository.find_all() == []


@pytest.mark.asyncio
async def test_get_missing_order(service):
    with pytest.raises(NotFoundError):
        await service.get_order("missing")


@pytest.mark.asyncio
async def test_list_orders(service, customer, products):
    first = await service.place_order(_request())
    second = await service.place_order(
        PlaceOrderRequest(
            customer_id=customer.id,
            lines=[OrderLineRequest(item_id="3", product_id="2", quantity=1)],
        )
    )

    listing = await service.list_orders()

    assert listing.total == 2
    assert {order.id for order in listing.orders} == {first.id, second.id}


def test_request_validation():
    with pytest.raises(PydanticValidationError):
        PlaceOrderRequest(customer_id="1", lines=[])
    with pytest.raises(PydanticValidationError):
        OrderLineRequest(item_id="1", product_id="1", quantity=0)
