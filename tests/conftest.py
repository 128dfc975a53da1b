"""Pytest configuration and shared database fixtures."""

from decimal import Decimal

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from checkout.data.models import Base
from checkout.data.repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyProductRepository,
)
from checkout.domain.entities import Customer, Product
from checkout.domain.value_objects import Address
from checkout.infrastructure.database import (
    create_session_factory,
    create_tables,
    enable_sqlite_foreign_keys,
)


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    # Create all tables
    await create_tables(engine)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    """Create test session factory."""
    return create_session_factory(test_engine)


@pytest.fixture
def order_repository(test_session_factory) -> SqlAlchemyOrderRepository:
    return SqlAlchemyOrderRepository(test_session_factory, strict_remove=False)


@pytest.fixture
def customer_repository(test_session_factory) -> SqlAlchemyCustomerRepository:
    return SqlAlchemyCustomerRepository(test_session_factory)


@pytest.fixture
def product_repository(test_session_factory) -> SqlAlchemyProductRepository:
    return SqlAlchemyProductRepository(test_session_factory)


@pytest_asyncio.fixture
async def customer(customer_repository) -> Customer:
    """Persisted customer '1' with an address."""
    customer = Customer(id="1", name="Customer 1")
    customer.change_address(Address("Street 1", 300, "Zipcode 1", "City 1"))
    await customer_repository.create(customer)
    return customer


@pytest_asyncio.fixture
async def products(product_repository) -> dict:
    """Persisted products '1' (100) and '2' (50), keyed by id."""
    created = {
        "1": Product(id="1", name="Product 1", price=Decimal("100")),
        "2": Product(id="2", name="Product 2", price=Decimal("50")),
    }
    for product in created.values():
        await product_repository.create(product)
    return created
