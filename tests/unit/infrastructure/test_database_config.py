"""Tests for database settings and lifecycle helpers."""

import pytest
from sqlalchemy import text

from checkout.data.repositories import SqlAlchemyOrderRepository
from checkout.infrastructure.database import (
    DatabaseSettings,
    RepositorySettings,
    close_database,
    create_engine,
    get_repository_settings,
    get_session_factory,
    init_database,
)


@pytest.fixture
def clean_settings_cache():
    get_repository_settings.cache_clear()
    yield
    get_repository_settings.cache_clear()


def test_database_settings_read_prefixed_env(monkeypatch):
    monkeypatch.setenv("DB_DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    monkeypatch.setenv("DB_ECHO_SQL", "true")

    settings = DatabaseSettings()

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.echo_sql is True
    assert settings.pool_size == 10


def test_repository_settings_default_to_lenient_remove(monkeypatch):
    monkeypatch.delenv("CHECKOUT_STRICT_REMOVE", raising=False)

    assert RepositorySettings().strict_remove is False


def test_repository_uses_configured_strictness(monkeypatch, clean_settings_cache):
    monkeypatch.setenv("CHECKOUT_STRICT_REMOVE", "1")

    repository = SqlAlchemyOrderRepository(session_factory=None)

    assert repository._strict_remove is True


def test_explicit_strictness_overrides_settings(monkeypatch, clean_settings_cache):
    monkeypatch.setenv("CHECKOUT_STRICT_REMOVE", "1")

    repository = SqlAlchemyOrderRepository(session_factory=None, strict_remove=False)

    assert repository._strict_remove is False


@pytest.mark.asyncio
async def test_sqlite_engine_enforces_foreign_keys():
    engine = create_engine(DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:"))
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("PRAGMA foreign_keys"))
            assert result.scalar_one() == 1
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_lifecycle_init_and_close(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'checkout.db'}"

    await init_database(DatabaseSettings(database_url=url))
    try:
        factory = get_session_factory()
        async with factory() as session:
            result = await session.execute(
                text("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name")
            )
            tables = [row[0] for row in result.all()]
        assert tables == ["customers", "order_items", "orders", "products"]
    finally:
        await close_database()

    with pytest.raises(RuntimeError):
        get_session_factory()
