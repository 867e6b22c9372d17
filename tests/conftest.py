"""
Shared fixtures for the product service tests.

Persistence runs against in-memory SQLite through the real adapter;
use cases run against an in-memory fake of the repository port.
"""

import itertools
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from product_service.core.config import Settings
from product_service.domain.catalog.entities import Product
from product_service.domain.catalog.errors import ProductNotFoundError
from product_service.domain.catalog.ports import ProductRepository
from product_service.infrastructure.catalog.product_repository import (
    ProductRepositoryAdapter,
)
from product_service.infrastructure.catalog.schema import apply_schema
from product_service.main import create_app


def make_settings(**overrides) -> Settings:
    """Return settings isolated from any local .env file."""
    values = {"app_env": "test", "rate_limit_enabled": False, "log_level": "warning"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class FakeProductRepository(ProductRepository):
    """In-memory implementation of the ProductRepository port."""

    def __init__(self) -> None:
        self.rows: dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def _now(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def create(self, product: Product) -> Product:
        now = self._now()
        stored = replace(product, id=next(self._ids), created_at=now, updated_at=now)
        self.rows[stored.id] = stored
        return stored

    def get_by_id(self, product_id: int) -> Product:
        if product_id not in self.rows:
            raise ProductNotFoundError(product_id)
        return self.rows[product_id]

    def get_all(self, limit: int, offset: int) -> list[Product]:
        ordered = sorted(
            self.rows.values(), key=lambda p: (p.created_at, p.id), reverse=True
        )
        return ordered[offset : offset + limit]

    def update(self, product_id: int, product: Product) -> Product:
        current = self.get_by_id(product_id)
        stored = replace(
            product,
            id=current.id,
            created_at=current.created_at,
            updated_at=self._now(),
        )
        self.rows[product_id] = stored
        return stored

    def delete(self, product_id: int) -> None:
        if self.rows.pop(product_id, None) is None:
            raise ProductNotFoundError(product_id)


@pytest.fixture
def fake_repo() -> FakeProductRepository:
    return FakeProductRepository()


@pytest.fixture
def engine() -> Iterator[Engine]:
    """A fresh in-memory SQLite database with the products schema."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    apply_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> ProductRepositoryAdapter:
    return ProductRepositoryAdapter(engine=engine)


@pytest.fixture
def client(engine: Engine) -> Iterator[TestClient]:
    """A client driving the full application stack on SQLite."""
    app = create_app(settings=make_settings(), engine=engine)
    with TestClient(app) as test_client:
        yield test_client
