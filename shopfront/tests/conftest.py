from __future__ import annotations

import contextlib
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient
from loguru import logger as loguru_logger

from shopfront.app import create_app
from shopfront.domain.catalog.entities import Brand, Product
from shopfront.domain.users.entities import User
from shopfront.infrastructure.container import Container
from shopfront.infrastructure.repositories.memory import (
    InMemoryCatalogStore,
    InMemoryUserRegistry,
)
from shopfront.shared.config import AppConfig


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture()
def brands() -> list[Brand]:
    return [
        Brand(id="1", name="Oakley"),
        Brand(id="2", name="Ray Ban"),
        Brand(id="3", name="Costa"),
    ]


@pytest.fixture()
def products() -> list[Product]:
    return [
        Product(
            id="1",
            category_id="1",
            name="Superglasses",
            description="The best glasses in the world",
            attributes={"price": 150, "imageUrls": ["https://example.com/1.jpg"]},
        ),
        Product(
            id="2",
            category_id="1",
            name="Black Sunglasses",
            description="Polarized lenses for bright days",
        ),
        Product(
            id="7",
            category_id="2",
            name="Aviator",
            description="Classic metal frames",
        ),
    ]


@pytest.fixture()
def users() -> list[User]:
    return [
        User(username="alice", email="alice@example.com", password="secret"),
        User(username="bob", email="bob@example.com", password="hunter2"),
    ]


@pytest.fixture()
def catalog(brands: list[Brand], products: list[Product]) -> InMemoryCatalogStore:
    return InMemoryCatalogStore(brands, products)


@pytest.fixture()
def user_registry(users: list[User]) -> InMemoryUserRegistry:
    return InMemoryUserRegistry(users)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def config(tmp_path) -> AppConfig:
    return AppConfig(DATA_DIR=tmp_path)


@pytest.fixture()
def container(
    config: AppConfig,
    catalog: InMemoryCatalogStore,
    user_registry: InMemoryUserRegistry,
    clock: FakeClock,
) -> Container:
    return Container(config, catalog=catalog, users=user_registry, clock=clock)


@pytest.fixture()
def app(config: AppConfig, container: Container) -> Flask:
    return create_app(config, container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()


@pytest.fixture()
def log_messages() -> Iterator[list[str]]:
    messages: list[str] = []
    handler_id = loguru_logger.add(messages.append, format="{message}", level="DEBUG")
    yield messages
    # setup_logging() drops every sink, this one included.
    with contextlib.suppress(ValueError):
        loguru_logger.remove(handler_id)
