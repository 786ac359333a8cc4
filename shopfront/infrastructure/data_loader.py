# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Startup loading of the brands, products and users JSON files."""

from __future__ import annotations

from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from shopfront.domain.cart.entities import CartEntry
from shopfront.domain.catalog.entities import Brand, Product
from shopfront.domain.users.entities import User
from shopfront.shared.errors.base import InfrastructureError
from shopfront.shared.logging import logger

BRANDS_FILE = "brands.json"
PRODUCTS_FILE = "products.json"
USERS_FILE = "users.json"

_RecordT = TypeVar("_RecordT", bound=BaseModel)


class DataLoadError(InfrastructureError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load {path}: {reason}")
        self.path = path


class BrandRecord(BaseModel):
    id: str
    name: str

    model_config = ConfigDict(coerce_numbers_to_str=True)

    def to_entity(self) -> Brand:
        return Brand(id=self.id, name=self.name)


class ProductRecord(BaseModel):
    id: str
    category_id: str = Field(alias="categoryId")
    name: str
    description: str = ""

    model_config = ConfigDict(
        coerce_numbers_to_str=True, extra="allow", validate_by_name=True
    )

    def to_entity(self) -> Product:
        return Product(
            id=self.id,
            category_id=self.category_id,
            name=self.name,
            description=self.description,
            attributes=dict(self.model_extra or {}),
        )


class LoginRecord(BaseModel):
    username: str
    password: str


class CartEntryRecord(BaseModel):
    product: ProductRecord
    quantity: int = Field(1, ge=1)


class UserRecord(BaseModel):
    email: str
    login: LoginRecord
    cart: list[CartEntryRecord] = Field(default_factory=list)

    @field_validator("cart")
    @classmethod
    def _unique_products(cls, value: list[CartEntryRecord]) -> list[CartEntryRecord]:
        seen: set[str] = set()
        for entry in value:
            if entry.product.id in seen:
                raise ValueError(f"product {entry.product.id} appears twice in cart")
            seen.add(entry.product.id)
        return value

    def to_entity(self) -> User:
        return User(
            username=self.login.username,
            email=self.email,
            password=self.login.password,
            cart=[
                CartEntry(product=entry.product.to_entity(), quantity=entry.quantity)
                for entry in self.cart
            ],
        )


def _read_records(path: Path, record_type: type[_RecordT]) -> list[_RecordT]:
    adapter = TypeAdapter(list[record_type])  # type: ignore[valid-type]
    try:
        return adapter.validate_json(path.read_bytes())
    except FileNotFoundError as exc:
        raise DataLoadError(path, "file not found") from exc
    except PydanticValidationError as exc:
        raise DataLoadError(path, f"{exc.error_count()} invalid record(s)") from exc


def load_catalog(data_dir: Path) -> tuple[list[Brand], list[Product]]:
    brands = [r.to_entity() for r in _read_records(data_dir / BRANDS_FILE, BrandRecord)]
    logger.info(f"data.load: {len(brands)} brands loaded")
    products = [
        r.to_entity() for r in _read_records(data_dir / PRODUCTS_FILE, ProductRecord)
    ]
    logger.info(f"data.load: {len(products)} products loaded")
    return brands, products


def load_users(data_dir: Path) -> list[User]:
    users = [r.to_entity() for r in _read_records(data_dir / USERS_FILE, UserRecord)]
    logger.info(f"data.load: {len(users)} users loaded")
    return users


__all__ = [
    "DataLoadError",
    "load_catalog",
    "load_users",
]
