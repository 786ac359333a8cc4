# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import replace
from threading import Lock

from shopfront.domain.cart.entities import CartEntry
from shopfront.domain.cart.exceptions import DuplicateProductError, InvalidQuantityError
from shopfront.domain.catalog.entities import Product
from shopfront.domain.catalog.exceptions import ProductNotFoundError
from shopfront.domain.catalog.repositories import CatalogRepository
from shopfront.domain.users.entities import User
from shopfront.shared.logging import logger


class CartManager:
    """Add, update and remove operations on a user's cart.

    A cart holds at most one entry per product id and every entry has a
    quantity of at least one. Returned entries are copies, so callers never
    mutate a cart directly.
    """

    def __init__(self, *, catalog: CatalogRepository) -> None:
        self._catalog = catalog
        self._lock = Lock()

    def get(self, user: User) -> list[CartEntry]:
        with self._lock:
            return [replace(entry) for entry in user.cart]

    def add(self, user: User, product_id: str) -> CartEntry:
        product = self._catalog.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(fields="query")

        with self._lock:
            if self._find(user, product_id) is not None:
                logger.info(f"cart.add: duplicate user={user.username} product={product_id}")
                raise DuplicateProductError(product_id)
            entry = CartEntry(product=product, quantity=1)
            user.cart.append(entry)

        logger.info(f"cart.add: ok user={user.username} product={product_id} size={len(user.cart)}")
        return replace(entry)

    def set_quantity(self, user: User, product_id: str, quantity: int | None) -> CartEntry:
        if quantity is None or quantity < 1:
            raise InvalidQuantityError()

        with self._lock:
            entry = self._find(user, product_id)
            if entry is None:
                raise ProductNotFoundError(fields="path")
            entry.quantity = quantity

        logger.info(
            f"cart.update: ok user={user.username} product={product_id} quantity={quantity}"
        )
        return replace(entry)

    def remove(self, user: User, product_id: str) -> Product:
        with self._lock:
            entry = self._find(user, product_id)
            if entry is None:
                raise ProductNotFoundError(fields="path")
            user.cart.remove(entry)

        logger.info(f"cart.remove: ok user={user.username} product={product_id}")
        return entry.product

    @staticmethod
    def _find(user: User, product_id: str) -> CartEntry | None:
        for entry in user.cart:
            if entry.product.id == product_id:
                return entry
        return None
