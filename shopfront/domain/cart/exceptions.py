# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shopfront.shared.errors.base import BadRequestError, ConflictError


class DuplicateProductError(ConflictError):
    def __init__(self, product_id: str) -> None:
        super().__init__("Product already in user's cart", fields="query")
        self.product_id = product_id


class InvalidQuantityError(BadRequestError):
    def __init__(self) -> None:
        super().__init__("Invalid quantity", fields="query")


class MissingProductIdError(BadRequestError):
    def __init__(self) -> None:
        super().__init__("Bad request - productId required", fields="query")
