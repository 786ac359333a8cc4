# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from shopfront.shared.errors.base import NotFoundError


class BrandNotFoundError(NotFoundError):
    def __init__(self, *, fields: str = "query") -> None:
        super().__init__("Brand not found", fields=fields)


class ProductNotFoundError(NotFoundError):
    def __init__(self, *, fields: str = "query") -> None:
        super().__init__("Product not found", fields=fields)
