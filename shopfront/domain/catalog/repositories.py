# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import Brand, Product


class CatalogRepository(Protocol):
    def find_brands(self, query: str | None = None) -> list[Brand]: ...
    def get_brand(self, brand_id: str) -> Brand | None: ...
    def find_products_by_category(self, category_id: str) -> list[Product]: ...
    def search_products(self, query: str | None = None) -> list[Product]: ...
    def get_product(self, product_id: str) -> Product | None: ...
