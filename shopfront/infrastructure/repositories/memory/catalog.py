# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterable

from shopfront.domain.catalog.entities import Brand, Product
from shopfront.domain.catalog.exceptions import BrandNotFoundError, ProductNotFoundError
from shopfront.domain.catalog.repositories import CatalogRepository


class InMemoryCatalogStore(CatalogRepository):
    """Brands and products as loaded at startup; read-only afterwards."""

    def __init__(self, brands: Iterable[Brand], products: Iterable[Product]) -> None:
        self._brands: tuple[Brand, ...] = tuple(brands)
        self._products: tuple[Product, ...] = tuple(products)
        self._brands_by_id = {brand.id: brand for brand in self._brands}
        self._products_by_id = {product.id: product for product in self._products}

    @property
    def brand_count(self) -> int:
        return len(self._brands)

    @property
    def product_count(self) -> int:
        return len(self._products)

    def find_brands(self, query: str | None = None) -> list[Brand]:
        """Return brands whose name equals ``query`` ignoring case.

        An empty or missing query returns every brand; a query with no match
        raises :class:`BrandNotFoundError`.
        """

        if not query:
            return list(self._brands)
        matched = [brand for brand in self._brands if brand.matches_name(query)]
        if not matched:
            raise BrandNotFoundError(fields="query")
        return matched

    def get_brand(self, brand_id: str) -> Brand | None:
        return self._brands_by_id.get(brand_id)

    def find_products_by_category(self, category_id: str) -> list[Product]:
        return [p for p in self._products if p.category_id == category_id]

    def search_products(self, query: str | None = None) -> list[Product]:
        if not query:
            return list(self._products)
        matched = [product for product in self._products if product.matches_text(query)]
        if not matched:
            raise ProductNotFoundError(fields="query")
        return matched

    def get_product(self, product_id: str) -> Product | None:
        return self._products_by_id.get(product_id)
