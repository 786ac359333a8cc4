# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request

from shopfront.domain.catalog.exceptions import BrandNotFoundError
from shopfront.domain.catalog.repositories import CatalogRepository
from shopfront.interfaces.http.dto.catalog import brands_payload, products_payload
from shopfront.shared.logging import logger


class CatalogController:
    def __init__(self, *, catalog: CatalogRepository) -> None:
        self._catalog = catalog

    def list_brands(self):
        query = request.args.get("query")
        brands = self._catalog.find_brands(query)
        logger.debug(f"catalog.brands: ok n={len(brands)}")
        return jsonify(brands_payload(brands))

    def list_brand_products(self, category_id: str):
        if self._catalog.get_brand(category_id) is None:
            raise BrandNotFoundError(fields="id")
        products = self._catalog.find_products_by_category(category_id)
        logger.debug(f"catalog.brand_products: ok brand={category_id} n={len(products)}")
        return jsonify(products_payload(products))

    def search_products(self):
        query = request.args.get("query")
        products = self._catalog.search_products(query)
        logger.debug(f"catalog.products: ok n={len(products)}")
        return jsonify(products_payload(products))

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("catalog", __name__)
        bp.add_url_rule("/brands", view_func=self.list_brands, methods=["GET"])
        bp.add_url_rule(
            "/brands/<category_id>/products",
            view_func=self.list_brand_products,
            methods=["GET"],
        )
        bp.add_url_rule("/products", view_func=self.search_products, methods=["GET"])
        return bp
