# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from shopfront.infrastructure.repositories.memory import (
    InMemoryCatalogStore,
    InMemoryUserRegistry,
)


class MiscController:
    def __init__(
        self, *, catalog: InMemoryCatalogStore, users: InMemoryUserRegistry
    ) -> None:
        self._catalog = catalog
        self._users = users

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        return bp

    def health(self):
        return jsonify(
            {
                "ok": True,
                "brands": self._catalog.brand_count,
                "products": self._catalog.product_count,
                "users": len(self._users),
            }
        )
