# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify, request

from shopfront.application.services.auth_gate import AuthGate
from shopfront.application.services.cart_manager import CartManager
from shopfront.domain.users.entities import User
from shopfront.interfaces.http.auth import auth_required
from shopfront.interfaces.http.dto.cart import (
    CartEntryDTO,
    cart_payload,
    parse_product_id,
    parse_quantity,
)
from shopfront.interfaces.http.dto.catalog import ProductDTO


class CartController:
    def __init__(self, *, cart_manager: CartManager, auth_gate: AuthGate) -> None:
        self._cart = cart_manager
        self._auth_gate = auth_gate

    def get_cart(self, user: User):
        return jsonify(cart_payload(self._cart.get(user)))

    def add_item(self, user: User):
        product_id = parse_product_id(request.args.to_dict())
        entry = self._cart.add(user, product_id)
        return jsonify(ProductDTO.from_entity(entry.product).to_payload())

    def update_item(self, product_id: str, user: User):
        quantity = parse_quantity(request.args.to_dict())
        entry = self._cart.set_quantity(user, product_id, quantity)
        return jsonify(CartEntryDTO.from_entity(entry).to_payload())

    def remove_item(self, product_id: str, user: User):
        product = self._cart.remove(user, product_id)
        return jsonify(ProductDTO.from_entity(product).to_payload())

    def as_blueprint(self) -> Blueprint:
        authed = auth_required(self._auth_gate)
        bp = Blueprint("cart", __name__, url_prefix="/me")
        bp.add_url_rule("/cart", view_func=authed(self.get_cart), methods=["GET"])
        bp.add_url_rule("/cart", view_func=authed(self.add_item), methods=["POST"])
        bp.add_url_rule(
            "/cart/<product_id>", view_func=authed(self.update_item), methods=["PUT"]
        )
        bp.add_url_rule(
            "/cart/<product_id>", view_func=authed(self.remove_item), methods=["DELETE"]
        )
        return bp
