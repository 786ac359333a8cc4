# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from shopfront.application.services.auth_gate import AuthGate
from shopfront.application.services.cart_manager import CartManager
from shopfront.application.use_cases.users.login_user import LoginUserUseCase
from shopfront.infrastructure.auth.login_attempts import LoginThrottle
from shopfront.infrastructure.auth.token_registry import Clock, TokenRegistry
from shopfront.infrastructure.data_loader import load_catalog, load_users
from shopfront.infrastructure.repositories.memory import (
    InMemoryCatalogStore,
    InMemoryUserRegistry,
)
from shopfront.interfaces.http.controllers.auth_controller import AuthController
from shopfront.interfaces.http.controllers.cart_controller import CartController
from shopfront.interfaces.http.controllers.catalog_controller import CatalogController
from shopfront.interfaces.http.controllers.misc_controller import MiscController
from shopfront.shared.config import AppConfig


class Container:
    """Owns the process-wide stores and wires them into use cases and controllers.

    Catalog and user data come from ``config.data_dir`` unless prebuilt stores
    are passed in.
    """

    def __init__(
        self,
        config: AppConfig,
        *,
        catalog: InMemoryCatalogStore | None = None,
        users: InMemoryUserRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config
        self._catalog = catalog
        self._users = users
        self._clock = clock

    @cached_property
    def catalog_store(self) -> InMemoryCatalogStore:
        if self._catalog is not None:
            return self._catalog
        brands, products = load_catalog(self._config.data_dir)
        return InMemoryCatalogStore(brands, products)

    @cached_property
    def user_registry(self) -> InMemoryUserRegistry:
        if self._users is not None:
            return self._users
        return InMemoryUserRegistry(load_users(self._config.data_dir))

    @cached_property
    def login_throttle(self) -> LoginThrottle:
        return LoginThrottle(max_attempts=self._config.security.max_login_attempts)

    @cached_property
    def token_registry(self) -> TokenRegistry:
        return TokenRegistry(
            timedelta(seconds=self._config.security.token_validity_seconds),
            clock=self._clock,
        )

    @cached_property
    def auth_gate(self) -> AuthGate:
        return AuthGate(tokens=self.token_registry, users=self.user_registry)

    @cached_property
    def cart_manager(self) -> CartManager:
        return CartManager(catalog=self.catalog_store)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_registry,
            tokens=self.token_registry,
            attempts=self.login_throttle,
        )

    # Controllers

    @cached_property
    def catalog_controller(self) -> CatalogController:
        return CatalogController(catalog=self.catalog_store)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(login_use_case=self.login_user_use_case)

    @cached_property
    def cart_controller(self) -> CartController:
        return CartController(cart_manager=self.cart_manager, auth_gate=self.auth_gate)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(catalog=self.catalog_store, users=self.user_registry)
