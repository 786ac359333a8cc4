# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .cart.entities import CartEntry
from .catalog.entities import Brand, Product
from .users.entities import AccessToken, ByEmail, ByUsername, LoginIdentity, User

__all__ = [
    "AccessToken",
    "Brand",
    "ByEmail",
    "ByUsername",
    "CartEntry",
    "LoginIdentity",
    "Product",
    "User",
]
