# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import AuthGate, CartManager
from .use_cases.users.login_user import LoginUserUseCase

__all__ = [
    "AuthGate",
    "CartManager",
    "LoginUserUseCase",
]
