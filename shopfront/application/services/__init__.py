# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_gate import AuthGate
from .cart_manager import CartManager

__all__ = ["AuthGate", "CartManager"]
