# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_attempts import LoginThrottle
from .token_registry import Clock, TokenRegistry, utcnow

__all__ = ["Clock", "LoginThrottle", "TokenRegistry", "utcnow"]
