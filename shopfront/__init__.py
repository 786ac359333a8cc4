# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""In-memory storefront API: catalog, bearer-token login and per-user carts."""

__version__ = "0.1.0"
