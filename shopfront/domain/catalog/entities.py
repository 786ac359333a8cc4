# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True, frozen=True)
class Brand:

    id: str
    name: str

    def matches_name(self, query: str) -> bool:
        return self.name.casefold() == query.casefold()


@dataclass(slots=True, frozen=True)
class Product:
    """Catalog item; ``category_id`` references the owning brand's id."""

    id: str
    category_id: str
    name: str
    description: str
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def matches_text(self, query: str) -> bool:
        needle = query.casefold()
        return needle in self.name.casefold() or needle in self.description.casefold()
