from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from shopfront.domain.cart.entities import CartEntry
from shopfront.domain.cart.exceptions import InvalidQuantityError, MissingProductIdError
from shopfront.shared.errors.validation import raise_validation_error

from .catalog import ProductDTO


class AddToCartQueryDTO(BaseModel):
    product_id: str = Field(alias="productId", min_length=1)


class UpdateQuantityQueryDTO(BaseModel):
    quantity: int = Field(ge=1)


class CartEntryDTO(BaseModel):
    product: ProductDTO
    quantity: int

    @classmethod
    def from_entity(cls, entry: CartEntry) -> "CartEntryDTO":
        return cls(product=ProductDTO.from_entity(entry.product), quantity=entry.quantity)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def parse_product_id(args: dict[str, str]) -> str:
    try:
        return AddToCartQueryDTO.model_validate(args).product_id
    except PydanticValidationError as exc:
        raise_validation_error(exc, error=MissingProductIdError())


def parse_quantity(args: dict[str, str]) -> int:
    try:
        return UpdateQuantityQueryDTO.model_validate(args).quantity
    except PydanticValidationError as exc:
        raise_validation_error(exc, error=InvalidQuantityError())


def cart_payload(entries: list[CartEntry]) -> list[dict[str, Any]]:
    return [CartEntryDTO.from_entity(e).to_payload() for e in entries]
