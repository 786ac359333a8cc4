from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shopfront.domain.catalog.entities import Brand, Product


class BrandDTO(BaseModel):
    id: str
    name: str

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandDTO":
        return cls(id=brand.id, name=brand.name)


class ProductDTO(BaseModel):
    """Product as stored, including any extra attributes from the data file."""

    id: str
    category_id: str = Field(alias="categoryId")
    name: str
    description: str

    model_config = ConfigDict(extra="allow", validate_by_name=True)

    @classmethod
    def from_entity(cls, product: Product) -> "ProductDTO":
        return cls.model_validate(
            {
                **product.attributes,
                "id": product.id,
                "categoryId": product.category_id,
                "name": product.name,
                "description": product.description,
            }
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def brands_payload(brands: list[Brand]) -> list[dict[str, Any]]:
    return [BrandDTO.from_entity(b).model_dump() for b in brands]


def products_payload(products: list[Product]) -> list[dict[str, Any]]:
    return [ProductDTO.from_entity(p).to_payload() for p in products]
