"""Catalog product entity model."""
from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Variety(BaseModel):
    """Purchasable variant of a product (size, flavour)."""

    name: str = Field("", description="Variety name, empty for single-variant products")
    price: int = Field(..., ge=0, description="Unit price in smallest currency unit")

    class Config:
        """Pydantic config."""

        from_attributes = True
        frozen = True


class Product(BaseModel):
    """Catalog product with one or more varieties."""

    id: str = Field(..., min_length=1, description="Stable product ID")
    name: str = Field(..., min_length=1, max_length=200, description="Product name")
    category: str = Field(..., min_length=1, description="Menu category")
    image: str = Field("", description="Image URL")
    description: str | None = Field(None, max_length=1000, description="Short description")
    varieties: tuple[Variety, ...] = Field(..., min_length=1, description="Available varieties")

    class Config:
        """Pydantic config."""

        from_attributes = True
        frozen = True

    @field_validator("varieties")
    @classmethod
    def validate_unique_varieties(cls, v: tuple[Variety, ...]) -> tuple[Variety, ...]:
        names = [variety.name for variety in v]
        if len(names) != len(set(names)):
            raise ValueError("Variety names must be unique within a product")
        return v

    @property
    def starting_price(self) -> int:
        return min(variety.price for variety in self.varieties)

    def get_variety(self, name: str) -> Variety | None:
        for variety in self.varieties:
            if variety.name == name:
                return variety
        return None
