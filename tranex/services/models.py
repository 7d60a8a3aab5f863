"""Catalog Models - Pydantic models for Supabase rows."""
from decimal import Decimal
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tranex.services.money import discount_percent as _discount_percent, to_decimal as _to_decimal

PRODUCT_PLACEHOLDER_IMAGE = "/src/assets/images/product-placeholder.jpg"


class ProductImages(BaseModel):
    """Main image plus gallery."""
    model_config = ConfigDict(extra="ignore")

    main: Optional[str] = None
    gallery: list[str] = Field(default_factory=list)


class Product(BaseModel):
    """Product model."""
    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields from DB

    id: str
    name: str
    description: Optional[str] = None
    short_description: Optional[str] = None
    price: Decimal
    original_price: Optional[Decimal] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    brand: Optional[str] = None
    sku: Optional[str] = None
    stock_quantity: int = 0
    images: Optional[ProductImages] = None
    image_url: Optional[str] = None
    features: list[str] = Field(default_factory=list)
    specifications: dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True
    created_at: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def convert_id_to_str(cls, v):
        return str(v) if v is not None else v

    @field_validator("price", mode="before")
    @classmethod
    def convert_price_to_decimal(cls, v):
        return _to_decimal(v)

    @field_validator("original_price", mode="before")
    @classmethod
    def convert_original_price(cls, v):
        return _to_decimal(v) if v is not None else None

    @property
    def discount_percent(self) -> int:
        """Percent off the original price, 0 when not discounted."""
        return _discount_percent(self.price, self.original_price)

    @property
    def main_image(self) -> str:
        if self.images and self.images.main:
            return self.images.main
        return self.image_url or PRODUCT_PLACEHOLDER_IMAGE


class Category(BaseModel):
    """Product category."""
    model_config = ConfigDict(extra="ignore")

    id: int | str
    name: str
    slug: str
    description: Optional[str] = None
    sort_order: int = 0
    is_active: bool = True


class Review(BaseModel):
    """Product review."""
    model_config = ConfigDict(extra="ignore")

    id: int | str
    product_id: Optional[str] = None
    user_name: str = ""
    rating: float = 0
    comment: str = ""
    created_at: Optional[datetime] = None
