"""Cart line item with Decimal pricing."""
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from tranex.errors import ERROR_INVALID_PRICE, ERROR_PRODUCT_ID_REQUIRED, InvalidProductError
from tranex.services.money import is_valid_price, multiply, parse_money, to_decimal, to_float


def _field(source: Any, name: str) -> Any:
    """Read a field from a mapping or an attribute-style object."""
    if source is None:
        return None
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


def _image_of(product: Any) -> str:
    """Resolve the display image: images.main, then image, then image_url."""
    image = _field(_field(product, "images"), "main") or _field(product, "image") or _field(product, "image_url")
    return str(image) if image else ""


@dataclass
class CartLineItem:
    """Single line in the cart. Display fields are snapshotted when first added."""
    id: str
    name: str
    price: Decimal
    image: str
    quantity: int

    def __post_init__(self):
        self.price = to_decimal(self.price)

    @property
    def line_total(self) -> Decimal:
        """Price for all units of this line."""
        return multiply(self.price, self.quantity)

    @classmethod
    def from_product(cls, product: Any, quantity: int = 1) -> "CartLineItem":
        """
        Build a line item from a product record.

        Accepts a dict (catalog row, mock product) or an object such as
        the pydantic Product model.

        Raises:
            InvalidProductError: If the id is missing or the price is not a
                non-negative number
        """
        product_id = _field(product, "id")
        if product_id is None or str(product_id) == "":
            raise InvalidProductError(ERROR_PRODUCT_ID_REQUIRED)

        try:
            price = parse_money(_field(product, "price"))
        except ValueError as e:
            raise InvalidProductError(f"{ERROR_INVALID_PRICE}: {e}") from e

        name = _field(product, "name")
        return cls(
            id=str(product_id),
            name=str(name) if name is not None else "",
            price=price,
            image=_image_of(product),
            quantity=quantity,
        )

    def to_dict(self) -> dict:
        """Convert to the persisted record shape."""
        return {
            "id": self.id,
            "name": self.name,
            "price": to_float(self.price),
            "image": self.image,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "CartLineItem":
        """
        Create from a persisted record, tolerating missing and unknown fields.

        Raises:
            InvalidProductError: If the record has no id, or its price is
                negative or above MAX_PRICE
        """
        product_id = data.get("id")
        if product_id is None or str(product_id) == "":
            raise InvalidProductError(ERROR_PRODUCT_ID_REQUIRED)

        try:
            quantity = int(data.get("quantity", 1))
        except (TypeError, ValueError, OverflowError):
            quantity = 1

        price = to_decimal(data.get("price"))
        if not is_valid_price(price):
            raise InvalidProductError(f"{ERROR_INVALID_PRICE}: {price}")

        return cls(
            id=str(product_id),
            name=str(data.get("name") or ""),
            price=price,
            image=_image_of(data),
            quantity=quantity,
        )
