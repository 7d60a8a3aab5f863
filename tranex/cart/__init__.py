"""Cart package: line item model, persistence, and the cart store."""
from .models import CartLineItem
from .service import FLAT_SHIPPING_COST, CartStore
from .storage import deserialize_items, serialize_items

__all__ = [
    "CartLineItem",
    "CartStore",
    "FLAT_SHIPPING_COST",
    "deserialize_items",
    "serialize_items",
]
