"""Cart store: line items, totals, persistence and change notification."""
from dataclasses import replace
from decimal import Decimal
from typing import Any, Callable, List

from tranex.db import StorageKeys
from tranex.errors import ERROR_CART_REENTRANT, CartReentrancyError
from tranex.logging import get_logger, sanitize_id_for_logging
from tranex.storage import KeyValueStorage

from .models import CartLineItem
from .storage import load_items, save_items

logger = get_logger(__name__)

# Flat shipping charged on any non-empty cart
FLAT_SHIPPING_COST = Decimal("10")

CartListener = Callable[[int], Any]


class CartStore:
    """
    Shopping cart for one browsing session.

    Every mutation runs to completion before returning: change the items,
    write them to storage, then call subscribers with the new item count.
    Construct one per session and hand it to whatever needs the cart.

    Usage:
        store = CartStore(FileStorage(".tranex_storage.json"))
        store.subscribe(lambda count: print(f"{count} items"))
        store.add_item({"id": "A", "name": "Widget", "price": 10, "image": "x"}, 2)
        store.get_total_price()  # Decimal("20")

    Subscribers must not mutate the cart from inside their callback; such a
    call raises CartReentrancyError and is logged as a subscriber failure.
    Two stores sharing a storage key do not see each other's writes until
    reload() is called; the last write wins.
    """

    def __init__(self, storage: KeyValueStorage, key: str = StorageKeys.CART):
        self.storage = storage
        self.key = key
        self._items: List[CartLineItem] = load_items(storage, key)
        self._listeners: List[CartListener] = []
        self._notifying = False

    # --- Internals ---

    def _find(self, product_id: str) -> CartLineItem | None:
        return next((item for item in self._items if item.id == product_id), None)

    def _check_not_notifying(self) -> None:
        if self._notifying:
            raise CartReentrancyError(ERROR_CART_REENTRANT)

    def _save(self) -> None:
        """Persist, then notify. A failed write leaves the in-memory cart valid."""
        save_items(self.storage, self.key, self._items)
        self._notify()

    def _notify(self) -> None:
        total_items = self.get_total_item_count()
        self._notifying = True
        try:
            for callback in list(self._listeners):
                try:
                    callback(total_items)
                except Exception:
                    logger.exception("Cart subscriber failed")
        finally:
            self._notifying = False

    # --- Public API ---

    def add_item(self, product: Any, quantity: int = 1) -> None:
        """
        Add a product to the cart, or increase its quantity if already present.

        Name, price and image are kept from the first add of a product id.

        Args:
            product: Product record (dict or object) with id, name, price and image
            quantity: Units to add (trusted, not validated)

        Raises:
            InvalidProductError: If product has no id or an invalid price
        """
        self._check_not_notifying()
        item = CartLineItem.from_product(product, quantity)

        existing = self._find(item.id)
        if existing:
            existing.quantity += quantity
        else:
            self._items.append(item)

        logger.debug(f"Added {quantity} x {sanitize_id_for_logging(item.id)} to cart")
        self._save()

    def remove_item(self, product_id: Any) -> None:
        """Remove a line by product id. Absent ids are a no-op but still persist."""
        self._check_not_notifying()
        product_id = str(product_id)
        self._items = [item for item in self._items if item.id != product_id]
        self._save()

    def update_quantity(self, product_id: Any, quantity: int) -> None:
        """Set a line's quantity; zero or negative removes it. Unknown ids are ignored."""
        self._check_not_notifying()
        product_id = str(product_id)
        item = self._find(product_id)
        if item is None:
            return
        if quantity > 0:
            item.quantity = quantity
            self._save()
        else:
            self.remove_item(product_id)

    def get_cart_items(self) -> List[CartLineItem]:
        """Snapshot of the current line items, in insertion order."""
        return [replace(item) for item in self._items]

    def get_total_price(self) -> Decimal:
        return sum((item.line_total for item in self._items), Decimal("0"))

    def get_total_item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def clear_cart(self) -> None:
        self._check_not_notifying()
        self._items = []
        self._save()

    def subscribe(self, callback: CartListener) -> None:
        """Register a callback receiving the total item count after each mutation."""
        self._listeners.append(callback)

    def reload(self) -> None:
        """Re-read the cart from storage, e.g. after another tab wrote to it."""
        self._items = load_items(self.storage, self.key)
        self._notify()

    def get_summary(self) -> dict:
        """Totals and lines for the cart page."""
        subtotal = self.get_total_price()
        shipping = FLAT_SHIPPING_COST if subtotal > 0 else Decimal("0")
        return {
            "is_empty": not self._items,
            "total_items": self.get_total_item_count(),
            "items": [
                {**item.to_dict(), "price": item.price, "line_total": item.line_total}
                for item in self._items
            ],
            "subtotal": subtotal,
            "shipping": shipping,
            "total": subtotal + shipping,
        }
