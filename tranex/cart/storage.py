"""Cart persistence: JSON array of line items under one storage key."""
import json
from typing import Iterable, List

from tranex.logging import get_logger, sanitize_id_for_logging
from tranex.storage import KeyValueStorage

from .models import CartLineItem

logger = get_logger(__name__)


def serialize_items(items: Iterable[CartLineItem]) -> str:
    """Serialize line items to the persisted JSON form."""
    return json.dumps([item.to_dict() for item in items], ensure_ascii=False)


def deserialize_items(raw: str | None) -> List[CartLineItem]:
    """
    Parse persisted line items.

    Absent or unparseable data gives an empty list. Records without an id,
    with an invalid price or with a non-positive quantity are dropped;
    repeated ids are merged into the first occurrence so ids stay unique
    after a load.
    """
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning(f"Corrupted cart data, starting empty: {e}")
        return []

    if not isinstance(data, list):
        logger.warning(f"Cart data is not a list ({type(data).__name__}), starting empty")
        return []

    items: List[CartLineItem] = []
    by_id: dict[str, CartLineItem] = {}
    for record in data:
        if not isinstance(record, dict):
            continue
        try:
            item = CartLineItem.from_dict(record)
        except Exception as e:
            logger.warning(f"Skipping invalid cart record: {e}")
            continue
        if item.quantity < 1:
            continue
        existing = by_id.get(item.id)
        if existing:
            logger.warning(f"Merging duplicate cart record {sanitize_id_for_logging(item.id)}")
            existing.quantity += item.quantity
            continue
        by_id[item.id] = item
        items.append(item)
    return items


def load_items(storage: KeyValueStorage, key: str) -> List[CartLineItem]:
    """Read line items from storage; read failures give an empty cart."""
    try:
        raw = storage.get(key)
    except Exception as e:
        logger.error(f"Failed to read cart from storage: {e}")
        return []
    return deserialize_items(raw)


def save_items(storage: KeyValueStorage, key: str, items: Iterable[CartLineItem]) -> bool:
    """Write line items to storage. Returns False if the write failed."""
    try:
        storage.set(key, serialize_items(items))
        return True
    except Exception as e:
        logger.error(f"Failed to save cart to storage: {e}")
        return False
