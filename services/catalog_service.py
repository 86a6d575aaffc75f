# services/catalog_service.py
import logging
from typing import List, Optional

from models.item import Item

logger = logging.getLogger("cartshop.catalog")


def create_item(name: str, price: float, description: str) -> Item:
    # Price sign and text content are not validated.
    item = Item(name, price, description)
    logger.debug("Created item %s (%s)", item.id, item.name)
    return item


def find_item(items: List[Item], item_id: str) -> Optional[Item]:
    # Resolve the id carried by an "Add to cart" button back to the catalog item.
    for item in items:
        if item.id == item_id:
            return item
    return None
