# services/cart_service.py
"""
cart_service.py

Cart operations on a User. The cart is a list of Item references, one entry
per unit, and every comparison here is by identity (`is`), so two items with
identical fields are still different products.
"""

import logging
from typing import Dict, List

from models.cart import CartLine
from models.item import Item
from models.user import User
from utils.formatters import money

logger = logging.getLogger("cartshop.cart")


def add_to_cart(item: Item, user: User) -> None:
    user.cart.append(item)
    logger.debug("Added %s to %s's cart", item.name, user.name)


def remove_from_cart(item: Item, user: User) -> None:
    # Removes every unit of the item; a missing item is a no-op.
    user.cart = [it for it in user.cart if it is not item]
    logger.debug("Removed all %s from %s's cart", item.name, user.name)


def remove_quantity_from_cart(item: Item, user: User, quantity: int) -> None:
    # The first `keep` units stay where they are; quantity <= 0 removes nothing.
    current_qty = sum(1 for it in user.cart if it is item)
    keep = max(0, current_qty - quantity)

    new_cart: List[Item] = []
    kept = 0
    for it in user.cart:
        if it is not item:
            new_cart.append(it)
        elif kept < keep:
            kept += 1
            new_cart.append(it)

    user.cart = new_cart
    logger.debug(
        "Removed %d of %d %s from %s's cart",
        current_qty - kept, current_qty, item.name, user.name,
    )


def cart_total(user: User) -> float:
    total = 0
    for it in user.cart:
        total += it.price
    return total


def summarize_cart(user: User) -> List[CartLine]:
    # Group by item name in first-seen order.
    # Items sharing a name but not a price: the last one scanned wins.
    counts: Dict[str, CartLine] = {}
    for it in user.cart:
        if it.name not in counts:
            counts[it.name] = CartLine(name=it.name, price=it.price, quantity=0)
        line = counts[it.name]
        line.price = it.price
        line.quantity += 1
    return list(counts.values())


def cart_lines(user: User) -> List[str]:
    # One line per unit, duplicates listed separately.
    return [f"{it.name} - {money(it.price)}: {it.description}" for it in user.cart]


def print_cart(user: User) -> None:
    logger.info("Here are the items in %s's cart:", user.name)
    for line in cart_lines(user):
        logger.info(line)
