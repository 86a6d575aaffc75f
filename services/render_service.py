# services/render_service.py
from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from models.item import Item
from models.user import User
from services.cart_service import summarize_cart
from utils.formatters import money

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(["html"]),
)
templates.filters["money"] = money


def render_item_card(item: Item) -> str:
    # Card with name, price, description and an "Add to cart" button
    # whose data-item-id resolves through catalog_service.find_item().
    return templates.get_template("item_card.html").render(item=item)


def render_cart(user: User) -> str:
    # One card per distinct item name with its price and quantity.
    return templates.get_template("cart.html").render(user=user, lines=summarize_cart(user))
