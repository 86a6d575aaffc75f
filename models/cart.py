# models/cart.py
from dataclasses import dataclass
# One row of the aggregated cart view: units of a given item name.
@dataclass
class CartLine:
    name: str
    price: float
    quantity: int = 0
