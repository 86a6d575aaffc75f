# models/user.py
from dataclasses import dataclass, field

from models.item import Item, new_id


# User model representing a customer and the cart they own.
# One cart entry per unit; the same Item may appear several times.
@dataclass(eq=False)
class User:
    name: str
    age: int
    cart: list[Item] = field(default_factory=list)
    _id: str = field(default_factory=new_id, init=False, repr=False)

    @property
    def id(self) -> str:
        return self._id
