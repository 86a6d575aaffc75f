# models/item.py
import uuid
from dataclasses import dataclass, field


def new_id() -> str:
    # 128-bit random id, e.g. "1b4e28ba-2fa1-11d2-883f-0016d3cca427"
    return str(uuid.uuid4())


# Item model representing a product for sale.
# eq=False: carts compare items by identity, never by field values.
@dataclass(eq=False)
class Item:
    name: str
    price: float
    description: str
    _id: str = field(default_factory=new_id, init=False, repr=False)

    @property
    def id(self) -> str:
        return self._id
