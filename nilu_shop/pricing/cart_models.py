from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Variant(str, Enum):
    SLICE = "slice"
    FULL = "full"


def line_key(product_id: str, variant: Variant) -> str:
    return f"{product_id}-{Variant(variant).value}"


@dataclass(slots=True, frozen=True)
class LineItem:
    key: str
    product_id: str
    display_name: str
    variant: Variant
    unit_price: int
    quantity: int


@dataclass(slots=True, frozen=True)
class CartEntry:
    product_id: str
    display_name: str
    variant: Variant
    unit_price: int
    quantity: int = 1

    @property
    def key(self) -> str:
        return line_key(self.product_id, self.variant)

    def as_line_item(self) -> LineItem:
        return LineItem(
            key=self.key,
            product_id=self.product_id,
            display_name=self.display_name,
            variant=Variant(self.variant),
            unit_price=self.unit_price,
            quantity=self.quantity,
        )


@dataclass(slots=True, frozen=True)
class PricingRules:
    free_threshold: int = 400
    flat_fee: int = 30


DEFAULT_RULES = PricingRules()

# insertion order is display order
Cart = Tuple[LineItem, ...]

EMPTY_CART: Cart = ()
