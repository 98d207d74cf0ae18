from dataclasses import dataclass, field
from typing import Dict

from nilu_shop.pricing.cart_models import Variant


@dataclass(slots=True, frozen=True)
class MenuEntry:
    id: str
    name: str
    description: str
    image: str
    prices: Dict[Variant, int] = field(default_factory=dict)

    def price_of(self, variant: Variant) -> int | None:
        return self.prices.get(Variant(variant))
