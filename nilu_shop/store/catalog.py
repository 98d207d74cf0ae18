from typing import Iterable

from nilu_shop.pricing.cart_models import CartEntry, Variant
from nilu_shop.store.catalog_models import MenuEntry


class Catalog:
    """Read-only menu, keyed by product id.

    Prices are validated once here so the pricing functions can assume
    non-negative unit prices.
    """

    def __init__(self, entries: Iterable[MenuEntry]):
        self._entries: dict[str, MenuEntry] = {}
        for entry in entries:
            if entry.id in self._entries:
                raise ValueError(f"duplicate product id {entry.id!r}")
            for variant, price in entry.prices.items():
                if price < 0:
                    raise ValueError(
                        f"negative price for {entry.id!r} ({Variant(variant).value})"
                    )
            self._entries[entry.id] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def get_one(self, product_id: str) -> MenuEntry | None:
        return self._entries.get(product_id)

    def get_many(self) -> Iterable[MenuEntry]:
        yield from self._entries.values()

    def price_of(self, product_id: str, variant: Variant) -> int | None:
        entry = self.get_one(product_id)
        if entry is None:
            return None
        return entry.price_of(variant)

    def make_entry(
        self, product_id: str, variant: Variant, quantity: int = 1
    ) -> CartEntry | None:
        entry = self.get_one(product_id)
        if entry is None:
            return None
        price = entry.price_of(variant)
        if price is None:
            return None
        return CartEntry(
            product_id=entry.id,
            display_name=entry.name,
            variant=Variant(variant),
            unit_price=price,
            quantity=quantity,
        )


DEFAULT_MENU = (
    MenuEntry(
        id="nap",
        name="Napolitana",
        description="San Marzano, fior di latte, albahaca.",
        image="/img/napolitana.svg",
        prices={Variant.SLICE: 180, Variant.FULL: 320},
    ),
    MenuEntry(
        id="ny",
        name="New York",
        description="Slice delgado, queso estirable, borde con carácter.",
        image="/img/newyork.svg",
        prices={Variant.SLICE: 190, Variant.FULL: 340},
    ),
    MenuEntry(
        id="chi",
        name="Chicago",
        description="Profunda, mucho queso, salsa arriba.",
        image="/img/chicago.svg",
        prices={Variant.SLICE: 220, Variant.FULL: 380},
    ),
    MenuEntry(
        id="mx",
        name="Carne Asada Mexicana",
        description="Carne asada, cebolla, cilantro, guacamole.",
        image="/img/mexicana.svg",
        prices={Variant.SLICE: 210, Variant.FULL: 360},
    ),
    MenuEntry(
        id="pep",
        name="Peperoni",
        description="El clásico crujiente con bordes rizados.",
        image="/img/peperoni.svg",
        prices={Variant.SLICE: 170, Variant.FULL: 300},
    ),
    MenuEntry(
        id="esp",
        name="Especial de temporada",
        description="Siempre fresco, según el mercado.",
        image="/img/especial.svg",
        prices={Variant.SLICE: 200, Variant.FULL: 360},
    ),
)


def default_catalog() -> Catalog:
    return Catalog(DEFAULT_MENU)
