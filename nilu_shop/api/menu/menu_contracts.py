from __future__ import annotations

from typing import Dict

from pydantic import BaseModel

from nilu_shop.store.catalog_models import MenuEntry


class MenuEntryResponse(BaseModel):
    id: str
    name: str
    description: str
    image: str
    prices: Dict[str, int]

    @staticmethod
    def from_entry(entry: MenuEntry) -> MenuEntryResponse:
        return MenuEntryResponse(
            id=entry.id,
            name=entry.name,
            description=entry.description,
            image=entry.image,
            prices={variant.value: price for variant, price in entry.prices.items()},
        )
