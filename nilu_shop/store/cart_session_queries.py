from typing import Iterator

from nilu_shop.logging import get_logger
from nilu_shop.pricing.cart_models import EMPTY_CART, Cart
from nilu_shop.store.cart_session_models import CartSession
from nilu_shop.store.id_generator import int_id_generator

logger = get_logger(__name__)


class CartSessionStore:
    """In-memory cart snapshots, one per storefront session."""

    def __init__(self, id_generator: Iterator[int] | None = None):
        self._carts: dict[int, Cart] = {}
        self._ids = id_generator if id_generator is not None else int_id_generator()

    def __len__(self) -> int:
        return len(self._carts)

    def __contains__(self, id: int) -> bool:
        return id in self._carts

    def add_empty(self) -> CartSession:
        _id = next(self._ids)
        self._carts[_id] = EMPTY_CART
        logger.info("Cart session %s started", _id)
        return CartSession(id=_id, cart=EMPTY_CART)

    def get_one(self, id: int) -> CartSession | None:
        if id not in self._carts:
            return None
        return CartSession(id=id, cart=self._carts[id])

    def replace(self, id: int, cart: Cart) -> CartSession | None:
        if id not in self._carts:
            return None
        self._carts[id] = tuple(cart)
        return CartSession(id=id, cart=self._carts[id])

    def delete(self, id: int) -> None:
        if id in self._carts:
            del self._carts[id]
            logger.info("Cart session %s ended", id)
