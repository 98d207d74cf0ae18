from dataclasses import dataclass

from nilu_shop.pricing.cart_models import EMPTY_CART, Cart


@dataclass(slots=True, frozen=True)
class CartSession:
    id: int
    cart: Cart = EMPTY_CART
