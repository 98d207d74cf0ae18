"""Pure cart and pricing functions.

Every operation takes a cart snapshot and returns a new one, so callers can
hand the previous snapshot to observers without copying it.
"""
from dataclasses import replace
from typing import Iterable

from nilu_shop.pricing.cart_models import (
    DEFAULT_RULES,
    Cart,
    CartEntry,
    LineItem,
    PricingRules,
)


def find_line(cart: Cart, key: str) -> LineItem | None:
    for line in cart:
        if line.key == key:
            return line
    return None


def upsert(cart: Iterable[LineItem], entry: CartEntry) -> Cart:
    # the first insert fixes unit_price and display_name for the key
    lines = tuple(cart)
    key = entry.key
    for idx, line in enumerate(lines):
        if line.key == key:
            merged = replace(line, quantity=line.quantity + entry.quantity)
            return lines[:idx] + (merged,) + lines[idx + 1:]
    return lines + (entry.as_line_item(),)


def set_quantity(cart: Iterable[LineItem], key: str, quantity: int) -> Cart:
    quantity = max(0, quantity)
    updated = (
        replace(line, quantity=quantity) if line.key == key else line
        for line in cart
    )
    return tuple(line for line in updated if line.quantity > 0)


def remove(cart: Iterable[LineItem], key: str) -> Cart:
    return tuple(line for line in cart if line.key != key)


def subtotal(cart: Iterable[LineItem]) -> int:
    return sum(line.unit_price * line.quantity for line in cart)


def delivery_fee(amount: int, rules: PricingRules = DEFAULT_RULES) -> int:
    if amount == 0 or amount >= rules.free_threshold:
        return 0
    return rules.flat_fee


def total(cart: Iterable[LineItem], rules: PricingRules = DEFAULT_RULES) -> int:
    amount = subtotal(cart)
    return amount + delivery_fee(amount, rules)
