from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, PositiveInt

from nilu_shop.pricing import cart_ops
from nilu_shop.pricing.cart_models import LineItem, PricingRules, Variant
from nilu_shop.store.cart_session_models import CartSession


class LineItemResponse(BaseModel):
    key: str
    product_id: str
    name: str
    variant: Variant
    unit_price: int
    quantity: int
    line_total: int

    @staticmethod
    def from_line_item(line: LineItem) -> LineItemResponse:
        return LineItemResponse(
            key=line.key,
            product_id=line.product_id,
            name=line.display_name,
            variant=line.variant,
            unit_price=line.unit_price,
            quantity=line.quantity,
            line_total=line.unit_price * line.quantity,
        )


class CartResponse(BaseModel):
    id: int
    items: List[LineItemResponse]
    subtotal: int
    delivery_fee: int
    total: int

    @staticmethod
    def from_session(session: CartSession, rules: PricingRules) -> CartResponse:
        subtotal = cart_ops.subtotal(session.cart)
        fee = cart_ops.delivery_fee(subtotal, rules)
        return CartResponse(
            id=session.id,
            items=[LineItemResponse.from_line_item(line) for line in session.cart],
            subtotal=subtotal,
            delivery_fee=fee,
            total=subtotal + fee,
        )


class AddItemRequest(BaseModel):
    product_id: str
    variant: Variant = Variant.FULL
    quantity: PositiveInt = 1

    model_config = ConfigDict(extra="forbid")


class SetQuantityRequest(BaseModel):
    # zero or below drops the line
    quantity: int

    model_config = ConfigDict(extra="forbid")
