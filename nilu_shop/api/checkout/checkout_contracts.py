from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict

from nilu_shop.checkout.checkout_models import (
    FieldError,
    NotifierResult,
    OrderDetails,
    PaymentMethod,
)
from nilu_shop.checkout.service import CheckoutOutcome


class CheckoutRequest(BaseModel):
    name: str = ""
    phone: str = ""
    address: str = ""
    notes: str = ""
    pay_method: PaymentMethod = PaymentMethod.CARD
    card_number: str = ""
    card_expiry: str = ""
    card_cvc: str = ""

    model_config = ConfigDict(extra="forbid")

    def as_order_details(self) -> OrderDetails:
        return OrderDetails(
            name=self.name,
            phone=self.phone,
            address=self.address,
            notes=self.notes,
            pay_method=self.pay_method,
            card_number=self.card_number,
            card_expiry=self.card_expiry,
            card_cvc=self.card_cvc,
        )


class FieldErrorResponse(BaseModel):
    field: str
    reason: str

    @staticmethod
    def from_field_error(error: FieldError) -> FieldErrorResponse:
        return FieldErrorResponse(field=error.field, reason=error.reason)


class NotificationResponse(BaseModel):
    ok: bool
    channel: str
    reference: str | None = None
    detail: str | None = None

    @staticmethod
    def from_result(result: NotifierResult) -> NotificationResponse:
        return NotificationResponse(
            ok=result.ok,
            channel=result.channel,
            reference=result.reference,
            detail=result.detail,
        )


class CheckoutResponse(BaseModel):
    cart_id: int
    summary: str
    subtotal: int
    delivery_fee: int
    total: int
    notification: NotificationResponse

    @staticmethod
    def from_outcome(cart_id: int, outcome: CheckoutOutcome) -> CheckoutResponse:
        return CheckoutResponse(
            cart_id=cart_id,
            summary=outcome.summary.text,
            subtotal=outcome.summary.subtotal,
            delivery_fee=outcome.summary.delivery_fee,
            total=outcome.summary.total,
            notification=NotificationResponse.from_result(outcome.notification),
        )


def errors_payload(errors: List[FieldError]) -> dict:
    return {
        "errors": [
            FieldErrorResponse.from_field_error(e).model_dump() for e in errors
        ]
    }
