from dataclasses import dataclass
from enum import Enum


class PaymentMethod(str, Enum):
    CARD = "card"
    CASH = "cash"


@dataclass(slots=True, frozen=True)
class OrderDetails:
    name: str
    phone: str
    address: str
    notes: str = ""
    pay_method: PaymentMethod = PaymentMethod.CARD
    card_number: str = ""
    card_expiry: str = ""
    card_cvc: str = ""


@dataclass(slots=True, frozen=True)
class FieldError:
    field: str
    reason: str


@dataclass(slots=True, frozen=True)
class OrderSummary:
    text: str
    subtotal: int
    delivery_fee: int
    total: int


@dataclass(slots=True, frozen=True)
class NotifierResult:
    ok: bool
    channel: str
    reference: str | None = None
    detail: str | None = None


class CheckoutError(Exception):
    """Raised when an order summary could not be handed off."""
