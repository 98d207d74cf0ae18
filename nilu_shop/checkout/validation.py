import re
from typing import List

from nilu_shop.checkout.checkout_models import FieldError, OrderDetails, PaymentMethod
from nilu_shop.pricing.cart_models import Cart

CARD_NUMBER_RE = re.compile(r"\d{16}", re.ASCII)
EXPIRY_PART_RE = re.compile(r"\d{2}", re.ASCII)
CVC_RE = re.compile(r"\d{3,4}", re.ASCII)

REQUIRED_CONTACT_FIELDS = ("name", "phone", "address")


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def validate_card_number(value: str) -> str | None:
    digits = re.sub(r"\s+", "", value or "")
    if not CARD_NUMBER_RE.fullmatch(digits):
        return "card number must have 16 digits"
    return None


def validate_card_expiry(value: str) -> str | None:
    parts = (value or "").split("/")
    if len(parts) != 2:
        return "expiry must be MM/YY"
    mm, yy = parts
    if not (EXPIRY_PART_RE.fullmatch(mm) and EXPIRY_PART_RE.fullmatch(yy)):
        return "expiry must be MM/YY"
    if not 1 <= int(mm) <= 12:
        return "expiry month must be between 01 and 12"
    return None


def validate_card_cvc(value: str) -> str | None:
    if not CVC_RE.fullmatch(value or ""):
        return "cvc must have 3 or 4 digits"
    return None


def validate_order(order: OrderDetails, cart: Cart) -> List[FieldError]:
    """Collect every reason the order cannot be submitted, in form order."""
    errors: List[FieldError] = []

    for field_name in REQUIRED_CONTACT_FIELDS:
        if _is_blank(getattr(order, field_name)):
            errors.append(FieldError(field_name, "required"))

    if len(cart) == 0:
        errors.append(FieldError("cart", "add at least one product"))

    if PaymentMethod(order.pay_method) is PaymentMethod.CARD:
        card_checks = (
            ("card_number", validate_card_number(order.card_number)),
            ("card_expiry", validate_card_expiry(order.card_expiry)),
            ("card_cvc", validate_card_cvc(order.card_cvc)),
        )
        for field_name, reason in card_checks:
            if reason is not None:
                errors.append(FieldError(field_name, reason))

    return errors
