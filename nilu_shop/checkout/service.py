from dataclasses import dataclass, field
from typing import List

from nilu_shop.checkout.checkout_models import (
    FieldError,
    NotifierResult,
    OrderDetails,
    OrderSummary,
)
from nilu_shop.checkout.notifier import CheckoutNotifier
from nilu_shop.checkout.summary import build_summary
from nilu_shop.checkout.validation import validate_order
from nilu_shop.logging import get_logger, mask_phone
from nilu_shop.pricing.cart_models import DEFAULT_RULES, Cart, PricingRules

logger = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class CheckoutOutcome:
    errors: List[FieldError] = field(default_factory=list)
    summary: OrderSummary | None = None
    notification: NotifierResult | None = None

    @property
    def accepted(self) -> bool:
        return not self.errors and self.notification is not None


def submit_checkout(
    cart: Cart,
    order: OrderDetails,
    notifier: CheckoutNotifier,
    rules: PricingRules = DEFAULT_RULES,
    brand: str = "NILU",
) -> CheckoutOutcome:
    """Validate the order, then hand its summary to ``notifier``.

    Validation failures are returned, not raised. A failing notifier raises
    ``CheckoutError`` to the caller.
    """
    errors = validate_order(order, cart)
    if errors:
        logger.info(
            "Checkout rejected for %s: %s",
            mask_phone(order.phone),
            ", ".join(e.field for e in errors),
        )
        return CheckoutOutcome(errors=errors)

    summary = build_summary(cart, order, rules=rules, brand=brand)
    notification = notifier.submit_order(summary)
    logger.info(
        "Checkout submitted via %s for %s (total %s)",
        notification.channel,
        mask_phone(order.phone),
        summary.total,
    )
    return CheckoutOutcome(summary=summary, notification=notification)
