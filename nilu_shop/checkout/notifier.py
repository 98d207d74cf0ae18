from typing import Protocol
from urllib.parse import quote

from nilu_shop.checkout.checkout_models import CheckoutError, NotifierResult, OrderSummary
from nilu_shop.logging import get_logger

logger = get_logger(__name__)

WHATSAPP_BASE_URL = "https://wa.me"


class CheckoutNotifier(Protocol):
    def submit_order(self, summary: OrderSummary) -> NotifierResult:
        ...


class WhatsAppLinkNotifier:
    """Hands the order to logistics as a WhatsApp click-to-chat link.

    Nothing is sent from the server: the returned link is opened by the
    client, which pre-fills the message for the store's number.
    """

    channel = "whatsapp"

    def __init__(self, phone_number: str):
        if not phone_number or not phone_number.isdigit():
            raise ValueError("phone_number must contain digits only")
        self.phone_number = phone_number

    def build_link(self, text: str) -> str:
        return f"{WHATSAPP_BASE_URL}/{self.phone_number}?text={quote(text, safe='')}"

    def submit_order(self, summary: OrderSummary) -> NotifierResult:
        if not summary.text:
            raise CheckoutError("order summary is empty")
        link = self.build_link(summary.text)
        logger.info("Order link generated for total %s", summary.total)
        return NotifierResult(ok=True, channel=self.channel, reference=link)
