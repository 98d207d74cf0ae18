import os
from dataclasses import dataclass, field

from nilu_shop.pricing.cart_models import PricingRules


@dataclass(slots=True, frozen=True)
class Settings:
    pricing: PricingRules = field(default_factory=PricingRules)
    whatsapp_number: str = "526311234567"
    brand_name: str = "NILU"
    log_level: str = "INFO"


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


def _read_phone(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().lstrip("+")
    if not raw.isdigit():
        raise ValueError(f"{name} must contain digits only, got {raw!r}")
    return raw


def load_settings() -> Settings:
    return Settings(
        pricing=PricingRules(
            free_threshold=_read_int("FREE_DELIVERY_THRESHOLD", 400),
            flat_fee=_read_int("DELIVERY_FLAT_FEE", 30),
        ),
        whatsapp_number=_read_phone("WHATSAPP_NUMBER", "526311234567"),
        brand_name=os.getenv("BRAND_NAME", "NILU").strip() or "NILU",
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
