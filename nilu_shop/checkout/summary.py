from nilu_shop.checkout.checkout_models import OrderDetails, OrderSummary
from nilu_shop.pricing import cart_ops
from nilu_shop.pricing.cart_models import DEFAULT_RULES, Cart, PricingRules, Variant

VARIANT_LABELS = {
    Variant.SLICE: "Rebanada",
    Variant.FULL: "Completa",
}


def format_money(amount: int) -> str:
    """Format whole pesos the way es-MX renders MXN, e.g. ``$1,234.00``."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def variant_label(variant: Variant) -> str:
    return VARIANT_LABELS[Variant(variant)]


def build_summary(
    cart: Cart,
    order: OrderDetails,
    rules: PricingRules = DEFAULT_RULES,
    brand: str = "NILU",
) -> OrderSummary:
    subtotal = cart_ops.subtotal(cart)
    fee = cart_ops.delivery_fee(subtotal, rules)
    total = subtotal + fee

    item_lines = [
        f"{line.quantity} x {line.display_name} ({variant_label(line.variant)})"
        for line in cart
    ]
    notes = order.notes.strip() if order.notes else ""

    text = "\n".join(
        [
            f"Pedido {brand}",
            "",
            *item_lines,
            "",
            f"Subtotal: {format_money(subtotal)}",
            f"Envío: {format_money(fee)}",
            f"Total: {format_money(total)}",
            "",
            f"Nombre: {order.name.strip()}",
            f"Teléfono: {order.phone.strip()}",
            f"Dirección: {order.address.strip()}",
            f"Notas: {notes or '-'}",
        ]
    )
    return OrderSummary(text=text, subtotal=subtotal, delivery_fee=fee, total=total)
