from fastapi import FastAPI

from nilu_shop.api.cart.cart_routes import cart_router
from nilu_shop.api.checkout.checkout_routes import checkout_router
from nilu_shop.api.menu.menu_routes import menu_router
from nilu_shop.checkout.notifier import CheckoutNotifier, WhatsAppLinkNotifier
from nilu_shop.config import Settings, load_settings
from nilu_shop.logging import configure_logging
from nilu_shop.store.cart_session_queries import CartSessionStore
from nilu_shop.store.catalog import Catalog, default_catalog


def create_app(
    settings: Settings | None = None,
    catalog: Catalog | None = None,
    notifier: CheckoutNotifier | None = None,
) -> FastAPI:
    settings = settings if settings is not None else load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="NILU Shop API")

    app.state.settings = settings
    app.state.catalog = catalog if catalog is not None else default_catalog()
    app.state.sessions = CartSessionStore()
    app.state.notifier = (
        notifier
        if notifier is not None
        else WhatsAppLinkNotifier(settings.whatsapp_number)
    )

    app.include_router(menu_router)
    app.include_router(cart_router)
    app.include_router(checkout_router)
    return app


app = create_app()
