from typing import Annotated

from fastapi import Depends, Request

from nilu_shop.checkout.notifier import CheckoutNotifier
from nilu_shop.config import Settings
from nilu_shop.store.cart_session_queries import CartSessionStore
from nilu_shop.store.catalog import Catalog


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_sessions(request: Request) -> CartSessionStore:
    return request.app.state.sessions


def get_notifier(request: Request) -> CheckoutNotifier:
    return request.app.state.notifier


SettingsDep = Annotated[Settings, Depends(get_settings)]
CatalogDep = Annotated[Catalog, Depends(get_catalog)]
SessionsDep = Annotated[CartSessionStore, Depends(get_sessions)]
NotifierDep = Annotated[CheckoutNotifier, Depends(get_notifier)]
