from http import HTTPStatus

from fastapi import APIRouter, HTTPException, Response

from nilu_shop.api.dependencies import CatalogDep, SessionsDep, SettingsDep
from nilu_shop.pricing import cart_ops
from nilu_shop.store.cart_session_models import CartSession
from nilu_shop.store.cart_session_queries import CartSessionStore

from .cart_contracts import (
    AddItemRequest,
    CartResponse,
    SetQuantityRequest,
)

cart_router = APIRouter(prefix="/cart")


def _require_session(sessions: CartSessionStore, id: int) -> CartSession:
    session = sessions.get_one(id)
    if session is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /cart/{id} was not found",
        )
    return session


@cart_router.post(
    "/",
    status_code=HTTPStatus.CREATED,
)
async def post_cart(response: Response, sessions: SessionsDep) -> dict[str, int]:
    session = sessions.add_empty()

    response.headers["location"] = f"/cart/{session.id}"
    return {"id": session.id}


@cart_router.get(
    "/{id}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested cart",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to return requested cart as one was not found",
        },
    },
)
async def get_cart_by_id(
    id: int, sessions: SessionsDep, settings: SettingsDep
) -> CartResponse:
    session = _require_session(sessions, id)
    return CartResponse.from_session(session, settings.pricing)


@cart_router.delete("/{id}")
async def delete_cart(id: int, sessions: SessionsDep) -> Response:
    sessions.delete(id)
    return Response("")


@cart_router.post(
    "/{id}/items",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully added product to cart",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Cart, product or product variant was not found",
        },
    },
)
async def add_item(
    id: int,
    info: AddItemRequest,
    sessions: SessionsDep,
    catalog: CatalogDep,
    settings: SettingsDep,
) -> CartResponse:
    session = _require_session(sessions, id)

    entry = catalog.make_entry(info.product_id, info.variant, info.quantity)
    if entry is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /menu/{info.product_id} ({info.variant.value}) was not found",
        )

    updated = sessions.replace(id, cart_ops.upsert(session.cart, entry))
    return CartResponse.from_session(updated, settings.pricing)


@cart_router.put("/{id}/items/{key}")
async def put_item_quantity(
    id: int,
    key: str,
    info: SetQuantityRequest,
    sessions: SessionsDep,
    settings: SettingsDep,
) -> CartResponse:
    session = _require_session(sessions, id)
    updated = sessions.replace(id, cart_ops.set_quantity(session.cart, key, info.quantity))
    return CartResponse.from_session(updated, settings.pricing)


@cart_router.delete("/{id}/items/{key}")
async def delete_item(
    id: int,
    key: str,
    sessions: SessionsDep,
    settings: SettingsDep,
) -> CartResponse:
    session = _require_session(sessions, id)
    updated = sessions.replace(id, cart_ops.remove(session.cart, key))
    return CartResponse.from_session(updated, settings.pricing)
