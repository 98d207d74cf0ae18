from http import HTTPStatus

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from nilu_shop.api.dependencies import NotifierDep, SessionsDep, SettingsDep
from nilu_shop.checkout.checkout_models import CheckoutError
from nilu_shop.checkout.service import submit_checkout
from nilu_shop.logging import get_logger

from .checkout_contracts import (
    CheckoutRequest,
    CheckoutResponse,
    errors_payload,
)

logger = get_logger(__name__)

checkout_router = APIRouter(prefix="/cart")


@checkout_router.post(
    "/{id}/checkout",
    response_model=CheckoutResponse,
    responses={
        HTTPStatus.OK: {
            "description": "Order validated and handed to the checkout notifier",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to check out as the cart was not found",
        },
        HTTPStatus.UNPROCESSABLE_ENTITY: {
            "description": "Order fields failed validation",
        },
        HTTPStatus.BAD_GATEWAY: {
            "description": "Checkout notifier failed to accept the order",
        },
    },
)
async def post_checkout(
    id: int,
    info: CheckoutRequest,
    sessions: SessionsDep,
    settings: SettingsDep,
    notifier: NotifierDep,
):
    session = sessions.get_one(id)
    if session is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /cart/{id} was not found",
        )

    try:
        outcome = submit_checkout(
            session.cart,
            info.as_order_details(),
            notifier,
            rules=settings.pricing,
            brand=settings.brand_name,
        )
    except CheckoutError as e:
        logger.warning("Checkout notifier failed for cart %s: %s", id, e)
        raise HTTPException(HTTPStatus.BAD_GATEWAY, str(e)) from e

    if outcome.errors:
        return JSONResponse(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            content=errors_payload(outcome.errors),
        )

    if not outcome.notification.ok:
        raise HTTPException(
            HTTPStatus.BAD_GATEWAY,
            outcome.notification.detail or "checkout notifier rejected the order",
        )

    return CheckoutResponse.from_outcome(id, outcome)
