from http import HTTPStatus

from fastapi import APIRouter, HTTPException

from nilu_shop.api.dependencies import CatalogDep

from .menu_contracts import MenuEntryResponse

menu_router = APIRouter(prefix="/menu")


@menu_router.get("/")
async def get_menu(catalog: CatalogDep) -> list[MenuEntryResponse]:
    return [MenuEntryResponse.from_entry(e) for e in catalog.get_many()]


@menu_router.get(
    "/{product_id}",
    responses={
        HTTPStatus.OK: {
            "description": "Successfully returned requested menu entry",
        },
        HTTPStatus.NOT_FOUND: {
            "description": "Failed to return requested menu entry as one was not found",
        },
    },
)
async def get_menu_entry(product_id: str, catalog: CatalogDep) -> MenuEntryResponse:
    entry = catalog.get_one(product_id)

    if entry is None:
        raise HTTPException(
            HTTPStatus.NOT_FOUND,
            f"Request resource /menu/{product_id} was not found",
        )

    return MenuEntryResponse.from_entry(entry)
