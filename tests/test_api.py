from __future__ import annotations

from http import HTTPStatus
from typing import Any

from fastapi.testclient import TestClient

from nilu_shop.checkout.checkout_models import CheckoutError, NotifierResult, OrderSummary
from nilu_shop.config import Settings
from nilu_shop.main import create_app
from nilu_shop.pricing.cart_models import PricingRules, Variant
from nilu_shop.store.catalog import Catalog
from nilu_shop.store.catalog_models import MenuEntry

CARD_ORDER = {
    "name": "Ana López",
    "phone": "6315550199",
    "address": "Calle Obregón 12",
    "notes": "Tocar timbre",
    "pay_method": "card",
    "card_number": "4242 4242 4242 4242",
    "card_expiry": "08/27",
    "card_cvc": "123",
}


def create_cart(client: TestClient) -> int:
    resp = client.post("/cart/")
    assert resp.status_code == HTTPStatus.CREATED
    assert resp.headers["location"] == f"/cart/{resp.json()['id']}"
    return resp.json()["id"]


def add_item(
    client: TestClient, cart_id: int, product_id: str, variant: str, quantity: int = 1
) -> dict[str, Any]:
    resp = client.post(
        f"/cart/{cart_id}/items",
        json={"product_id": product_id, "variant": variant, "quantity": quantity},
    )
    assert resp.status_code == HTTPStatus.OK
    return resp.json()


def test_menu(client: TestClient) -> None:
    r = client.get("/menu/")
    assert r.status_code == HTTPStatus.OK
    data = r.json()
    assert len(data) == 6
    pep = next(m for m in data if m["id"] == "pep")
    assert pep["prices"] == {"slice": 170, "full": 300}
    assert pep["image"] == "/img/peperoni.svg"

    r = client.get("/menu/nap")
    assert r.status_code == HTTPStatus.OK
    assert r.json()["name"] == "Napolitana"

    assert client.get("/menu/hawaiana").status_code == HTTPStatus.NOT_FOUND


def test_cart_flow(client: TestClient) -> None:
    cart_id = create_cart(client)

    data = client.get(f"/cart/{cart_id}").json()
    assert data == {"id": cart_id, "items": [], "subtotal": 0, "delivery_fee": 0, "total": 0}

    add_item(client, cart_id, "pep", "slice")
    data = add_item(client, cart_id, "pep", "slice", 2)
    assert len(data["items"]) == 1
    assert data["items"][0]["quantity"] == 3
    assert data["items"][0]["key"] == "pep-slice"
    assert data["items"][0]["line_total"] == 510

    data = add_item(client, cart_id, "pep", "full")
    assert [i["key"] for i in data["items"]] == ["pep-slice", "pep-full"]
    assert data["subtotal"] == 810
    assert data["delivery_fee"] == 0
    assert data["total"] == 810

    r = client.put(f"/cart/{cart_id}/items/pep-slice", json={"quantity": 1})
    assert r.status_code == HTTPStatus.OK
    data = r.json()
    assert data["items"][0]["quantity"] == 1
    assert data["subtotal"] == 470

    r = client.delete(f"/cart/{cart_id}/items/pep-full")
    assert r.status_code == HTTPStatus.OK
    data = r.json()
    assert [i["key"] for i in data["items"]] == ["pep-slice"]
    assert data["subtotal"] == 170
    assert data["delivery_fee"] == 30
    assert data["total"] == 200

    r = client.put(f"/cart/{cart_id}/items/pep-slice", json={"quantity": 0})
    assert r.json()["items"] == []
    assert r.json()["total"] == 0


def test_totals_scenarios(client: TestClient) -> None:
    cart_id = create_cart(client)
    add_item(client, cart_id, "pep", "slice")
    data = add_item(client, cart_id, "nap", "slice")
    assert (data["subtotal"], data["delivery_fee"], data["total"]) == (350, 30, 380)

    other = create_cart(client)
    data = add_item(client, other, "esp", "slice", 2)
    assert (data["subtotal"], data["delivery_fee"], data["total"]) == (400, 0, 400)


def test_unknown_key_is_noop(client: TestClient) -> None:
    cart_id = create_cart(client)
    before = add_item(client, cart_id, "ny", "full")

    r = client.put(f"/cart/{cart_id}/items/missing-full", json={"quantity": 5})
    assert r.status_code == HTTPStatus.OK
    assert r.json() == before

    r = client.delete(f"/cart/{cart_id}/items/missing-full")
    assert r.status_code == HTTPStatus.OK
    assert r.json() == before


def test_cart_not_found_and_validation(client: TestClient) -> None:
    assert client.get("/cart/424242").status_code == HTTPStatus.NOT_FOUND
    r = client.post("/cart/424242/items", json={"product_id": "pep", "variant": "slice"})
    assert r.status_code == HTTPStatus.NOT_FOUND
    r = client.put("/cart/424242/items/pep-slice", json={"quantity": 1})
    assert r.status_code == HTTPStatus.NOT_FOUND
    assert client.post("/cart/424242/checkout", json=CARD_ORDER).status_code == HTTPStatus.NOT_FOUND

    cart_id = create_cart(client)
    r = client.post(f"/cart/{cart_id}/items", json={"product_id": "hawaiana", "variant": "full"})
    assert r.status_code == HTTPStatus.NOT_FOUND

    r = client.post(f"/cart/{cart_id}/items", json={"product_id": "pep", "variant": "half"})
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    r = client.post(
        f"/cart/{cart_id}/items",
        json={"product_id": "pep", "variant": "full", "quantity": 0},
    )
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    r = client.post(
        f"/cart/{cart_id}/items",
        json={"product_id": "pep", "variant": "full", "odd": "field"},
    )
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_session_end(client: TestClient) -> None:
    cart_id = create_cart(client)
    add_item(client, cart_id, "mx", "full")

    assert client.delete(f"/cart/{cart_id}").status_code == HTTPStatus.OK
    assert client.get(f"/cart/{cart_id}").status_code == HTTPStatus.NOT_FOUND
    assert client.delete(f"/cart/{cart_id}").status_code == HTTPStatus.OK


def test_checkout_success(client: TestClient, notifier) -> None:
    cart_id = create_cart(client)
    add_item(client, cart_id, "pep", "slice")
    add_item(client, cart_id, "nap", "slice")

    r = client.post(f"/cart/{cart_id}/checkout", json=CARD_ORDER)
    assert r.status_code == HTTPStatus.OK
    data = r.json()
    assert data["cart_id"] == cart_id
    assert data["total"] == 380
    assert data["notification"] == {
        "ok": True,
        "channel": "test",
        "reference": "order-1",
        "detail": None,
    }
    assert "1 x Peperoni (Rebanada)" in data["summary"]
    assert "Notas: Tocar timbre" in data["summary"]
    assert len(notifier.sent) == 1
    assert notifier.sent[0].text == data["summary"]

    # the cart is kept after checkout
    assert len(client.get(f"/cart/{cart_id}").json()["items"]) == 2


def test_checkout_cash_skips_card_checks(client: TestClient, notifier) -> None:
    cart_id = create_cart(client)
    add_item(client, cart_id, "chi", "full")

    order = {k: v for k, v in CARD_ORDER.items() if not k.startswith("card_")}
    order["pay_method"] = "cash"
    r = client.post(f"/cart/{cart_id}/checkout", json=order)
    assert r.status_code == HTTPStatus.OK
    assert len(notifier.sent) == 1


def test_checkout_validation_errors(client: TestClient, notifier) -> None:
    cart_id = create_cart(client)

    order = dict(CARD_ORDER, name="", card_number="1234", card_cvc="1")
    r = client.post(f"/cart/{cart_id}/checkout", json=order)
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    errors = r.json()["errors"]
    assert [e["field"] for e in errors] == ["name", "cart", "card_number", "card_cvc"]
    assert all(e["reason"] for e in errors)
    assert notifier.sent == []

    r = client.post(f"/cart/{cart_id}/checkout", json=dict(CARD_ORDER, extra="x"))
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY

    r = client.post(f"/cart/{cart_id}/checkout", json=dict(CARD_ORDER, pay_method="crypto"))
    assert r.status_code == HTTPStatus.UNPROCESSABLE_ENTITY


def test_checkout_notifier_failure() -> None:
    class BrokenNotifier:
        def submit_order(self, summary: OrderSummary) -> NotifierResult:
            raise CheckoutError("channel unavailable")

    class RejectingNotifier:
        def submit_order(self, summary: OrderSummary) -> NotifierResult:
            return NotifierResult(ok=False, channel="test", detail="rejected")

    for notifier, detail in ((BrokenNotifier(), "channel unavailable"), (RejectingNotifier(), "rejected")):
        with TestClient(create_app(settings=Settings(), notifier=notifier)) as client:
            cart_id = create_cart(client)
            add_item(client, cart_id, "pep", "full")
            r = client.post(f"/cart/{cart_id}/checkout", json=CARD_ORDER)
            assert r.status_code == HTTPStatus.BAD_GATEWAY
            assert r.json()["detail"] == detail


def test_injected_catalog_and_pricing() -> None:
    catalog = Catalog([MenuEntry("calzone", "Calzone", "", "", prices={Variant.FULL: 90})])
    settings = Settings(pricing=PricingRules(free_threshold=200, flat_fee=15))

    with TestClient(create_app(settings=settings, catalog=catalog)) as client:
        assert [m["id"] for m in client.get("/menu/").json()] == ["calzone"]

        cart_id = create_cart(client)
        data = add_item(client, cart_id, "calzone", "full")
        assert (data["subtotal"], data["delivery_fee"], data["total"]) == (90, 15, 105)

        data = add_item(client, cart_id, "calzone", "full", 2)
        assert (data["subtotal"], data["delivery_fee"], data["total"]) == (270, 0, 270)

        r = client.post(f"/cart/{cart_id}/checkout", json=CARD_ORDER)
        assert r.status_code == HTTPStatus.OK
        assert r.json()["notification"]["channel"] == "whatsapp"
        assert r.json()["notification"]["reference"].startswith("https://wa.me/526311234567")
