from __future__ import annotations

from nilu_shop.pricing import cart_ops
from nilu_shop.pricing.cart_models import EMPTY_CART, Variant
from nilu_shop.store.cart_session_queries import CartSessionStore
from nilu_shop.store.catalog import default_catalog
from nilu_shop.store.id_generator import int_id_generator


def test_int_id_generator() -> None:
    gen = int_id_generator()
    assert [next(gen), next(gen), next(gen)] == [0, 1, 2]

    gen = int_id_generator(start=10)
    assert next(gen) == 10


def test_session_lifecycle() -> None:
    store = CartSessionStore()

    s1 = store.add_empty()
    s2 = store.add_empty()
    assert s1.id != s2.id
    assert s1.cart == EMPTY_CART
    assert len(store) == 2

    entry = default_catalog().make_entry("pep", Variant.SLICE)
    updated = store.replace(s1.id, cart_ops.upsert(s1.cart, entry))
    assert updated is not None
    assert len(updated.cart) == 1
    assert store.get_one(s1.id).cart == updated.cart
    assert store.get_one(s2.id).cart == EMPTY_CART

    store.delete(s1.id)
    assert store.get_one(s1.id) is None
    assert s1.id not in store
    assert len(store) == 1


def test_unknown_session() -> None:
    store = CartSessionStore()
    assert store.get_one(42) is None
    assert store.replace(42, EMPTY_CART) is None
    store.delete(42)
    assert len(store) == 0


def test_stores_do_not_share_state() -> None:
    a = CartSessionStore()
    b = CartSessionStore()
    session = a.add_empty()
    assert b.get_one(session.id) is None
