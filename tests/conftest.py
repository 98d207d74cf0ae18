from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from nilu_shop.checkout.checkout_models import NotifierResult, OrderSummary
from nilu_shop.config import Settings
from nilu_shop.main import create_app


class RecordingNotifier:
    channel = "test"

    def __init__(self) -> None:
        self.sent: list[OrderSummary] = []

    def submit_order(self, summary: OrderSummary) -> NotifierResult:
        self.sent.append(summary)
        return NotifierResult(ok=True, channel=self.channel, reference=f"order-{len(self.sent)}")


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def client(notifier: RecordingNotifier) -> Iterator[TestClient]:
    app = create_app(settings=Settings(), notifier=notifier)
    with TestClient(app) as c:
        yield c
