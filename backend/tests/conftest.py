from datetime import date, timedelta
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from dependencies import get_notifier
from main import app
from schemas import OrderRecord
from services.notification.notifier import NotificationResult


class FakeNotifier:
    """Records every order it is asked to deliver."""

    def __init__(self, result: NotificationResult | None = None, error: Exception | None = None) -> None:
        self.result = result or NotificationResult(True, "Email sent successfully")
        self.error = error
        self.orders: List[OrderRecord] = []

    async def notify(self, order: OrderRecord) -> NotificationResult:
        self.orders.append(order)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def order_payload() -> Dict[str, Any]:
    return {
        "name": "Jane Doe",
        "businessName": "Acme Logistics",
        "deliveryAddress": "12 Dock Road, Port Town",
        "width": 1000,
        "height": 1000,
        "depth": 1000,
        "quantity": 3,
        "weight": 10,
        "dateRequired": (date.today() + timedelta(days=7)).isoformat(),
    }


@pytest.fixture
def order(order_payload) -> OrderRecord:
    return OrderRecord(**order_payload)


@pytest.fixture
def fake_notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def client(fake_notifier):
    app.dependency_overrides[get_notifier] = lambda: fake_notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
