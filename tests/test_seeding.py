import random
from unittest.mock import MagicMock

import pytest
import requests

from app.services.seeding import (
    ADVANCED_SCENARIOS,
    BASIC_SCENARIOS,
    OrderScenario,
    SeedApiClient,
    SeedingError,
    SeedReport,
    quick_scenarios,
    seed_advanced,
    seed_basic,
)

CATALOG = [
    {"name": "Bananas", "price": 1.99, "stockQuantity": 150},
    {"name": "Salmon", "price": 12.99, "stockQuantity": 2},
    {"name": "Ice Cream", "price": 5.99, "stockQuantity": 0},
    {"name": "Truffle Oil", "price": 249.0, "stockQuantity": 1000},
]


def _response(status=200, payload=None):
    response = MagicMock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.content = b"{}" if payload is not None else b""
    response.json.return_value = payload
    response.text = ""
    response.reason = "Error"
    return response


class FakeBackend:
    """Stands in for requests.Session.request against the commerce API."""

    def __init__(self, healthy=True, fail_products=()):
        self.healthy = healthy
        self.fail_products = set(fail_products)
        self.requests = []
        self.bodies = []
        self.items = []
        self._ids = 0
        self.headers = {}

    def _next_id(self, prefix):
        self._ids += 1
        return f"{prefix}-{self._ids}"

    def request(self, method, url, json=None, timeout=None):
        path = url.split("/api", 1)[1]
        self.requests.append((method, path))
        self.bodies.append(json)
        if path == "/products" and method == "GET":
            if not self.healthy:
                raise requests.exceptions.ConnectionError("refused")
            return _response(200, [])
        if path == "/products":
            if json["name"] in self.fail_products:
                return _response(400, {"message": "Name already exists"})
            return _response(201, {"id": self._next_id("p")})
        if path == "/orders/init":
            return _response(201, {"id": self._next_id("o")})
        if path.endswith("/items"):
            self.items.append((path.split("/")[2], json))
            return _response(201, {"id": self._next_id("i")})
        return _response(200, None)


def _client(backend, retries=1):
    return SeedApiClient(base_url="http://backend.test/api", retries=retries,
                         session=backend, sleep=lambda _: None)


def _seed_kwargs():
    return dict(rng=random.Random(7), sleep=lambda _: None)


def test_call_retries_then_reports_failure():
    session = MagicMock()
    session.headers = {}
    session.request.side_effect = requests.exceptions.Timeout("too slow")
    sleeps = []
    client = SeedApiClient(base_url="http://backend.test/api", retries=3,
                           backoff=0.5, session=session, sleep=sleeps.append)

    result = client.init_order()

    assert result.success is False
    assert result.error_message == "too slow"
    assert session.request.call_count == 3
    assert sleeps == [0.5, 1.0]


def test_create_product_sends_only_contract_fields():
    backend = FakeBackend()
    _client(backend).create_product(
        {"name": "Milk", "price": 4.99, "stockQuantity": 10,
         "category": "Dairy"})
    assert backend.requests == [("POST", "/products")]
    assert backend.bodies == [{"name": "Milk", "price": 4.99,
                               "stockQuantity": 10}]


def test_basic_seed_aborts_when_api_down():
    backend = FakeBackend(healthy=False)
    with pytest.raises(SeedingError):
        seed_basic(_client(backend), CATALOG, **_seed_kwargs())
    assert backend.requests == [("GET", "/products")]


def test_basic_seed_report():
    backend = FakeBackend(fail_products={"Salmon"})
    report = seed_basic(_client(backend), CATALOG, **_seed_kwargs())

    assert [p["name"] for p in report.products] == ["Bananas", "Ice Cream",
                                                    "Truffle Oil"]
    assert report.products_failed == 1
    expected_orders = sum(s.count for s in BASIC_SCENARIOS) + 2
    assert report.orders_created == expected_orders
    assert report.orders_paid == 15 + 2
    assert report.orders_cancelled == 5
    assert report.orders_pending == 8
    assert report.items_created == len(backend.items)
    # Never orders more than was in stock.
    assert all(p["stockQuantity"] >= 0 for p in report.products)
    assert all(item["quantity"] >= 1 for _, item in backend.items)


def test_basic_orders_never_repeat_a_product():
    backend = FakeBackend()
    seed_basic(_client(backend), CATALOG, **_seed_kwargs())

    per_order = {}
    for order_id, item in backend.items:
        per_order.setdefault(order_id, []).append(item["productId"])
    assert per_order
    for product_ids in per_order.values():
        assert len(product_ids) == len(set(product_ids))


def test_advanced_products_only():
    backend = FakeBackend()
    report = seed_advanced(_client(backend, retries=3), CATALOG,
                           products_only=True, **_seed_kwargs())
    assert len(report.products) == 4
    assert report.orders_created == 0
    assert not any(path.startswith("/orders") for _, path in backend.requests)


def test_advanced_seed_outcomes_add_up():
    backend = FakeBackend()
    scenarios = [
        OrderScenario("Paid", 3, 1.0, 0.0, (1, 2), 8, False),
        OrderScenario("Cancelled", 2, 0.0, 1.0, (1, 2), 8, False),
        OrderScenario("Pending", 4, 0.0, 0.0, (1, 2), 8, False),
    ]
    report = seed_advanced(_client(backend), CATALOG, scenarios=scenarios,
                           **_seed_kwargs())
    assert report.orders_created == 9
    assert (report.orders_paid, report.orders_cancelled,
            report.orders_pending) == (3, 2, 4)
    assert all(item["quantity"] <= 8 for _, item in backend.items)


def test_quick_scenarios_shrink_counts():
    quick = quick_scenarios(ADVANCED_SCENARIOS)
    assert [s.count for s in quick] == [2, 5, 1, 2, 1]
    assert [s.name for s in quick] == [s.name for s in ADVANCED_SCENARIOS]


def test_summary_lines():
    report = SeedReport(products=[
        {"id": "1", "name": "A", "price": 2.0, "stockQuantity": 0},
        {"id": "2", "name": "B", "price": 10.0, "stockQuantity": 5},
        {"id": "3", "name": "C", "price": 4.0, "stockQuantity": 50},
    ], orders_created=3, orders_paid=2, orders_pending=1)

    lines = report.summary_lines()
    assert "Products: 3 created (0 failed)" in lines
    assert "Out of stock: 1 products" in lines
    assert "Low stock: 1 products" in lines
    assert "Price range: $2.00 - $10.00" in lines
    assert "Total inventory value: $250.00" in lines
