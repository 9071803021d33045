"""
Synthetic data seeding through the commerce REST API.

Creates products from a catalog, then orders in several scenarios (paid,
cancelled, pending) with random items. Stock is tracked locally so orders
never ask for more than what is left.
"""
import logging
import random
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

from app.core.config import settings

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ("name", "price", "stockQuantity")


class SeedingError(Exception):
    """Raised when seeding cannot proceed at all."""


@dataclass
class ApiCallResult:
    success: bool
    data: Any = None
    error: Any = None

    @property
    def error_message(self) -> str:
        if isinstance(self.error, dict):
            return self.error.get("message") or "Unknown error"
        return str(self.error) if self.error else "Unknown error"


class SeedApiClient:
    """Synchronous client for the endpoints the seeders touch."""

    def __init__(self, base_url: str = None, retries: int = 1,
                 backoff: float = 0.5, timeout: float = None,
                 session: Optional[requests.Session] = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.retries = max(1, retries)
        self.backoff = backoff
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})
        self._sleep = sleep

    def call(self, method: str, path: str,
             payload: Optional[Dict[str, Any]] = None) -> ApiCallResult:
        """Run one request with retries. Never raises for HTTP failures."""
        url = f"{self.base_url}{path}"
        error: Any = None
        for attempt in range(self.retries):
            try:
                response = self.session.request(
                    method, url, json=payload, timeout=self.timeout)
                if response.ok:
                    data = response.json() if response.content else None
                    return ApiCallResult(success=True, data=data)
                try:
                    error = response.json()
                except ValueError:
                    error = {"message": response.text or response.reason}
            except requests.exceptions.RequestException as e:
                error = {"message": str(e)}
            if attempt < self.retries - 1:
                self._sleep(self.backoff * (attempt + 1))
        logger.error(f"API Error on {method} {path}: {error}")
        return ApiCallResult(success=False, error=error)

    def check_health(self) -> bool:
        return self.call("GET", "/products").success

    def create_product(self, product: Dict[str, Any]) -> ApiCallResult:
        payload = {k: product[k] for k in PRODUCT_FIELDS}
        return self.call("POST", "/products", payload)

    def init_order(self) -> ApiCallResult:
        return self.call("POST", "/orders/init")

    def add_order_item(self, order_id: str, product_id: str,
                       quantity: int) -> ApiCallResult:
        return self.call("POST", f"/orders/{order_id}/items",
                         {"productId": product_id, "quantity": quantity})

    def pay_order(self, order_id: str) -> ApiCallResult:
        return self.call("POST", f"/orders/{order_id}/pay")

    def cancel_order(self, order_id: str) -> ApiCallResult:
        return self.call("POST", f"/orders/{order_id}/cancel")


@dataclass
class OrderScenario:
    name: str
    count: int
    pay_probability: float = 0.0
    cancel_probability: float = 0.0
    item_range: Tuple[int, int] = (1, 5)
    max_quantity: int = 10
    distinct_items: bool = True


BASIC_SCENARIOS = [
    OrderScenario("Completed Orders", 15, pay_probability=1.0),
    OrderScenario("Cancelled Orders", 5, cancel_probability=1.0),
    OrderScenario("Pending Orders", 8),
]

ADVANCED_SCENARIOS = [
    OrderScenario("High-Value Completed Orders", 8, 1.0, 0.0, (1, 3), 8, False),
    OrderScenario("Regular Completed Orders", 20, 1.0, 0.0, (2, 6), 8, False),
    OrderScenario("Cancelled Orders", 7, 0.0, 1.0, (1, 4), 8, False),
    OrderScenario("Pending Orders", 10, 0.0, 0.0, (1, 5), 8, False),
    OrderScenario("Mixed Outcome Orders", 5, 0.6, 0.2, (2, 4), 8, False),
]


def quick_scenarios(scenarios: List[OrderScenario]) -> List[OrderScenario]:
    """Same scenarios with roughly a quarter of the orders."""
    return [
        OrderScenario(s.name, max(1, s.count // 4), s.pay_probability,
                      s.cancel_probability, s.item_range, s.max_quantity,
                      s.distinct_items)
        for s in scenarios
    ]


@dataclass
class SeedReport:
    products: List[Dict[str, Any]] = field(default_factory=list)
    products_failed: int = 0
    orders_created: int = 0
    orders_failed: int = 0
    orders_paid: int = 0
    orders_cancelled: int = 0
    orders_pending: int = 0
    items_created: int = 0
    items_failed: int = 0

    @property
    def out_of_stock(self) -> int:
        return sum(1 for p in self.products if p["stockQuantity"] == 0)

    @property
    def low_stock(self) -> int:
        return sum(1 for p in self.products if 0 < p["stockQuantity"] < 10)

    @property
    def inventory_value(self) -> float:
        return sum(p["price"] * p["stockQuantity"] for p in self.products)

    def summary_lines(self) -> List[str]:
        lines = [
            f"Products: {len(self.products)} created "
            f"({self.products_failed} failed)",
            f"Orders: {self.orders_created} total "
            f"({self.orders_failed} failed)",
            f"  Paid: {self.orders_paid}",
            f"  Cancelled: {self.orders_cancelled}",
            f"  Pending: {self.orders_pending}",
            f"Order items: {self.items_created} created "
            f"({self.items_failed} failed)",
        ]
        if self.products:
            prices = [p["price"] for p in self.products]
            lines += [
                f"Total inventory value: ${self.inventory_value:,.2f}",
                f"Out of stock: {self.out_of_stock} products",
                f"Low stock: {self.low_stock} products",
                f"Price range: ${min(prices):.2f} - ${max(prices):.2f}",
            ]
        return lines


class Seeder:
    def __init__(self, client: SeedApiClient,
                 rng: Optional[random.Random] = None,
                 sleep: Callable[[float], None] = time.sleep,
                 request_delay: float = None,
                 order_delay: float = None,
                 item_delay: float = None):
        self.client = client
        self.rng = rng or random.Random()
        self._sleep = sleep
        self.request_delay = (request_delay if request_delay is not None
                              else settings.seed_request_delay)
        self.order_delay = (order_delay if order_delay is not None
                            else settings.seed_order_delay)
        self.item_delay = (item_delay if item_delay is not None
                           else settings.seed_item_delay)
        self.report = SeedReport()

    def check_api(self) -> None:
        logger.info("Checking API availability...")
        if not self.client.check_health():
            raise SeedingError(
                f"API is not available. Please ensure the backend is running "
                f"on {self.client.base_url}")
        logger.info("API is available")

    def create_products(self, catalog: List[Dict[str, Any]]) -> None:
        total = len(catalog)
        for index, product in enumerate(catalog, start=1):
            result = self.client.create_product(product)
            if result.success:
                # Local copy: stockQuantity is decremented as orders consume it.
                self.report.products.append({"id": result.data["id"], **product})
                logger.info(f"[{index}/{total}] Created {product['name']} "
                            f"(ID: {result.data['id']})")
            else:
                self.report.products_failed += 1
                logger.warning(f"[{index}/{total}] Failed {product['name']}: "
                               f"{result.error_message}")
            self._sleep(self.request_delay)

    def _add_items(self, order_id: str, scenario: OrderScenario) -> List[str]:
        added = []
        used = set()
        for _ in range(self.rng.randint(*scenario.item_range)):
            available = [
                p for p in self.report.products
                if p["stockQuantity"] > 0
                and not (scenario.distinct_items and p["id"] in used)
            ]
            if not available:
                break
            product = self.rng.choice(available)
            quantity = self.rng.randint(
                1, min(product["stockQuantity"], scenario.max_quantity))
            result = self.client.add_order_item(order_id, product["id"], quantity)
            if result.success:
                self.report.items_created += 1
                used.add(product["id"])
                product["stockQuantity"] -= quantity
                added.append(f"{quantity}x {product['name']}")
            else:
                self.report.items_failed += 1
            self._sleep(self.item_delay)
        return added

    def _finish_order(self, order_id: str, scenario: OrderScenario) -> str:
        if self.rng.random() < scenario.pay_probability:
            if self.client.pay_order(order_id).success:
                self.report.orders_paid += 1
                return "paid"
        elif self.rng.random() < scenario.cancel_probability:
            if self.client.cancel_order(order_id).success:
                self.report.orders_cancelled += 1
                return "cancelled"
        else:
            self.report.orders_pending += 1
            return "pending"
        return "failed"

    def create_orders(self, scenarios: List[OrderScenario]) -> None:
        for scenario in scenarios:
            logger.info(f"Creating {scenario.count} {scenario.name}...")
            for i in range(scenario.count):
                result = self.client.init_order()
                if not result.success:
                    self.report.orders_failed += 1
                    logger.warning("Failed to create order")
                    continue
                order_id = result.data["id"]
                self.report.orders_created += 1
                items = self._add_items(order_id, scenario)
                outcome = self._finish_order(order_id, scenario)
                logger.info(f"  Order {i + 1}: {len(items)} items "
                            f"({', '.join(items)}), {outcome}")
                self._sleep(self.order_delay)

    def create_edge_cases(self) -> None:
        """A large paid order and a single high-value order."""
        result = self.client.init_order()
        if result.success:
            order_id = result.data["id"]
            self.report.orders_created += 1
            high_stock = [p for p in self.report.products
                          if p["stockQuantity"] > 20][:8]
            for product in high_stock:
                quantity = self.rng.randint(5, 15)
                if self.client.add_order_item(order_id, product["id"],
                                              quantity).success:
                    self.report.items_created += 1
                    product["stockQuantity"] -= quantity
                else:
                    self.report.items_failed += 1
                self._sleep(self.item_delay)
            if self.client.pay_order(order_id).success:
                self.report.orders_paid += 1
            logger.info("Large order created and paid")
        else:
            self.report.orders_failed += 1

        result = self.client.init_order()
        if not result.success:
            self.report.orders_failed += 1
            return
        order_id = result.data["id"]
        self.report.orders_created += 1
        expensive = next((p for p in self.report.products
                          if p["price"] > 200 and p["stockQuantity"] > 0), None)
        if expensive is None:
            self.report.orders_pending += 1
            logger.info("No high-value product available, order left pending")
            return
        if self.client.add_order_item(order_id, expensive["id"], 1).success:
            self.report.items_created += 1
            expensive["stockQuantity"] -= 1
        if self.client.pay_order(order_id).success:
            self.report.orders_paid += 1
        logger.info(f"High-value order: 1x {expensive['name']}")


def seed_basic(client: SeedApiClient, catalog: List[Dict[str, Any]],
               **seeder_kwargs) -> SeedReport:
    seeder = Seeder(client, **seeder_kwargs)
    seeder.check_api()
    seeder.create_products(catalog)
    seeder.create_orders(BASIC_SCENARIOS)
    seeder.create_edge_cases()
    return seeder.report


def seed_advanced(client: SeedApiClient, catalog: List[Dict[str, Any]],
                  scenarios: List[OrderScenario] = None,
                  products_only: bool = False,
                  **seeder_kwargs) -> SeedReport:
    seeder = Seeder(client, **seeder_kwargs)
    seeder.check_api()
    seeder.create_products(catalog)
    if not products_only:
        seeder.create_orders(scenarios if scenarios is not None
                             else ADVANCED_SCENARIOS)
    return seeder.report
