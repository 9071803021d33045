import asyncio
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from app.schemas.products import IdResult, Product, ProductRequest
from app.services.product_store import NetworkFailure, NotFound


def make_product(product_id: str, name: str = None, price: float = 1.0,
                 stock_quantity: int = 10, sold_count: int = 0,
                 sold_sum: float = 0.0,
                 created_at: str = "2025-01-05T14:30:00Z") -> Product:
    return Product(
        id=product_id,
        name=name or f"Product {product_id}",
        price=price,
        stock_quantity=stock_quantity,
        created_at=created_at,
        sold_count=sold_count,
        sold_sum=sold_sum,
    )


class FakeStore:
    """In-memory product store with failure injection and call gating."""

    def __init__(self, products: List[Product] = None):
        self.products: List[Product] = list(products or [])
        self.calls: List[str] = []
        self.failures: Dict[str, Exception] = {}
        self.gates: Dict[str, asyncio.Event] = {}
        self._next_id = 100

    def fail(self, operation: str, exc: Exception) -> None:
        self.failures[operation] = exc

    def gate(self, operation: str) -> asyncio.Event:
        event = asyncio.Event()
        self.gates[operation] = event
        return event

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        gate = self.gates.get(operation)
        if gate is not None:
            await gate.wait()
        exc = self.failures.pop(operation, None)
        if exc is not None:
            raise exc

    def list_count(self) -> int:
        return self.calls.count("list")

    async def list_products(self) -> List[Product]:
        await self._enter("list")
        return list(self.products)

    async def create_product(self, request: ProductRequest) -> IdResult:
        await self._enter("create")
        self._next_id += 1
        product_id = str(self._next_id)
        self.products.append(make_product(
            product_id, name=request.name, price=request.price,
            stock_quantity=request.stock_quantity))
        return IdResult(id=product_id)

    async def update_product(self, product_id: str,
                             request: ProductRequest) -> None:
        await self._enter("update")
        for i, p in enumerate(self.products):
            if p.id == product_id:
                self.products[i] = make_product(
                    product_id, name=request.name, price=request.price,
                    stock_quantity=request.stock_quantity)
                return
        raise NotFound(f"Product not found: {product_id}", status_code=404,
                       error_code="NOT_FOUND")

    async def delete_product(self, product_id: str) -> None:
        await self._enter("delete")
        before = len(self.products)
        self.products = [p for p in self.products if p.id != product_id]
        if len(self.products) == before:
            raise NotFound(f"Product not found: {product_id}",
                           status_code=404, error_code="NOT_FOUND")


class FixedClock:
    def __init__(self):
        self.now = datetime(2025, 1, 5, 14, 30, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def store():
    return FakeStore([make_product("1", "Bananas"), make_product("2", "Apples")])


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def network_error():
    return NetworkFailure("Connection refused", error_code="NETWORK_ERROR")
