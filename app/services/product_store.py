"""Async client for the remote product REST API."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

import httpx
from pydantic import ValidationError

from app.constants.dashboard import DefaultMessage, ErrorCode
from app.core.config import settings
from app.schemas.products import ErrorResponse, IdResult, Product, ProductRequest

__logger__ = logging.getLogger(__name__)


class ProductStoreError(Exception):
    """Structured failure from the product API."""

    def __init__(self, message: str, status_code: int = 500,
                 error_code: str = ErrorCode.UNKNOWN_ERROR,
                 timestamp: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.timestamp = timestamp or datetime.now(timezone.utc).isoformat()

    @classmethod
    def from_error_response(cls, body: ErrorResponse) -> "ProductStoreError":
        return cls(
            body.message,
            status_code=body.status,
            error_code=body.error,
            timestamp=body.timestamp,
        )


class ValidationFailure(ProductStoreError):
    pass


class NotFound(ProductStoreError):
    pass


class NetworkFailure(ProductStoreError):
    pass


class ServerFailure(ProductStoreError):
    pass


def _error_class_for(status_code: int) -> type:
    if status_code in (400, 422):
        return ValidationFailure
    if status_code == 404:
        return NotFound
    if status_code >= 500:
        return ServerFailure
    return ProductStoreError


def error_from_response(response: httpx.Response) -> ProductStoreError:
    """Build the matching ProductStoreError for a non-2xx response."""
    error_cls = _error_class_for(response.status_code)
    try:
        body = ErrorResponse.model_validate(response.json())
    except (ValueError, ValidationError):
        return error_cls(
            response.reason_phrase or f"HTTP {response.status_code}",
            status_code=response.status_code,
        )
    # The body status wins over the transport status when they disagree.
    error_cls = _error_class_for(body.status)
    return error_cls.from_error_response(body)


class ProductStoreClient:
    """
    Thin wrapper over the /products resource.

    Every method raises a ProductStoreError subclass on failure, so callers
    only ever need to handle one exception family.
    """

    def __init__(self, base_url: str = None, timeout: float = None,
                 client: Optional[httpx.AsyncClient] = None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Content-Type": "application/json"},
        )

    async def _request(self, method: str, path: str,
                       payload: Optional[dict] = None) -> httpx.Response:
        try:
            response = await self._client.request(method, path, json=payload)
        except httpx.RequestError as e:
            __logger__.error(f"Product API {method} {path} failed: {e}")
            raise NetworkFailure(
                str(e) or DefaultMessage.NETWORK,
                status_code=500,
                error_code=ErrorCode.NETWORK_ERROR,
            ) from e
        if response.is_error:
            __logger__.error(
                f"Product API {method} error on {path}: "
                f"{response.status_code} - {response.text}")
            raise error_from_response(response)
        return response

    async def list_products(self) -> List[Product]:
        response = await self._request("GET", "/products")
        return [Product.model_validate(item) for item in response.json()]

    async def create_product(self, request: ProductRequest) -> IdResult:
        response = await self._request("POST", "/products", request.to_payload())
        return IdResult.model_validate(response.json())

    async def update_product(self, product_id: str,
                             request: ProductRequest) -> None:
        await self._request("PUT", f"/products/{product_id}", request.to_payload())

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"/products/{product_id}")

    async def aclose(self) -> None:
        await self._client.aclose()
