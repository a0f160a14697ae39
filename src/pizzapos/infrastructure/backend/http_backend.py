"""HTTP implementation of PosBackend.

Talks JSON to the shop's backend service. Field names on the wire are
the backend's (``buyer``, ``products``, ``image_path`` ...); this module
is the only place that knows them.

Error mapping: HTTP 404 on a single product becomes NotFoundError. A 404
on a collection endpoint means the backend is misrouted, so it is a
BackendError like transport failures, any other error status and bodies
that do not decode.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable, TypeVar

import httpx

from pizzapos.domain.exceptions import BackendError, DomainException, NotFoundError
from pizzapos.domain.model.order import (
    DeliveryService,
    Order,
    OrderDraft,
    OrderLineItem,
    PaymentMethod,
)
from pizzapos.domain.model.product import Product, ProductDraft
from pizzapos.domain.model.value_objects import Money, Quantity
from pizzapos.domain.repository.pos_backend import PosBackend

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

T = TypeVar("T")


class HttpPosBackend(PosBackend):

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(base_url=self._base_url, timeout=timeout)

    # --- PosBackend interface -------------------------------------------------

    async def list_products(self) -> list[Product]:
        raw = await self._get_json("GET", "/products")
        return self._decode(raw, lambda items: [self._product_to_domain(i) for i in items])

    async def list_orders(self) -> list[Order]:
        raw = await self._get_json("GET", "/orders")
        return self._decode(raw, lambda items: [self._order_to_domain(i) for i in items])

    async def create_product(self, draft: ProductDraft) -> Product:
        body = {"product": self._product_to_raw(draft, product_id=None)}
        raw = await self._get_json("POST", "/products", json=body)
        return self._decode(raw, self._product_to_domain)

    async def update_product(self, product: Product) -> Product:
        body = {"product": self._product_to_raw(product, product_id=product.id)}
        response = await self._request(
            "PUT", f"/products/{product.id}", json=body, single_resource=True
        )
        # Some backends acknowledge an update without echoing the product.
        if not response.content:
            return product
        return self._decode(self._json(response), self._product_to_domain)

    async def delete_product(self, product_id: str) -> None:
        await self._request("DELETE", f"/products/{product_id}", single_resource=True)

    async def create_order(self, draft: OrderDraft) -> Order:
        body = {"order": self._draft_to_raw(draft)}
        raw = await self._get_json("POST", "/orders", json=body)
        return self._decode(raw, self._order_to_domain)

    async def aclose(self) -> None:
        await self._client.aclose()

    # --- Transport ------------------------------------------------------------

    async def _request(
        self, method: str, path: str, single_resource: bool = False, **kwargs: Any
    ) -> httpx.Response:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s%s failed: %s", method, self._base_url, path, exc)
            raise BackendError(f"{method} {path} failed: {exc}") from exc

        if response.status_code == 404 and single_resource:
            raise NotFoundError(f"{method} {path}: not found")
        if response.is_error:
            logger.warning("%s %s%s returned HTTP %d", method, self._base_url, path, response.status_code)
            raise BackendError(f"{method} {path} returned HTTP {response.status_code}")
        return response

    async def _get_json(self, method: str, path: str, **kwargs: Any) -> Any:
        return self._json(await self._request(method, path, **kwargs))

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise BackendError(f"Backend sent invalid JSON: {exc}") from exc

    @staticmethod
    def _decode(raw: Any, convert: Callable[[Any], T]) -> T:
        try:
            return convert(raw)
        except (KeyError, TypeError, ValueError, DomainException) as exc:
            raise BackendError(f"Backend sent a malformed record: {exc!r}") from exc

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _product_to_raw(product: Product | ProductDraft, product_id: str | None) -> dict:
        return {
            "id": product_id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "image_path": product.image_path,
        }

    @staticmethod
    def _product_to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            description=raw.get("description") or "",
            price=Money.of(raw["price"]),
            image_path=raw.get("image_path") or None,
        )

    @classmethod
    def _draft_to_raw(cls, draft: OrderDraft) -> dict:
        return {
            "buyer": draft.buyer,
            "products": [
                {
                    "product_id": item.product_id,
                    "quantity": item.quantity.value,
                    "product": cls._product_to_raw(item.product, product_id=item.product.id),
                }
                for item in draft.items
            ],
            "payment_method": draft.payment_method.value,
            "delivery_service": draft.delivery_service.value,
            "coupon_code": draft.coupon_code,
            "subtotal": str(draft.subtotal.amount),
            "tax": str(draft.tax.amount),
            "total": str(draft.total.amount),
        }

    @classmethod
    def _order_to_domain(cls, raw: dict) -> Order:
        created_at = datetime.fromisoformat(raw["created_at"])
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Order(
            id=int(raw["id"]),
            created_at=created_at,
            buyer=raw["buyer"],
            items=tuple(
                OrderLineItem(
                    product_id=str(i["product_id"]),
                    quantity=Quantity(int(i["quantity"])),
                    product=cls._product_to_domain(i["product"]),
                )
                for i in raw["products"]
            ),
            payment_method=PaymentMethod(raw["payment_method"]),
            delivery_service=DeliveryService(raw["delivery_service"]),
            coupon_code=raw.get("coupon_code") or None,
            subtotal=Money.of(raw["subtotal"]),
            tax=Money.of(raw["tax"]),
            total=Money.of(raw["total"]),
        )
