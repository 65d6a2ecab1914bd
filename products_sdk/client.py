# products_sdk/client.py
import json
import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import httpx
from rich.console import Console
from rich.markup import escape

from . import config
from .errors import ApiError, TransportError, ResponseParseError
from .models import ApiResponse, ErrorKind, Failure, ProductIn, NEW_PRODUCT, SALE_PRODUCT

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    return escape(str(value))


def _field(item: Any, key: str) -> Any:
    return item.get(key) if isinstance(item, dict) else None


class ProductsClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = config.REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        self.base_url = (base_url or config.base_url()).rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.last_failure: Optional[Failure] = None

    # -----------------------
    # Request helper
    # -----------------------
    async def _request(self, method: str, path: str, data: Any = None) -> ApiResponse:
        """
        One request/response exchange on a fresh connection.
        Raises TransportError or ResponseParseError; never retries.
        """
        content = json.dumps(data) if data else None
        logger.debug("%s %s%s body=%s", method, self.base_url, path, content)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                r = await client.request(
                    method, path, content=content, headers={"Content-Type": "application/json"}
                )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.debug("%s %s failed: %r", method, path, e)
            raise TransportError(str(e) or e.__class__.__name__) from e

        logger.debug("%s %s -> %s (%d bytes)", method, path, r.status_code, len(r.content))
        try:
            parsed = r.json()
        except ValueError as e:
            raise ResponseParseError() from e
        return ApiResponse(status_code=r.status_code, data=parsed)

    # -----------------------
    # Failure reporting
    # -----------------------
    def _record(self, operation: str, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        self.last_failure = Failure(kind=kind, operation=operation, message=message, status_code=status_code)
        logger.info("%s failed (%s): %s", operation, kind.value, message)

    def _error(self, operation: str, kind: ErrorKind, message: str):
        self.err_console.print(f"[red]❌ Error:[/red] {_text(message)}")
        self._record(operation, kind, message)

    def _unexpected_status(self, operation: str, r: ApiResponse, text: str):
        detail = f"HTTP {r.status_code}"
        server_message = _server_message(r.data)
        if server_message:
            detail += f": {server_message}"
        self.console.print(f"[red]❌ {text}[/red] ({_text(detail)})")
        self._record(operation, ErrorKind.STATUS, text, r.status_code)

    async def _call(
        self, operation: str, method: str, path: str, expected: int, failure_text: str, data: Any = None
    ) -> Optional[ApiResponse]:
        """Returns the response when it carries the expected status, else None after reporting."""
        self.last_failure = None
        try:
            r = await self._request(method, path, data)
        except ApiError as e:
            self._error(operation, e.kind, str(e))
            return None
        if r.status_code != expected:
            self._unexpected_status(operation, r, failure_text)
            return None
        return r

    def _payload(self, operation: str, r: ApiResponse, shape: type = dict) -> Any:
        payload = r.data.get("data") if isinstance(r.data, dict) else None
        if not isinstance(payload, shape):
            self._error(operation, ErrorKind.PARSE, f"Response did not contain a {shape.__name__} in its data field")
            return None
        return payload

    # -----------------------
    # CRUD operations
    # -----------------------
    async def create_product(self, product: Optional[ProductIn] = None) -> Optional[str]:
        product = product or NEW_PRODUCT
        self.console.print("\n📦 [bold]CREATE:[/bold] Adding a new product...\n")

        r = await self._call("create", "POST", "/api/products", 201, "Failed to create product", product.model_dump())
        if r is None:
            return None
        created = self._payload("create", r)
        if created is None:
            return None
        if "_id" not in created:
            self._error("create", ErrorKind.PARSE, "Response did not contain a product id")
            return None

        self.console.print("[green]✅ Product created successfully![/green]")
        self.console.print(f"Product ID: {_text(created['_id'])}")
        self.console.print(f"Name: {_text(_field(created, 'name'))}")
        self.console.print(f"Price: ${_text(_field(created, 'price'))}")
        return created["_id"]

    async def get_all_products(self) -> List[Dict[str, Any]]:
        self.console.print("\n📋 [bold]READ:[/bold] Getting all products...\n")

        r = await self._call("list", "GET", "/api/products", 200, "Failed to get products")
        if r is None:
            return []
        products = self._payload("list", r, list)
        if products is None:
            return []

        count = r.data.get("count", len(products))
        self.console.print(f"[green]✅ Found {_text(count)} products:[/green]\n")
        for index, product in enumerate(products, start=1):
            self.console.print(f"{index}. {_text(_field(product, 'name'))}")
            self.console.print(f"   Category: {_text(_field(product, 'category'))}")
            self.console.print(f"   Price: ${_text(_field(product, 'price'))}")
            self.console.print(f"   ID: {_text(_field(product, '_id'))}\n")
        return products

    async def get_product_by_id(self, product_id: str) -> Optional[Dict[str, Any]]:
        self.console.print(f"\n🔍 [bold]READ:[/bold] Getting product {_text(product_id)}...\n")

        r = await self._call("get", "GET", f"/api/products/{product_id}", 200, "Product not found")
        if r is None:
            return None
        product = self._payload("get", r)
        if product is None:
            return None

        self.console.print("[green]✅ Found product:[/green]")
        self.console.print(f"   Name: {_text(_field(product, 'name'))}")
        self.console.print(f"   Category: {_text(_field(product, 'category'))}")
        self.console.print(f"   Price: ${_text(_field(product, 'price'))}")
        return product

    async def update_product(self, product_id: str, changes: Optional[ProductIn] = None) -> Optional[Dict[str, Any]]:
        changes = changes or SALE_PRODUCT
        self.console.print(f"\n✏️  [bold]UPDATE:[/bold] Updating product {_text(product_id)}...\n")

        r = await self._call(
            "update", "PUT", f"/api/products/{product_id}", 200, "Failed to update product", changes.model_dump()
        )
        if r is None:
            return None
        product = self._payload("update", r)
        if product is None:
            return None

        self.console.print("[green]✅ Product updated successfully![/green]")
        self.console.print(f"New name: {_text(_field(product, 'name'))}")
        self.console.print(f"New price: ${_text(_field(product, 'price'))}")
        return product

    async def delete_product(self, product_id: str) -> bool:
        self.console.print(f"\n🗑️  [bold]DELETE:[/bold] Deleting product {_text(product_id)}...\n")

        r = await self._call("delete", "DELETE", f"/api/products/{product_id}", 200, "Failed to delete product")
        if r is None:
            return False

        message = _field(r.data, "message")
        self.console.print("[green]✅ Product deleted successfully![/green]")
        self.console.print(f"Message: {_text(message)}")
        return True

    async def search_by_category(self, category: str) -> List[Dict[str, Any]]:
        self.console.print(f"\n🔎 [bold]SEARCH:[/bold] Finding all {_text(category)} products...\n")

        # spaces and slashes must not leak into the path
        encoded = quote(category, safe="!'()*")
        r = await self._call("search", "GET", f"/api/products/search/{encoded}", 200, "Search failed")
        if r is None:
            return []
        products = self._payload("search", r, list)
        if products is None:
            return []

        count = r.data.get("count", len(products))
        self.console.print(f"[green]✅ Found {_text(count)} products in {_text(category)}:[/green]\n")
        for product in products:
            self.console.print(f"- {_text(_field(product, 'name'))}: ${_text(_field(product, 'price'))}")
        return products


def _server_message(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    for key in ("message", "detail", "error"):
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    return None
