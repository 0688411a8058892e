"""
Pantry API Client

Async wrapper around the Pantry REST API (https://getpantry.cloud).

Usage:
    from pantry_client import PantryClient

    client = PantryClient("your-pantry-id")
    details = await client.get_details()
    await client.create_basket("orders", {"open": []})

    orders = client.use_basket("orders")
    await orders.update({"open": [{"id": 1}]})
"""

import json
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union
from urllib.parse import quote

import httpx
from attrs import define, field

from .api.basket import create_basket, delete_basket, get_basket, update_basket
from .api.pantry import get_details, update_details
from .errors import BasketNotExistError, PantryRequestError, parse_missing_basket_name
from .models import Details, UpdateDetailsBody
from .types import UNSET, BodyValue, Fetch, JSONValue, Unset

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://getpantry.cloud/apiv1"
JSON_CONTENT_TYPE = "application/json"
BODILESS_METHODS = frozenset({"GET", "HEAD", "DELETE"})


@define(frozen=True)
class PantryConfig:
    """Immutable settings for one pantry.

    Attributes:
        pantry_id: Service-assigned pantry identifier, passed through as-is.
        base_url: API root; requests go to ``{base_url}/pantry/{pantry_id}``.
        timeout: Seconds, applied by the default transport only.
        strict: Reject basket bodies that are not JSON objects before sending.
    """

    pantry_id: str
    base_url: str = field(default=DEFAULT_BASE_URL, converter=lambda url: url.rstrip("/"))
    timeout: float = 10.0
    strict: bool = False


def default_fetch(timeout: float) -> Fetch:
    """Build a transport that uses a short-lived httpx.AsyncClient per call."""

    async def fetch(
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[str] = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(timeout=timeout) as http_client:
            return await http_client.request(method, url, headers=headers, content=content)

    return fetch


class PantryClient:
    """
    Client bound to a single pantry.

    Holds the pantry config and a transport, both fixed at construction.
    Every call is one independent request; the client keeps no other state.

    Args:
        pantry_id: Your pantry ID
        fetch: Async transport; defaults to httpx. ``httpx.AsyncClient.request``
            of an existing client can be passed directly.
        base_url: Override the API root (e.g. for a local fake)
        timeout: Timeout in seconds for the default transport
        strict: Only accept JSON objects as basket bodies
    """

    def __init__(
        self,
        pantry_id: str,
        fetch: Optional[Fetch] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        strict: bool = False,
    ):
        self._config = PantryConfig(pantry_id=pantry_id, base_url=base_url, timeout=timeout, strict=strict)
        self._fetch = fetch or default_fetch(self._config.timeout)

    @classmethod
    def from_config(cls, config: PantryConfig, fetch: Optional[Fetch] = None) -> "PantryClient":
        return cls(
            config.pantry_id,
            fetch,
            base_url=config.base_url,
            timeout=config.timeout,
            strict=config.strict,
        )

    @property
    def config(self) -> PantryConfig:
        return self._config

    @property
    def pantry_url(self) -> str:
        return f"{self._config.base_url}/pantry/{self._config.pantry_id}"

    def basket_url(self, basket_name: str) -> str:
        segment = quote(basket_name, safe="")
        # httpx drops "." and ".." path segments
        if set(basket_name) == {"."}:
            segment = segment.replace(".", "%2E")
        return f"{self.pantry_url}/basket/{segment}"

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[str] = None,
    ) -> Any:
        """
        Send one request and decode the response.

        The result is parsed JSON when the response declares a JSON content
        type and the raw text otherwise. Callers assert the shape they expect;
        nothing is checked at runtime.

        Raises:
            PantryRequestError: The response status is not 2xx. The message is
                the response body, verbatim.
        """
        logger.debug(f"{method} {url}")
        response = await self._fetch(method, url, headers=headers, content=content)

        if not response.is_success:
            logger.warning(f"{method} {url} failed with status {response.status_code}")
            raise PantryRequestError(response.status_code, response.text)

        logger.debug(f"{method} {url} -> {response.status_code}")
        if response.headers.get("content-type", "").startswith(JSON_CONTENT_TYPE):
            return response.json()
        return response.text

    async def request_basket(
        self,
        basket_name: str,
        method: str = "GET",
        body: Union[BodyValue, JSONValue, Unset] = UNSET,
    ) -> Any:
        """
        Send a request to one basket.

        The body is serialized only for methods that carry one. A failure whose
        text says the basket does not exist is raised as BasketNotExistError.

        Raises:
            TypeError: Strict mode is on and the body is not a JSON object.
            BasketNotExistError: The service reports the basket as missing.
            PantryRequestError: Any other non-2xx response.
        """
        method = method.upper()
        content: Optional[str] = None
        if method not in BODILESS_METHODS and not isinstance(body, Unset):
            if self._config.strict and not isinstance(body, Mapping):
                raise TypeError(f"Basket body must be a JSON object, got {type(body).__name__}")
            content = json.dumps(body)

        try:
            return await self.request(
                method,
                self.basket_url(basket_name),
                headers={"Content-Type": JSON_CONTENT_TYPE},
                content=content,
            )
        except PantryRequestError as e:
            missing_name = parse_missing_basket_name(e.message)
            if missing_name is None:
                raise
            logger.debug(f"Basket {missing_name!r} does not exist")
            raise BasketNotExistError(e.status_code, e.message, missing_name) from e

    # API methods

    async def get_details(self) -> Details:
        """Return the pantry details, including the baskets stored in it."""
        return await get_details.asyncio(client=self)

    async def update_details(self, body: Union[UpdateDetailsBody, Mapping[str, str]]) -> Details:
        """Update the pantry's name and/or description."""
        return await update_details.asyncio(body=body, client=self)

    async def create_basket(self, basket_name: str, body: BodyValue) -> Any:
        """Create a basket, or replace it if it already exists."""
        return await create_basket.asyncio(basket_name, body=body, client=self)

    async def update_basket(self, basket_name: str, body: BodyValue) -> Any:
        """Deep-merge body into an existing basket and return the merged contents."""
        return await update_basket.asyncio(basket_name, body=body, client=self)

    async def get_basket(self, basket_name: str) -> Any:
        """Return the full contents of a basket."""
        return await get_basket.asyncio(basket_name, client=self)

    async def delete_basket(self, basket_name: str) -> str:
        """Delete the entire basket. This cannot be undone."""
        return await delete_basket.asyncio(basket_name, client=self)

    def use_basket(self, basket_name: str) -> "BasketHandle":
        """Bind basket operations to one name."""
        return BasketHandle(client=self, basket_name=basket_name)


@define(frozen=True)
class BasketHandle:
    """Basket operations with the basket name already filled in."""

    client: PantryClient
    basket_name: str

    async def create(self, body: BodyValue) -> Any:
        return await self.client.create_basket(self.basket_name, body)

    async def update(self, body: BodyValue) -> Any:
        return await self.client.update_basket(self.basket_name, body)

    async def get(self) -> Any:
        return await self.client.get_basket(self.basket_name)

    async def delete(self) -> str:
        return await self.client.delete_basket(self.basket_name)
