"""Contains some shared types for properties"""

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any, Literal, Optional, Protocol, Union

import httpx


class Unset:
    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Unset = Unset()

PrimitiveValue = Union[str, int, float, bool, None]
ArrayValue = Sequence["JSONValue"]
ObjectValue = Mapping[str, "JSONValue"]
JSONValue = Union[PrimitiveValue, ArrayValue, ObjectValue]

# Basket bodies are objects. Only strict mode enforces it at runtime.
BodyValue = Union[ObjectValue, MutableMapping[str, Any]]


class Fetch(Protocol):
    """Async transport contract.

    ``httpx.AsyncClient.request`` satisfies it, so a bound method of an
    existing client can be passed straight to ``PantryClient``.
    """

    async def __call__(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        content: Optional[str] = None,
    ) -> httpx.Response: ...


__all__ = ["UNSET", "ArrayValue", "BodyValue", "Fetch", "JSONValue", "ObjectValue", "PrimitiveValue", "Unset"]
