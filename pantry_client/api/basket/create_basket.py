from typing import TYPE_CHECKING, Any

from ...types import BodyValue

if TYPE_CHECKING:
    from ...client import PantryClient


def _get_kwargs(
    basket_name: str,
    *,
    body: BodyValue,
) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "basket_name": basket_name,
        "method": "POST",
        "body": body,
    }

    return _kwargs


async def asyncio(
    basket_name: str,
    *,
    client: "PantryClient",
    body: BodyValue,
) -> Any:
    """Create Basket

     Given a basket name, this will either create a new basket inside your
    pantry, or replace an existing one.

    Args:
        basket_name (str):
        body (BodyValue): JSON object to store.

    Raises:
        TypeError: If the client is strict and body is not a JSON object.
        errors.BasketNotExistError: If the server reports the basket as missing.
        errors.PantryRequestError: If the server answers with a non-2xx status.

    Returns:
        Any: The server's confirmation, usually plain text.
    """

    kwargs = _get_kwargs(
        basket_name=basket_name,
        body=body,
    )

    return await client.request_basket(**kwargs)
