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
        "method": "PUT",
        "body": body,
    }

    return _kwargs


async def asyncio(
    basket_name: str,
    *,
    client: "PantryClient",
    body: BodyValue,
) -> Any:
    """Update Basket

     Given a basket name, this will update the existing contents and return
    the contents of the newly updated basket. The server performs a deep
    merge: values of existing keys are overwritten, nested objects and
    arrays are extended.

    Args:
        basket_name (str):
        body (BodyValue): JSON object to merge in.

    Raises:
        TypeError: If the client is strict and body is not a JSON object.
        errors.BasketNotExistError: If the basket does not exist.
        errors.PantryRequestError: If the server answers with a non-2xx status.

    Returns:
        Any: The merged basket contents.
    """

    kwargs = _get_kwargs(
        basket_name=basket_name,
        body=body,
    )

    return await client.request_basket(**kwargs)
