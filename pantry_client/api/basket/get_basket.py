from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ...client import PantryClient


def _get_kwargs(basket_name: str) -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "basket_name": basket_name,
        "method": "GET",
    }

    return _kwargs


async def asyncio(
    basket_name: str,
    *,
    client: "PantryClient",
) -> Any:
    """Get Basket

     Given a basket name, return the full contents of the basket.

    Args:
        basket_name (str):

    Raises:
        errors.BasketNotExistError: If the basket does not exist.
        errors.PantryRequestError: If the server answers with a non-2xx status.

    Returns:
        Any: The basket contents; the caller asserts their shape.
    """

    kwargs = _get_kwargs(
        basket_name=basket_name,
    )

    return await client.request_basket(**kwargs)
