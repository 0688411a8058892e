from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Union

from ...models.details import Details

if TYPE_CHECKING:
    from ...client import PantryClient


def _get_kwargs(*, client: "PantryClient") -> dict[str, Any]:
    _kwargs: dict[str, Any] = {
        "method": "GET",
        "url": client.pantry_url,
    }

    return _kwargs


def _parse_response(payload: Any) -> Union[Details, Any]:
    if isinstance(payload, Mapping):
        return Details.from_dict(payload)
    return payload


async def asyncio(*, client: "PantryClient") -> Details:
    """Get Details

     Given a pantry ID, return the details of the pantry, including a list of
    baskets currently stored inside it.

    Raises:
        errors.PantryRequestError: If the server answers with a non-2xx status.
        httpx.TimeoutException: If the transport times out.

    Returns:
        Details
    """

    kwargs = _get_kwargs(client=client)

    payload = await client.request(**kwargs)

    return _parse_response(payload)
