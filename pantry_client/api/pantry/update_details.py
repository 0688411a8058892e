import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Union

from ...models.details import Details
from ...models.update_details_body import UpdateDetailsBody
from .get_details import _parse_response

if TYPE_CHECKING:
    from ...client import PantryClient

UPDATABLE_FIELDS = frozenset({"name", "description"})


def _get_kwargs(
    *,
    client: "PantryClient",
    body: Union[UpdateDetailsBody, Mapping[str, str]],
) -> dict[str, Any]:
    if not isinstance(body, UpdateDetailsBody):
        unknown = sorted(set(body) - UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Only name and description can be updated, got {unknown}")
        body = UpdateDetailsBody.from_dict(body)

    _kwargs: dict[str, Any] = {
        "method": "PUT",
        "url": client.pantry_url,
        "headers": {"Content-Type": "application/json"},
        "content": json.dumps(body.to_dict()),
    }

    return _kwargs


async def asyncio(
    *,
    client: "PantryClient",
    body: Union[UpdateDetailsBody, Mapping[str, str]],
) -> Details:
    """Update Details

     Update the name and/or description of the pantry. Fields left unset are
    not sent. A mapping body may only contain the keys name and description.

    Args:
        body (UpdateDetailsBody | Mapping[str, str]):

    Raises:
        TypeError: If a mapping body has keys other than name and description.
        errors.PantryRequestError: If the server answers with a non-2xx status.
        httpx.TimeoutException: If the transport times out.

    Returns:
        Details
    """

    kwargs = _get_kwargs(
        client=client,
        body=body,
    )

    payload = await client.request(**kwargs)

    return _parse_response(payload)
