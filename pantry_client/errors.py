"""Errors raised by the Pantry client.

Every non-2xx response becomes a ``PantryRequestError`` whose message is the
response body, unchanged. Basket endpoints additionally recognize the
service's "basket does not exist" text and raise ``BasketNotExistError``.
"""

import re
from typing import Optional

MISSING_BASKET_PREFIX = "Could not"
MISSING_BASKET_SUFFIX = "does not exist"
MISSING_BASKET_PATTERN = re.compile(r"Could not \w+ basket: (.+) does not exist")


class PantryError(Exception):
    """Base class for errors raised by this package."""


class PantryRequestError(PantryError):
    """Raised when the Pantry API answers with a non-success status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message

        super().__init__(message)


class BasketNotExistError(PantryRequestError):
    """Raised by basket operations when the named basket is missing."""

    def __init__(self, status_code: int, message: str, basket_name: str):
        super().__init__(status_code, message)
        self.basket_name = basket_name


def is_missing_basket_message(message: str) -> bool:
    return message.startswith(MISSING_BASKET_PREFIX) and message.endswith(MISSING_BASKET_SUFFIX)


def parse_missing_basket_name(message: str) -> Optional[str]:
    """
    Extract the basket name from a "does not exist" message.

    The service phrases it as ``Could not <verb> basket: <name> does not exist``.
    This couples us to the exact wording of a third-party message, so keep
    all knowledge of it here.

    Args:
        message: Raw response body of a failed request

    Returns:
        The basket name, the whole message when it looks like a missing-basket
        error but the name cannot be captured, or None for any other message.
    """
    if not is_missing_basket_message(message):
        return None

    match = MISSING_BASKET_PATTERN.search(message)
    if match is None:
        return message
    return match.group(1)


__all__ = [
    "BasketNotExistError",
    "PantryError",
    "PantryRequestError",
    "is_missing_basket_message",
    "parse_missing_basket_name",
]
