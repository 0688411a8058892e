"""
Pantry API Client

Async client for Pantry, free perishable JSON storage for small projects.

Usage:
    from pantry_client import PantryClient

    client = PantryClient("your-pantry-id")
    details = await client.get_details()
    basket = await client.use_basket("orders").get()
"""

import logging

from .client import BasketHandle, PantryClient, PantryConfig
from .errors import BasketNotExistError, PantryError, PantryRequestError
from .models import BasketSummary, Details, UpdateDetailsBody

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "BasketHandle",
    "BasketNotExistError",
    "BasketSummary",
    "Details",
    "PantryClient",
    "PantryConfig",
    "PantryError",
    "PantryRequestError",
    "UpdateDetailsBody",
)
