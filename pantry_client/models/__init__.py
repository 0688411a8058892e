"""Contains all the data models used in inputs/outputs"""

from .basket_summary import BasketSummary
from .details import Details
from .update_details_body import UpdateDetailsBody

__all__ = (
    "BasketSummary",
    "Details",
    "UpdateDetailsBody",
)
